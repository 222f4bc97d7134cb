"""
Adaptador de entrada: Parser de estados de cuenta BCA (mutasi rekening).

DIFERENCIA ARQUITECTURAL con un parser de columnas:
El texto que llega aquí NO tiene columnas fiables. Sale de objetos de
texto sueltos del PDF o de una transcripción de OCR, así que una misma
fila del estado de cuenta aparece partida en varias líneas:

    05/01
    0211/FTSCY/WS95051
    PEMBAYARAN INVOICE
    500.000,00 DB
    10.000.000,00

Por eso el parser trabaja por BLOQUES: un bloque empieza en una línea
que es solo una fecha DD/MM y termina justo antes de la siguiente.

PRE-ESCANEO (independiente del orden):
- "PERIODE : JANUARI 2025" → periodo, año y mes.
- "SALDO AWAL" / "SALDO AKHIR" → saldo inicial y final.
- Sin periodo → año y mes por defecto INYECTADOS (nunca el reloj).

MÁQUINA DE ESTADOS (cursor `i` sobre las líneas no vacías):

    SEEK_DATE ──fecha──▶ COLLECT_BLOCK ──▶ VALIDATE ──ok──▶ EMIT
        ▲                                     │               │
        └────────────── descartado ───────────┘◀──────────────┘
    SEEK_DATE ──fin de líneas──▶ DONE

- SEEK_DATE: avanza hasta una línea DD/MM válida; el resto es ruido.
- COLLECT_BLOCK: junta las líneas siguientes tal cual hasta la próxima
  fecha (sin consumirla) o hasta 50 líneas.
- VALIDATE: descarta encabezados/pies, bloques de menos de 3 caracteres
  y bloques sin monto. Aquí se extraen monto, saldo, polaridad y
  referencia.
- EMIT: agrega la Transaction y vuelve a SEEK_DATE.

LIMITACIÓN CONOCIDA (se preserva a propósito):
Solo se usan el PRIMER monto (movimiento) y el ÚLTIMO (saldo) del
bloque. Si un bloque trae más de dos montos (ej: comisión junto al
principal), los del medio se ignoran.
"""

import re
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR
from decimal import Decimal
from enum import Enum, auto

from bca_parser.domain.models.parsed_statement import ParsedStatement
from bca_parser.domain.models.transaction import Transaction
from bca_parser.domain.ports.statement_parser import StatementParser
from bca_parser.domain.services.aggregator import finalize
from bca_parser.domain.shared.amount import normalize
from bca_parser.domain.shared.date_parser import build_date, match_day_month, month_bounds
from bca_parser.domain.shared.month_map import MONTH_NAMES, month_to_int


class _State(Enum):
    SEEK_DATE = auto()
    COLLECT_BLOCK = auto()
    VALIDATE = auto()
    EMIT = auto()
    DONE = auto()


@dataclass
class _Block:
    """Materia prima de un movimiento: la fecha DD/MM y sus líneas."""

    day: int
    month: int
    lines: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BCAStatementParser(StatementParser):
    """Parser por bloques para estados de cuenta BCA.

    Es determinista: el año y mes por defecto (cuando el texto no trae
    PERIODE) se reciben por constructor. Parsear dos veces el mismo texto
    produce exactamente el mismo ParsedStatement.
    """

    MAX_BLOCK_LINES: int = 50
    """Tope de líneas por bloque, contra bloques desbocados por texto malformado."""

    MAX_AMOUNT: Decimal = Decimal("100000000000")
    """Montos >= a esto son números de página u otros absurdos."""

    _PERIOD_PATTERN: re.Pattern[str] = re.compile(
        r"PERIODE[:\s]+(" + "|".join(MONTH_NAMES) + r")\s+(\d{4})",
        re.IGNORECASE | re.ASCII,
    )
    _OPENING_PATTERN: re.Pattern[str] = re.compile(
        r"SALDO\s+AWAL[:\s]*([\d,.]+)", re.IGNORECASE | re.ASCII
    )
    _CLOSING_PATTERN: re.Pattern[str] = re.compile(
        r"SALDO\s+AKHIR[:\s]*([\d,.]+)", re.IGNORECASE | re.ASCII
    )

    # Encabezados de tabla y pies de página que se repiten en cada hoja
    _NOISE_PATTERN: re.Pattern[str] = re.compile(
        r"TANGGAL|KETERANGAN|CABANG|MUTASI|SALDO|Halaman|Bersambung",
        re.IGNORECASE,
    )

    _AMOUNT_PATTERN: re.Pattern[str] = re.compile(r"[\d,.]+", re.ASCII)
    _CREDIT_PATTERN: re.Pattern[str] = re.compile(r"\bCR\b", re.IGNORECASE)

    # Código de sucursal/transacción: "0211/FTSCY/WS95051"
    _REFERENCE_PATTERN: re.Pattern[str] = re.compile(r"\d{4}/[\w/]+", re.ASCII)

    def __init__(self, default_year: int, default_month: int = 1) -> None:
        """
        Args:
            default_year: Año a usar si el texto no trae PERIODE.
            default_month: Mes a usar si el texto no trae PERIODE.
        """
        if not 1 <= default_month <= 12:
            raise ValueError(f"Mes por defecto fuera de rango: {default_month}")
        self._default_year = default_year
        self._default_month = default_month

    def parse(self, text: str, currency: str = "") -> ParsedStatement:
        """Parsea el texto completo y devuelve el estado de cuenta finalizado."""
        period, year, month = self._scan_period(text)
        start_date, end_date = month_bounds(year, month)

        lines = [line.strip() for line in text.split("\n")]
        lines = [line for line in lines if line]

        statement = ParsedStatement(
            period=period,
            start_date=start_date,
            end_date=end_date,
            opening_balance=self._scan_balance(self._OPENING_PATTERN, text),
            closing_balance=self._scan_balance(self._CLOSING_PATTERN, text),
            transactions=self._scan_transactions(lines, year),
            currency=currency,
        )
        return finalize(statement)

    # =================================================================
    # Pre-escaneo: periodo y saldos
    # =================================================================

    def _scan_period(self, text: str) -> tuple[str, int, int]:
        """Devuelve (etiqueta, año, mes). Etiqueta vacía si no hay PERIODE."""
        match = self._PERIOD_PATTERN.search(text)
        if not match:
            return "", self._default_year, self._default_month

        month_name, year_text = match.group(1), match.group(2)
        year = int(year_text)
        if not MINYEAR <= year <= MAXYEAR:
            return "", self._default_year, self._default_month
        return f"{month_name} {year_text}", year, month_to_int(month_name)

    @staticmethod
    def _scan_balance(pattern: re.Pattern[str], text: str) -> Decimal:
        match = pattern.search(text)
        if not match:
            return Decimal("0")
        return normalize(match.group(1))

    # =================================================================
    # Escaneo principal: máquina de estados por bloques
    # =================================================================

    def _scan_transactions(self, lines: list[str], year: int) -> list[Transaction]:
        transactions: list[Transaction] = []
        state = _State.SEEK_DATE
        i = 0
        block: _Block | None = None
        candidate: Transaction | None = None

        while state is not _State.DONE:
            if state is _State.SEEK_DATE:
                if i >= len(lines):
                    state = _State.DONE
                    continue
                day_month = match_day_month(lines[i])
                if day_month is None:
                    i += 1
                    continue
                block = _Block(day=day_month[0], month=day_month[1])
                state = _State.COLLECT_BLOCK

            elif state is _State.COLLECT_BLOCK:
                assert block is not None
                i = self._collect_block(lines, i, block)
                state = _State.VALIDATE

            elif state is _State.VALIDATE:
                assert block is not None
                candidate = self._build_transaction(block, year)
                state = _State.EMIT if candidate is not None else _State.SEEK_DATE

            elif state is _State.EMIT:
                assert candidate is not None
                transactions.append(candidate)
                candidate = None
                state = _State.SEEK_DATE

        return transactions

    def _collect_block(self, lines: list[str], date_index: int, block: _Block) -> int:
        """Junta las líneas que siguen a la fecha en `block.lines`.

        Se detiene ANTES de la siguiente línea de fecha, o al llegar al
        tope de líneas.

        Returns:
            Posición del cursor tras el bloque: la siguiente fecha (sin
            consumir), la primera línea después del tope, o el final.
        """
        j = date_index + 1
        while j < len(lines) and len(block.lines) < self.MAX_BLOCK_LINES:
            if match_day_month(lines[j]) is not None:
                break
            block.lines.append(lines[j])
            j += 1
        return j

    def _build_transaction(self, block: _Block, year: int) -> Transaction | None:
        """Valida el bloque y lo convierte en Transaction.

        Returns:
            None si el bloque es ruido, no trae monto o su fecha no
            existe en el calendario (ej: 31/02). Un bloque malo nunca
            aborta el documento.
        """
        description = block.text

        if self._NOISE_PATTERN.search(description):
            return None
        if len(description.strip()) < 3:
            return None

        flat_text = " ".join(block.lines)
        reference = self._extract_reference(flat_text)

        amount_text = flat_text.replace(reference, " ", 1) if reference else flat_text
        amounts = self._extract_amounts(amount_text)
        if not amounts:
            return None

        try:
            fecha = build_date(year, block.month, block.day)
        except ValueError:
            return None

        amount = amounts[0]
        balance = amounts[-1] if len(amounts) > 1 else None
        is_credit = bool(self._CREDIT_PATTERN.search(flat_text))

        return Transaction(
            date=fecha,
            description=description,
            reference=reference,
            debit_amount=Decimal("0") if is_credit else amount,
            credit_amount=amount if is_credit else Decimal("0"),
            balance=balance,
        )

    def _extract_reference(self, text: str) -> str:
        match = self._REFERENCE_PATTERN.search(text)
        return match.group(0) if match else ""

    def _extract_amounts(self, text: str) -> list[Decimal]:
        """Todos los tokens numéricos normalizados dentro de (0, MAX_AMOUNT).

        El código de referencia se quita antes de llamar aquí: sus
        dígitos ("0211", "95051") no son montos.
        """
        amounts: list[Decimal] = []
        for token in self._AMOUNT_PATTERN.findall(text):
            value = normalize(token)
            if Decimal("0") < value < self.MAX_AMOUNT:
                amounts.append(value)
        return amounts
