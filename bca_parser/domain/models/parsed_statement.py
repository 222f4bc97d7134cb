"""
Modelo de dominio: Resultado del parseo de un estado de cuenta.

Es el objeto que produce el parser y que el Aggregator finaliza.
Los totales (`total_debits`, `total_credits`) NUNCA se calculan aquí ni
los pone el parser a mano: siempre los recalcula `aggregator.finalize`
a partir de `transactions`.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from bca_parser.domain.models.transaction import Transaction


@dataclass(frozen=True)
class ParsedStatement:
    """Estado de cuenta parseado: periodo, saldos y movimientos."""

    period: str
    """Etiqueta legible del periodo, ej: 'JANUARI 2025'.
    Vacía si no se encontró el marcador PERIODE."""

    start_date: date
    """Primer día del mes detectado (o del mes por defecto)."""

    end_date: date
    """Último día del mes detectado."""

    opening_balance: Decimal = Decimal("0")
    """SALDO AWAL. Cero si no aparece en el texto."""

    closing_balance: Decimal = Decimal("0")
    """SALDO AKHIR. Cero si no aparece en el texto."""

    transactions: list[Transaction] = field(default_factory=list)
    """Movimientos en el orden del documento. No se reordenan."""

    currency: str = ""
    """Moneda de la cuenta destino. Se pasa tal cual, el parser no la usa."""

    total_debits: Decimal = Decimal("0")
    """Suma de cargos. La llena aggregator.finalize."""

    total_credits: Decimal = Decimal("0")
    """Suma de abonos. La llena aggregator.finalize."""

    @property
    def year(self) -> int:
        return self.start_date.year

    @property
    def month(self) -> int:
        return self.start_date.month

    @property
    def is_empty(self) -> bool:
        return not self.transactions
