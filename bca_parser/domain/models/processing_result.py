"""
Modelo de dominio: Resultado del pipeline completo.

Lo devuelve StatementProcessor.process(). Agrupa el estado de cuenta
finalizado, las líneas listas para insertar y la trazabilidad de cómo
se obtuvo el texto (estrategia de extracción o motor de reconocimiento).
"""

from dataclasses import dataclass, field

from bca_parser.domain.models.ledger_line import LedgerLine
from bca_parser.domain.models.parsed_statement import ParsedStatement


@dataclass(frozen=True)
class ProcessingResult:
    """Salida exitosa del pipeline para un documento."""

    statement: ParsedStatement
    """Estado de cuenta con totales ya calculados por el Aggregator."""

    text: str
    """Texto del que se parseó el estado de cuenta."""

    source: str
    """Quién produjo el texto: 'literal-string', 'hex-string',
    'pdfplumber', 'openai-vision', 'ocr-tesseract'..."""

    used_recognition: bool
    """True si el texto vino del servicio de reconocimiento."""

    file_name: str = ""

    lines: list[LedgerLine] = field(default_factory=list)
    """Registros listos para insertar, uno por movimiento."""

    def preview(self, limit: int = 10, text_limit: int = 2000) -> dict:
        """Carga útil de previsualización para la pantalla de revisión.

        Solo incluye los primeros `limit` movimientos y los primeros
        `text_limit` caracteres del texto extraído.
        """
        return {
            "preview": True,
            "period": self.statement.period,
            "openingBalance": self.statement.opening_balance,
            "closingBalance": self.statement.closing_balance,
            "totalDebits": self.statement.total_debits,
            "totalCredits": self.statement.total_credits,
            "transactionCount": len(self.statement.transactions),
            "transactions": [
                {
                    "date": t.date.isoformat(),
                    "description": t.description,
                    "reference": t.reference,
                    "branchCode": t.branch_code,
                    "debitAmount": t.debit_amount,
                    "creditAmount": t.credit_amount,
                    "balance": t.balance,
                }
                for t in self.statement.transactions[:limit]
            ],
            "extractedText": self.text[:text_limit],
            "usedOCR": self.used_recognition,
        }


@dataclass(frozen=True)
class ImportReport:
    """Conteos devueltos por la frontera de persistencia."""

    inserted: int = 0
    duplicates: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.inserted + self.duplicates + self.failed
