"""
Modelo de dominio: Línea lista para insertar en el libro de bancos.

Un LedgerLine por cada Transaction. Es lo que cruza la frontera hacia
el almacenamiento relacional; la deduplicación la hace la restricción
de unicidad del almacenamiento, no este proyecto.
"""

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LedgerLine:
    bank_account_id: str
    transaction_date: date
    description: str
    reference: str
    branch_code: str
    debit_amount: Decimal
    credit_amount: Decimal
    running_balance: Decimal | None
    statement_balance: Decimal | None
    currency: str
    reconciliation_status: str = "unmatched"

    def as_dict(self) -> dict:
        """Registro plano para el almacenamiento (fecha ISO, montos Decimal)."""
        record = asdict(self)
        record["transaction_date"] = self.transaction_date.isoformat()
        return record
