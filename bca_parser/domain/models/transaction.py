"""
Modelo de dominio: Transacción (movimiento) de un estado de cuenta BCA.

Una Transaction es un evento económico individual del estado de cuenta:
una transferencia recibida, un cargo de comisión, un pago, etc.

Decisiones de diseño:
- Se usa `Decimal` para montos porque `float` tiene errores de redondeo
  con dinero.
- `debit_amount` y `credit_amount` son mutuamente excluyentes: uno tiene
  valor y el otro es 0. Un movimiento con ambos en 0 no es un movimiento.
- `description` se guarda COMPLETA, con saltos de línea. El bloque de
  texto de BCA mezcla referencia, concepto y montos en varias líneas y
  no hay una forma segura de resumirlo.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Representa un movimiento bancario individual.

    frozen=True: se construye una sola vez por bloque reconocido y no
    cambia después. Pasa al Aggregator y de ahí a la frontera de
    persistencia tal cual.
    """

    date: date
    """Fecha del movimiento. El día y mes vienen de la línea DD/MM;
    el año lo resuelve el parser a partir del periodo."""

    description: str
    """Texto completo del bloque, multilínea, sin truncar."""

    reference: str
    """Código de referencia (ej: '0211/FTSCY/WS95051').
    Cadena vacía si el bloque no contiene uno."""

    debit_amount: Decimal
    """Monto del cargo (DB). Decimal("0") si el movimiento es abono."""

    credit_amount: Decimal
    """Monto del abono (CR). Decimal("0") si el movimiento es cargo."""

    balance: Decimal | None = None
    """Saldo impreso en el estado de cuenta para esta línea.
    None si el bloque solo traía un monto."""

    branch_code: str = ""
    """Reservado. Siempre vacío en este parser."""

    @property
    def is_credit(self) -> bool:
        return self.credit_amount > Decimal("0")

    @property
    def amount(self) -> Decimal:
        """Monto del movimiento sin importar la polaridad."""
        return self.credit_amount if self.is_credit else self.debit_amount

    def __post_init__(self) -> None:
        """Hace imposible construir un movimiento con polaridad inválida."""
        if self.debit_amount < Decimal("0"):
            raise ValueError(f"debit_amount no puede ser negativo: {self.debit_amount}")
        if self.credit_amount < Decimal("0"):
            raise ValueError(f"credit_amount no puede ser negativo: {self.credit_amount}")
        if self.debit_amount > Decimal("0") and self.credit_amount > Decimal("0"):
            raise ValueError(
                f"Un movimiento no puede ser cargo ({self.debit_amount}) "
                f"y abono ({self.credit_amount}) al mismo tiempo"
            )
        if self.debit_amount == Decimal("0") and self.credit_amount == Decimal("0"):
            raise ValueError("Un movimiento debe tener monto de cargo o de abono")
