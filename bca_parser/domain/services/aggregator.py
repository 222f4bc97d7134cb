"""
Servicio de dominio: Aggregator.

Último paso antes de la frontera de persistencia:
1. `finalize` recalcula los totales de cargos y abonos a partir de los
   movimientos. Es el ÚNICO lugar donde se asignan esos totales.
2. `to_ledger_lines` convierte cada movimiento en un registro listo
   para insertar en el libro de bancos.

No valida que saldo_inicial + abonos - cargos = saldo_final. Esa
conciliación, si se quiere, es un asunto externo.
"""

from dataclasses import replace
from decimal import Decimal

from bca_parser.domain.models.ledger_line import LedgerLine
from bca_parser.domain.models.parsed_statement import ParsedStatement


def finalize(statement: ParsedStatement) -> ParsedStatement:
    """Devuelve una copia del estado de cuenta con los totales recalculados.

    La suma se hace con Decimal, así que es exacta: no hay deriva por
    acumulación de float.
    """
    total_debits = sum((t.debit_amount for t in statement.transactions), Decimal("0"))
    total_credits = sum((t.credit_amount for t in statement.transactions), Decimal("0"))
    return replace(
        statement,
        transactions=list(statement.transactions),
        total_debits=total_debits,
        total_credits=total_credits,
    )


def to_ledger_lines(
    statement: ParsedStatement,
    bank_account_id: str,
    currency: str | None = None,
) -> list[LedgerLine]:
    """Construye un LedgerLine por movimiento, en el orden del documento.

    Args:
        statement: Estado de cuenta ya finalizado.
        bank_account_id: Cuenta bancaria destino.
        currency: Moneda de la cuenta. Si es None, se usa la del statement.
    """
    moneda = currency if currency is not None else statement.currency
    return [
        LedgerLine(
            bank_account_id=bank_account_id,
            transaction_date=t.date,
            description=t.description,
            reference=t.reference,
            branch_code=t.branch_code,
            debit_amount=t.debit_amount,
            credit_amount=t.credit_amount,
            running_balance=t.balance,
            statement_balance=t.balance,
            currency=moneda,
        )
        for t in statement.transactions
    ]
