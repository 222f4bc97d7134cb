"""
Modelos de dominio del proyecto bca-statement-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from bca_parser.domain.models import Transaction, ParsedStatement, StatementUpload
"""

from bca_parser.domain.models.ledger_line import LedgerLine
from bca_parser.domain.models.parsed_statement import ParsedStatement
from bca_parser.domain.models.processing_result import ImportReport, ProcessingResult
from bca_parser.domain.models.statement_upload import StatementUpload
from bca_parser.domain.models.transaction import Transaction

__all__ = [
    "ImportReport",
    "LedgerLine",
    "ParsedStatement",
    "ProcessingResult",
    "StatementUpload",
    "Transaction",
]
