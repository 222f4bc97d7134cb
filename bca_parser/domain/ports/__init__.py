"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from bca_parser.domain.ports import TextStrategy, RecognitionService, StatementParser
"""

from bca_parser.domain.ports.ledger_repository import LedgerRepository
from bca_parser.domain.ports.output_writer import OutputWriter
from bca_parser.domain.ports.process_logger import ProcessLogger
from bca_parser.domain.ports.recognition_service import RecognitionService
from bca_parser.domain.ports.statement_parser import StatementParser
from bca_parser.domain.ports.text_strategy import TextStrategy

__all__ = [
    "LedgerRepository",
    "OutputWriter",
    "ProcessLogger",
    "RecognitionService",
    "StatementParser",
    "TextStrategy",
]
