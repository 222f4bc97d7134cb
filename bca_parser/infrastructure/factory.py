"""
Ensamblado de adaptadores a partir de Settings.

Centraliza la relación configuración → instancia concreta. El
StatementProcessor no sabe qué motor de reconocimiento ni qué
estrategias de extracción existen; solo recibe los puertos ya armados.

Agregar un motor nuevo requiere solo 2 pasos:
1. Crear la clase que implemente RecognitionService (o TextStrategy).
2. Agregar su rama aquí.
"""

from bca_parser.adapters.input.statement_parsers.bca_parser import BCAStatementParser
from bca_parser.adapters.input.text_extractors.raw_text_extractor import RawTextExtractor
from bca_parser.domain.ports.process_logger import ProcessLogger
from bca_parser.domain.ports.recognition_service import RecognitionService
from bca_parser.domain.services.statement_processor import StatementProcessor
from bca_parser.infrastructure.config import Settings


def create_recognizer(settings: Settings) -> RecognitionService | None:
    """Crea el motor de reconocimiento configurado.

    Returns:
        None si el motor es openai y no hay OPENAI_API_KEY. El procesador
        convierte eso en RecognitionNotConfiguredError solo cuando un
        documento realmente necesita reconocimiento.
    """
    # Se importan aquí (no al inicio del archivo) para que un motor sin
    # sus librerías instaladas no rompa el ensamblado de los demás.
    if settings.recognition_engine == "tesseract":
        from bca_parser.adapters.input.recognizers.tesseract_recognizer import (
            TesseractRecognizer,
        )

        return TesseractRecognizer(
            dpi=settings.ocr_dpi,
            lang=settings.ocr_lang,
            tesseract_cmd=settings.tesseract_cmd,
        )

    if not settings.openai_api_key:
        return None

    from bca_parser.adapters.input.recognizers.openai_vision_recognizer import (
        OpenAIVisionRecognizer,
    )

    return OpenAIVisionRecognizer(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.recognition_timeout,
    )


def create_extractor(settings: Settings) -> RawTextExtractor:
    """Crea el extractor con las estrategias en orden de prioridad.

    Con extraction_engine=pdfplumber la estrategia de pdfplumber va
    PRIMERA; literal y hexadecimal quedan detrás como respaldo.
    """
    extractor = RawTextExtractor()
    if settings.extraction_engine != "pdfplumber":
        return extractor

    from bca_parser.adapters.input.text_extractors.hex_string_strategy import HexStringStrategy
    from bca_parser.adapters.input.text_extractors.literal_string_strategy import (
        LiteralStringStrategy,
    )
    from bca_parser.adapters.input.text_extractors.pdfplumber_strategy import PdfplumberStrategy

    return RawTextExtractor([PdfplumberStrategy(), LiteralStringStrategy(), HexStringStrategy()])


def create_processor(settings: Settings, logger: ProcessLogger) -> StatementProcessor:
    """Arma el StatementProcessor completo desde la configuración."""
    return StatementProcessor(
        text_extractor=create_extractor(settings),
        statement_parser=BCAStatementParser(default_year=settings.default_year),
        logger=logger,
        recognizer=create_recognizer(settings),
    )
