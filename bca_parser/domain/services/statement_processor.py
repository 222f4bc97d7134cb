"""
Servicio de dominio: Procesador de estados de cuenta.

Orquesta el pipeline completo para UN documento:
1. Valida la solicitud (archivo, cuenta, moneda) antes de tocar los bytes.
2. Adquiere el texto:
   - Imagen o reconocimiento forzado → RecognitionService.
   - Documento nativo → RawTextExtractor (lista ordenada de estrategias).
3. Parsea el texto con el StatementParser.
4. Cero movimientos → NoTransactionsError con sugerencias accionables.
5. Construye las líneas listas para insertar (Aggregator).

¿Por qué no poner esta lógica en el CLI?
Porque "dado un documento, producir movimientos" es una regla del
dominio. El CLI solo decide QUÉ archivo procesar y QUÉ hacer con el
resultado (previsualizar, exportar a Excel, importar).

No hay reintentos en ningún punto: un error de extracción o de
reconocimiento aborta el pipeline de inmediato, sin intentar parsear
texto parcial. No hay estado compartido entre llamadas; varias
instancias pueden procesar documentos en paralelo.
"""

from bca_parser.adapters.input.text_extractors.raw_text_extractor import RawTextExtractor
from bca_parser.domain.exceptions import (
    DuplicateLineError,
    InputError,
    NoTransactionsError,
    ParserBaseError,
    PersistenceError,
    RecognitionNotConfiguredError,
    TextLayerNotFoundError,
)
from bca_parser.domain.models.processing_result import ImportReport, ProcessingResult
from bca_parser.domain.models.statement_upload import StatementUpload
from bca_parser.domain.ports.ledger_repository import LedgerRepository
from bca_parser.domain.ports.process_logger import ProcessLogger
from bca_parser.domain.ports.recognition_service import RecognitionService
from bca_parser.domain.ports.statement_parser import StatementParser
from bca_parser.domain.services.aggregator import to_ledger_lines
from bca_parser.domain.shared.amount import format_amount


class StatementProcessor:
    """Procesa un StatementUpload y produce un ProcessingResult.

    Recibe sus dependencias por constructor (Dependency Injection).
    El reconocedor es opcional: sin él, los documentos imagen fallan con
    RecognitionNotConfiguredError en lugar de un error genérico.
    """

    def __init__(
        self,
        text_extractor: RawTextExtractor,
        statement_parser: StatementParser,
        logger: ProcessLogger,
        recognizer: RecognitionService | None = None,
    ) -> None:
        self._extractor = text_extractor
        self._parser = statement_parser
        self._logger = logger
        self._recognizer = recognizer

    def process(self, upload: StatementUpload) -> ProcessingResult:
        """Ejecuta el pipeline completo.

        Raises:
            InputError: Solicitud incompleta (no se extrae nada).
            TextLayerNotFoundError: Ninguna estrategia encontró texto.
            RecognitionError: Cualquier falla del reconocimiento.
            NoTransactionsError: Texto leído pero sin movimientos.
        """
        self._logger.log_file_received(upload.file_name, len(upload.content), upload.mime_type)

        try:
            self._validate(upload)
        except InputError as e:
            self._logger.log_input_rejected(upload.file_name, str(e))
            raise

        try:
            text, source = self._acquire_text(upload)
        except ParserBaseError as e:
            self._logger.log_error(upload.file_name, e)
            raise

        statement = self._parser.parse(text, upload.currency)

        if statement.is_empty:
            self._logger.log_no_transactions(upload.file_name, len(text), text[:1000])
            raise NoTransactionsError(upload.file_name, len(text))

        self._logger.log_parse_complete(
            upload.file_name,
            len(statement.transactions),
            format_amount(statement.total_debits),
            format_amount(statement.total_credits),
        )

        lines = []
        if not upload.preview_only:
            lines = to_ledger_lines(statement, upload.bank_account_id, upload.currency)

        return ProcessingResult(
            statement=statement,
            text=text,
            source=source,
            used_recognition=upload.needs_recognition,
            file_name=upload.file_name,
            lines=lines,
        )

    def import_lines(self, result: ProcessingResult, repository: LedgerRepository) -> ImportReport:
        """Inserta las líneas del resultado en el libro de bancos.

        Un duplicado (restricción de unicidad) no es fatal: se cuenta y
        se sigue con las demás líneas. Cualquier otro PersistenceError
        se registra y se cuenta como fallido.
        """
        inserted = 0
        duplicates = 0
        failed = 0

        for line in result.lines:
            try:
                repository.insert_line(line)
            except DuplicateLineError:
                duplicates += 1
                self._logger.log_line_duplicate(result.file_name, line.reference)
            except PersistenceError as e:
                failed += 1
                self._logger.log_error(result.file_name, e)
            else:
                inserted += 1

        self._logger.log_import_complete(result.file_name, inserted, duplicates, failed)
        return ImportReport(inserted=inserted, duplicates=duplicates, failed=failed)

    @staticmethod
    def _validate(upload: StatementUpload) -> None:
        """Rechaza solicitudes incompletas antes de cualquier extracción."""
        if not upload.content:
            raise InputError("file", "No se recibió archivo o está vacío")
        if not upload.bank_account_id or not upload.bank_account_id.strip():
            raise InputError("bank_account_id", "Indique la cuenta bancaria destino")
        if not upload.currency or not upload.currency.strip():
            raise InputError("currency", "Indique la moneda de la cuenta")

    def _acquire_text(self, upload: StatementUpload) -> tuple[str, str]:
        """Obtiene el texto del documento y el nombre de quien lo produjo.

        Returns:
            (texto, fuente). La fuente es el nombre de la estrategia
            ganadora o del motor de reconocimiento.
        """
        if upload.needs_recognition:
            if self._recognizer is None:
                raise RecognitionNotConfiguredError()

            self._logger.log_recognition_start(upload.file_name, self._recognizer.name)
            text = self._recognizer.recognize(upload.content, upload.resolved_mime_type)
            self._logger.log_recognition_complete(
                upload.file_name, self._recognizer.name, len(text)
            )
            return text, self._recognizer.name

        self._logger.log_extraction_start(upload.file_name, self._extractor.strategy_names)
        extraction = self._extractor.run(upload.content)
        self._logger.log_extraction_complete(
            upload.file_name,
            extraction.strategy,
            len(extraction.blocks),
            len(extraction.text),
        )

        if not extraction.text.strip():
            raise TextLayerNotFoundError(upload.file_name)

        return extraction.text, extraction.strategy or ""
