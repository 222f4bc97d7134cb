"""
Tests para StatementProcessor: el pipeline completo de un documento.

Se usan fakes para los puertos externos (reconocimiento, repositorio,
bitácora) y el parser BCA real, para que los escenarios sean los mismos
que ve el usuario.
"""

from decimal import Decimal

import pytest

from bca_parser.adapters.input.statement_parsers.bca_parser import BCAStatementParser
from bca_parser.adapters.input.text_extractors.raw_text_extractor import RawTextExtractor
from bca_parser.domain.exceptions import (
    DuplicateLineError,
    InputError,
    NoTransactionsError,
    PersistenceError,
    RecognitionNotConfiguredError,
    RecognitionServiceError,
    TextLayerNotFoundError,
)
from bca_parser.domain.models.statement_upload import StatementUpload
from bca_parser.domain.ports.ledger_repository import LedgerRepository
from bca_parser.domain.ports.process_logger import ProcessLogger
from bca_parser.domain.ports.recognition_service import RecognitionService
from bca_parser.domain.ports.text_strategy import TextStrategy
from bca_parser.domain.services.statement_processor import StatementProcessor

STATEMENT_TEXT = "\n".join(
    [
        "PERIODE: JANUARI 2025",
        "SALDO AWAL:1.000.000,00",
        "05/01",
        "TRANSFER MASUK",
        "500.000,00 CR",
        "06/01",
        "BIAYA ADMIN",
        "10.000,00 DB",
        "1.490.000,00",
    ]
)

NATIVE_PDF = (
    b"%PDF-1.4\n1 0 obj\nBT\n"
    b"(PERIODE: JANUARI 2025) Tj\n(SALDO AWAL:1.000.000,00) Tj\n"
    b"(05/01) Tj\n(TRANSFER MASUK) Tj\n(500.000,00 CR) Tj\n"
    b"(06/01) Tj\n(BIAYA ADMIN) Tj\n(10.000,00 DB) Tj\n(1.490.000,00) Tj\n"
    b"ET\nendobj\n%%EOF"
)


# =================================================================
# Fakes
# =================================================================


class RecordingLogger(ProcessLogger):
    """Guarda cada evento como (nombre, argumentos)."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [e[0] for e in self.events]

    def log_file_received(self, file_name, size, mime_type):
        self.events.append(("file_received", file_name, size, mime_type))

    def log_input_rejected(self, file_name, reason):
        self.events.append(("input_rejected", file_name, reason))

    def log_extraction_start(self, file_name, strategies):
        self.events.append(("extraction_start", file_name, strategies))

    def log_extraction_complete(self, file_name, strategy, num_blocks, num_chars):
        self.events.append(("extraction_complete", file_name, strategy, num_blocks, num_chars))

    def log_recognition_start(self, file_name, engine):
        self.events.append(("recognition_start", file_name, engine))

    def log_recognition_complete(self, file_name, engine, num_chars):
        self.events.append(("recognition_complete", file_name, engine, num_chars))

    def log_parse_complete(self, file_name, num_transactions, total_debits, total_credits):
        self.events.append(
            ("parse_complete", file_name, num_transactions, total_debits, total_credits)
        )

    def log_no_transactions(self, file_name, text_length, text_sample):
        self.events.append(("no_transactions", file_name, text_length, text_sample))

    def log_line_duplicate(self, file_name, reference):
        self.events.append(("line_duplicate", file_name, reference))

    def log_import_complete(self, file_name, inserted, duplicates, failed):
        self.events.append(("import_complete", file_name, inserted, duplicates, failed))

    def log_error(self, file_name, error):
        self.events.append(("error", file_name, error))

    def get_summary(self):
        return {"eventos": len(self.events)}


class FakeStrategy(TextStrategy):
    def __init__(self, blocks: list[str], name: str = "fake") -> None:
        self._blocks = blocks
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def extract_blocks(self, data: bytes) -> list[str]:
        return list(self._blocks)


class FakeRecognizer(RecognitionService):
    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self._text = text
        self._error = error
        self.calls: list[tuple[bytes, str]] = []

    @property
    def name(self) -> str:
        return "fake-vision"

    def recognize(self, data: bytes, mime_type: str) -> str:
        self.calls.append((data, mime_type))
        if self._error is not None:
            raise self._error
        return self._text


class FakeRepository(LedgerRepository):
    """Rechaza como duplicadas las referencias indicadas y falla en las otras."""

    def __init__(self, duplicated: set[str] = frozenset(), broken: set[str] = frozenset()):
        self.duplicated = duplicated
        self.broken = broken
        self.inserted: list = []

    def insert_line(self, line) -> None:
        if line.description in self.duplicated:
            raise DuplicateLineError("duplicate key value violates unique constraint")
        if line.description in self.broken:
            raise PersistenceError("connection reset")
        self.inserted.append(line)


# =================================================================
# Fixtures
# =================================================================


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def make_processor(logger):
    def _make(extractor=None, recognizer=None):
        return StatementProcessor(
            text_extractor=extractor or RawTextExtractor(),
            statement_parser=BCAStatementParser(default_year=2024),
            logger=logger,
            recognizer=recognizer,
        )

    return _make


def _upload(**overrides) -> StatementUpload:
    data = {
        "content": NATIVE_PDF,
        "file_name": "mutasi_januari.pdf",
        "bank_account_id": "001",
        "currency": "IDR",
        "mime_type": "application/pdf",
    }
    data.update(overrides)
    return StatementUpload(**data)


# =================================================================
# Tests
# =================================================================


class TestValidacion:
    @pytest.mark.parametrize(
        "overrides,campo",
        [
            ({"content": b""}, "file"),
            ({"bank_account_id": ""}, "bank_account_id"),
            ({"bank_account_id": "   "}, "bank_account_id"),
            ({"currency": ""}, "currency"),
        ],
    )
    def test_rechaza_antes_de_extraer(self, make_processor, logger, overrides, campo):
        recognizer = FakeRecognizer(text=STATEMENT_TEXT)
        processor = make_processor(recognizer=recognizer)

        with pytest.raises(InputError) as exc:
            processor.process(_upload(**overrides))

        assert exc.value.campo == campo
        assert "input_rejected" in logger.names()
        assert "extraction_start" not in logger.names()
        assert recognizer.calls == []


class TestExtraccionNativa:
    def test_pdf_nativo_end_to_end(self, make_processor, logger):
        result = make_processor().process(_upload())

        statement = result.statement
        assert statement.period == "JANUARI 2025"
        assert statement.opening_balance == Decimal("1000000.00")
        assert len(statement.transactions) == 2
        assert statement.total_credits == Decimal("500000")
        assert statement.total_debits == Decimal("10000")
        assert statement.currency == "IDR"

        assert result.source == "literal-string"
        assert result.used_recognition is False
        assert result.file_name == "mutasi_januari.pdf"
        assert len(result.lines) == 2
        assert result.lines[0].bank_account_id == "001"
        assert result.lines[0].currency == "IDR"

    def test_eventos_en_orden(self, make_processor, logger):
        make_processor().process(_upload())
        assert logger.names() == [
            "file_received",
            "extraction_start",
            "extraction_complete",
            "parse_complete",
        ]
        assert logger.events[-1] == (
            "parse_complete",
            "mutasi_januari.pdf",
            2,
            "10.000,00",
            "500.000,00",
        )

    def test_sin_capa_de_texto(self, make_processor, logger):
        processor = make_processor(RawTextExtractor([FakeStrategy([])]))

        with pytest.raises(TextLayerNotFoundError):
            processor.process(_upload(content=b"\x00\x01\x02"))

        assert logger.names()[-1] == "error"

    def test_primera_estrategia_con_bloques_gana(self, make_processor):
        extractor = RawTextExtractor(
            [FakeStrategy([], name="vacia"), FakeStrategy(STATEMENT_TEXT.split("\n"), name="b")]
        )
        result = make_processor(extractor).process(_upload())
        assert result.source == "b"

    def test_solo_previsualizar_no_genera_lineas(self, make_processor):
        result = make_processor().process(_upload(preview_only=True))
        assert len(result.statement.transactions) == 2
        assert result.lines == []


class TestReconocimiento:
    def test_imagen_va_al_reconocedor(self, make_processor, logger):
        recognizer = FakeRecognizer(text=STATEMENT_TEXT)
        upload = _upload(content=b"\x89PNG...", file_name="foto.png", mime_type="")

        result = make_processor(recognizer=recognizer).process(upload)

        assert recognizer.calls == [(b"\x89PNG...", "image/png")]
        assert result.used_recognition is True
        assert result.source == "fake-vision"
        assert len(result.statement.transactions) == 2
        assert "extraction_start" not in logger.names()
        assert "recognition_complete" in logger.names()

    def test_reconocimiento_forzado_en_pdf(self, make_processor):
        recognizer = FakeRecognizer(text=STATEMENT_TEXT)
        result = make_processor(recognizer=recognizer).process(_upload(force_recognition=True))

        assert recognizer.calls[0][1] == "application/pdf"
        assert result.used_recognition is True

    def test_sin_reconocedor_configurado(self, make_processor):
        with pytest.raises(RecognitionNotConfiguredError):
            make_processor().process(_upload(file_name="foto.jpg", mime_type="image/jpeg"))

    def test_error_del_servicio_aborta(self, make_processor, logger):
        recognizer = FakeRecognizer(error=RecognitionServiceError("fake-vision", "timeout"))

        with pytest.raises(RecognitionServiceError):
            make_processor(recognizer=recognizer).process(_upload(force_recognition=True))

        assert "parse_complete" not in logger.names()
        assert logger.names()[-1] == "error"


class TestSinMovimientos:
    def test_solo_encabezados(self, make_processor, logger):
        extractor = RawTextExtractor([FakeStrategy(["TANGGAL KETERANGAN CABANG"])])

        with pytest.raises(NoTransactionsError) as exc:
            make_processor(extractor).process(_upload())

        assert exc.value.can_use_recognition is True
        assert len(exc.value.suggestions) == 4
        assert logger.names()[-1] == "no_transactions"


class TestImportLines:
    def test_cuenta_insertadas_duplicadas_y_fallidas(self, make_processor, logger):
        processor = make_processor()
        result = processor.process(_upload())
        repository = FakeRepository(
            duplicated={result.lines[0].description}, broken={result.lines[1].description}
        )

        report = processor.import_lines(result, repository)

        assert report.inserted == 0
        assert report.duplicates == 1
        assert report.failed == 1
        assert "line_duplicate" in logger.names()
        assert logger.events[-1] == ("import_complete", "mutasi_januari.pdf", 0, 1, 1)

    def test_todo_insertado(self, make_processor):
        processor = make_processor()
        result = processor.process(_upload())
        repository = FakeRepository()

        report = processor.import_lines(result, repository)

        assert report.inserted == 2
        assert report.total == 2
        assert len(repository.inserted) == 2
