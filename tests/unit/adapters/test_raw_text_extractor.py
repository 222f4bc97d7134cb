"""
Tests para el RawTextExtractor y sus estrategias.

Los bytes imitan fragmentos de content streams de PDF sin comprimir:
`(texto) Tj` para literales y `<hex> Tj` para hexadecimales.
"""

import pytest

from bca_parser.adapters.input.text_extractors import pdfplumber_strategy
from bca_parser.adapters.input.text_extractors.hex_string_strategy import (
    HexStringStrategy,
    decode_hex_run,
)
from bca_parser.adapters.input.text_extractors.literal_string_strategy import (
    LiteralStringStrategy,
    unescape,
)
from bca_parser.adapters.input.text_extractors.pdfplumber_strategy import PdfplumberStrategy
from bca_parser.adapters.input.text_extractors.raw_text_extractor import RawTextExtractor


class TestLiteralStringStrategy:
    @pytest.fixture
    def strategy(self):
        return LiteralStringStrategy()

    def test_bloques_en_orden(self, strategy):
        data = b"BT (05/01) Tj (TRANSFER MASUK) Tj (500.000,00 CR) Tj ET"
        assert strategy.extract_blocks(data) == ["05/01", "TRANSFER MASUK", "500.000,00 CR"]

    def test_escapes(self, strategy):
        data = b"(SALDO\\nAWAL) Tj (A\\tB\\r) Tj (\\(CR\\)) Tj (C:\\\\dir) Tj"
        assert strategy.extract_blocks(data) == ["SALDO\nAWAL", "A B", "(CR)", "C:\\dir"]

    def test_bytes_invalidos_no_rompen(self, strategy):
        data = b"\xff\xfe(05/01)\x80\x81"
        assert strategy.extract_blocks(data) == ["05/01"]

    def test_sin_literales(self, strategy):
        assert strategy.extract_blocks(b"<30352F3031> Tj") == []

    def test_unescape_una_sola_pasada(self):
        """'\\\\n' es una barra literal seguida de 'n', no un salto de línea."""
        assert unescape("a\\\\nb") == "a\\nb"


class TestHexStringStrategy:
    @pytest.fixture
    def strategy(self):
        return HexStringStrategy()

    def test_decodifica_pares(self, strategy):
        assert strategy.extract_blocks(b"<30352F3031> Tj <4249415941> Tj") == ["05/01", "BIAYA"]

    def test_longitud_impar_se_ignora(self, strategy):
        assert strategy.extract_blocks(b"<303> Tj <41> Tj") == ["A"]

    def test_solo_bytes_no_imprimibles(self, strategy):
        assert strategy.extract_blocks(b"<0001> Tj") == []

    def test_decode_hex_run(self):
        assert decode_hex_run("41000A42") == "A\nB"
        assert decode_hex_run("412042") == "A B"
        assert decode_hex_run("7F41") == "A"


class TestPdfplumberStrategy:
    def test_bytes_que_no_son_pdf(self):
        assert PdfplumberStrategy().extract_blocks(b"esto no es un pdf") == []

    def test_bytes_vacios(self):
        assert PdfplumberStrategy().extract_blocks(b"") == []

    def test_sin_pdfplumber_instalado(self, monkeypatch):
        monkeypatch.setattr(pdfplumber_strategy, "pdfplumber", None)
        assert PdfplumberStrategy().extract_blocks(b"%PDF-1.4") == []


class _StaticStrategy:
    """Estrategia mínima con nombre y bloques fijos (duck typing)."""

    def __init__(self, name: str, blocks: list[str]) -> None:
        self.name = name
        self._blocks = blocks
        self.called = False

    def extract_blocks(self, data: bytes) -> list[str]:
        self.called = True
        return self._blocks


class TestRawTextExtractor:
    def test_estrategias_por_defecto(self):
        assert RawTextExtractor().strategy_names == ["literal-string", "hex-string"]

    def test_literal_tiene_prioridad(self):
        data = b"(05/01) Tj <4249415941> Tj"
        extraction = RawTextExtractor().run(data)
        assert extraction.text == "05/01"
        assert extraction.strategy == "literal-string"

    def test_hex_como_respaldo(self):
        extraction = RawTextExtractor().run(b"<30352F3031> Tj <4249415941> Tj")
        assert extraction.text == "05/01\nBIAYA"
        assert extraction.strategy == "hex-string"
        assert extraction.blocks == ["05/01", "BIAYA"]

    def test_sin_bloques_devuelve_texto_vacio(self):
        extraction = RawTextExtractor().run(b"\x00\x01 binario sin texto")
        assert extraction.text == ""
        assert extraction.strategy is None

    def test_bytes_vacios(self):
        assert RawTextExtractor().extract(b"") == ""

    def test_primera_no_vacia_gana_y_las_siguientes_no_corren(self):
        vacia = _StaticStrategy("vacia", [])
        ganadora = _StaticStrategy("ganadora", ["A", "B"])
        ultima = _StaticStrategy("ultima", ["C"])

        extraction = RawTextExtractor([vacia, ganadora, ultima]).run(b"x")

        assert extraction.text == "A\nB"
        assert extraction.strategy == "ganadora"
        assert vacia.called and ganadora.called
        assert not ultima.called
