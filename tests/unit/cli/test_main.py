"""
Tests para el CLI bca-parser: códigos de salida y archivos generados.
"""

import pytest

from bca_parser.cli.main import main

NATIVE_PDF = (
    b"%PDF-1.4\nBT\n"
    b"(PERIODE: JANUARI 2025) Tj\n(SALDO AWAL:1.000.000,00) Tj\n"
    b"(05/01) Tj\n(TRANSFER MASUK) Tj\n(500.000,00 CR) Tj\n"
    b"(06/01) Tj\n(BIAYA ADMIN) Tj\n(10.000,00 DB) Tj\n(1.490.000,00) Tj\n"
    b"ET\n%%EOF"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "OPENAI_API_KEY",
        "BCA_RECOGNITION_ENGINE",
        "BCA_EXTRACTION_ENGINE",
        "BCA_OCR_DPI",
        "BCA_DEFAULT_YEAR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def native_pdf(tmp_path):
    path = tmp_path / "januari.pdf"
    path.write_bytes(NATIVE_PDF)
    return path


class TestMain:
    def test_archivo_inexistente(self, tmp_path, capsys):
        assert main([str(tmp_path / "no_existe.pdf")]) == 1
        assert "no existe" in capsys.readouterr().out

    def test_genera_excel(self, native_pdf, tmp_path):
        salida = tmp_path / "salida"

        assert main([str(native_pdf), "--account", "001", "-o", str(salida)]) == 0
        assert (salida / "mutasi_januari.xlsx").exists()

    def test_preview_no_genera_excel(self, native_pdf, tmp_path, capsys):
        assert main([str(native_pdf), "--preview"]) == 0

        out = capsys.readouterr().out
        assert '"transactionCount": 2' in out
        assert '"period": "JANUARI 2025"' in out
        assert not (tmp_path / "mutasi_januari.xlsx").exists()

    def test_sin_movimientos_sale_con_2(self, tmp_path, capsys):
        path = tmp_path / "vacio.pdf"
        path.write_bytes(b"%PDF-1.4 (TANGGAL KETERANGAN CABANG) Tj")

        assert main([str(path)]) == 2
        assert "Download as Excel" in capsys.readouterr().out

    def test_sin_capa_de_texto_sale_con_1(self, tmp_path, capsys):
        path = tmp_path / "scan.pdf"
        path.write_bytes(b"\x00\x01\x02\x03")

        assert main([str(path)]) == 1
        assert "OCR" in capsys.readouterr().out

    def test_imagen_sin_reconocimiento_configurado(self, tmp_path):
        path = tmp_path / "foto.png"
        path.write_bytes(b"\x89PNG\r\n\x1a\n")

        assert main([str(path)]) == 1

    def test_configuracion_invalida(self, native_pdf, monkeypatch, capsys):
        monkeypatch.setenv("BCA_OCR_DPI", "muchos")

        assert main([str(native_pdf)]) == 1
        assert "BCA_OCR_DPI" in capsys.readouterr().out
