"""
Tests para los modelos de dominio.
"""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from bca_parser.domain.models import (
    ImportReport,
    LedgerLine,
    ParsedStatement,
    ProcessingResult,
    StatementUpload,
    Transaction,
)


def _transaction(**overrides) -> Transaction:
    data = {
        "date": date(2025, 1, 5),
        "description": "TRANSFER MASUK\n500.000,00 CR",
        "reference": "",
        "debit_amount": Decimal("0"),
        "credit_amount": Decimal("500000"),
    }
    data.update(overrides)
    return Transaction(**data)


class TestTransaction:
    def test_abono(self):
        t = _transaction()
        assert t.is_credit
        assert t.amount == Decimal("500000")
        assert t.balance is None
        assert t.branch_code == ""

    def test_cargo(self):
        t = _transaction(debit_amount=Decimal("10000"), credit_amount=Decimal("0"))
        assert not t.is_credit
        assert t.amount == Decimal("10000")

    def test_cargo_y_abono_a_la_vez(self):
        with pytest.raises(ValueError, match="al mismo tiempo"):
            _transaction(debit_amount=Decimal("1"), credit_amount=Decimal("1"))

    def test_ambos_en_cero(self):
        with pytest.raises(ValueError, match="debe tener monto"):
            _transaction(debit_amount=Decimal("0"), credit_amount=Decimal("0"))

    def test_monto_negativo(self):
        with pytest.raises(ValueError, match="negativo"):
            _transaction(credit_amount=Decimal("-5"))

    def test_es_inmutable(self):
        t = _transaction()
        with pytest.raises(FrozenInstanceError):
            t.description = "otra"  # type: ignore[misc]


class TestParsedStatement:
    def test_propiedades_derivadas(self):
        statement = ParsedStatement(
            period="JANUARI 2025",
            start_date=date(2025, 1, 1),
            end_date=date(2025, 1, 31),
        )
        assert statement.year == 2025
        assert statement.month == 1
        assert statement.is_empty
        assert statement.total_debits == Decimal("0")
        assert statement.total_credits == Decimal("0")

    def test_con_movimientos_no_esta_vacio(self):
        statement = ParsedStatement(
            period="",
            start_date=date(2025, 1, 1),
            end_date=date(2025, 1, 31),
            transactions=[_transaction()],
        )
        assert not statement.is_empty


class TestStatementUpload:
    def _upload(self, **overrides) -> StatementUpload:
        data = {
            "content": b"%PDF-1.4",
            "file_name": "mutasi.pdf",
            "bank_account_id": "001",
            "currency": "IDR",
        }
        data.update(overrides)
        return StatementUpload(**data)

    def test_pdf_no_es_imagen(self):
        upload = self._upload(mime_type="application/pdf")
        assert not upload.is_image
        assert not upload.needs_recognition

    def test_imagen_por_mime(self):
        upload = self._upload(file_name="scan", mime_type="image/png")
        assert upload.is_image
        assert upload.needs_recognition

    @pytest.mark.parametrize("nombre", ["foto.png", "foto.jpg", "FOTO.JPEG", "Mutasi.Jpg"])
    def test_imagen_por_extension(self, nombre):
        assert self._upload(file_name=nombre).is_image

    def test_extension_en_medio_no_cuenta(self):
        assert not self._upload(file_name="foto.png.pdf").is_image

    def test_forzar_reconocimiento(self):
        upload = self._upload(force_recognition=True)
        assert not upload.is_image
        assert upload.needs_recognition

    def test_mime_declarado_tiene_prioridad(self):
        upload = self._upload(file_name="foto.png", mime_type="image/webp")
        assert upload.resolved_mime_type == "image/webp"

    @pytest.mark.parametrize(
        "nombre,esperado",
        [("foto.png", "image/png"), ("foto.JPG", "image/jpeg"), ("mutasi.pdf", "application/pdf")],
    )
    def test_mime_deducido_de_la_extension(self, nombre, esperado):
        assert self._upload(file_name=nombre).resolved_mime_type == esperado


class TestLedgerLine:
    def test_as_dict(self):
        line = LedgerLine(
            bank_account_id="001",
            transaction_date=date(2025, 1, 6),
            description="BIAYA ADMIN",
            reference="",
            branch_code="",
            debit_amount=Decimal("10000"),
            credit_amount=Decimal("0"),
            running_balance=Decimal("1490000"),
            statement_balance=Decimal("1490000"),
            currency="IDR",
        )
        record = line.as_dict()
        assert record["transaction_date"] == "2025-01-06"
        assert record["debit_amount"] == Decimal("10000")
        assert record["reconciliation_status"] == "unmatched"
        assert record["currency"] == "IDR"


class TestProcessingResult:
    def _result(self, num_transactions: int, text: str = "texto") -> ProcessingResult:
        transactions = [
            _transaction(date=date(2025, 1, (i % 28) + 1)) for i in range(num_transactions)
        ]
        statement = ParsedStatement(
            period="JANUARI 2025",
            start_date=date(2025, 1, 1),
            end_date=date(2025, 1, 31),
            opening_balance=Decimal("1000000"),
            transactions=transactions,
        )
        return ProcessingResult(
            statement=statement, text=text, source="literal-string", used_recognition=False
        )

    def test_preview_limita_movimientos(self):
        preview = self._result(15).preview()
        assert preview["preview"] is True
        assert preview["transactionCount"] == 15
        assert len(preview["transactions"]) == 10
        assert preview["period"] == "JANUARI 2025"
        assert preview["openingBalance"] == Decimal("1000000")
        assert preview["usedOCR"] is False

    def test_preview_limita_texto(self):
        preview = self._result(1, text="x" * 5000).preview()
        assert len(preview["extractedText"]) == 2000

    def test_preview_formato_de_movimiento(self):
        movimiento = self._result(1).preview()["transactions"][0]
        assert movimiento["date"] == "2025-01-01"
        assert movimiento["creditAmount"] == Decimal("500000")
        assert movimiento["debitAmount"] == Decimal("0")
        assert movimiento["balance"] is None


class TestImportReport:
    def test_total(self):
        assert ImportReport(inserted=3, duplicates=2, failed=1).total == 6

    def test_vacio(self):
        assert ImportReport().total == 0
