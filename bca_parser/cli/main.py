"""
Punto de entrada CLI: bca-parser.

Uso:
    # Previsualizar (no genera Excel)
    bca-parser /ruta/mutasi_januari.pdf --preview

    # Generar el Excel de revisión en otra carpeta
    bca-parser /ruta/mutasi_januari.pdf --account 001-IDR -o /ruta/salida

    # Estado de cuenta fotografiado, o PDF sin capa de texto
    bca-parser /ruta/foto_mutasi.jpg
    bca-parser /ruta/mutasi_januari.pdf --ocr

Este módulo es el ÚNICO lugar donde se ensamblan los componentes (a
través de infrastructure.factory) y se traducen los errores del dominio
a mensajes y códigos de salida:
    0  éxito
    1  cualquier ParserBaseError (o configuración inválida)
    2  el texto se leyó pero no tiene movimientos (se imprimen sugerencias)

No contiene lógica de negocio: solo "fontanería" (wiring).
"""

import argparse
import json
import mimetypes
import sys
from dataclasses import replace
from pathlib import Path

from bca_parser.adapters.output.loggers.console_logger import ConsoleLogger
from bca_parser.adapters.output.writers.excel_writer import ExcelWriter
from bca_parser.domain.exceptions import NoTransactionsError, ParserBaseError
from bca_parser.domain.models.statement_upload import StatementUpload
from bca_parser.domain.shared.amount import format_amount
from bca_parser.infrastructure.config import EXTRACTION_ENGINES, load_settings
from bca_parser.infrastructure.factory import create_processor


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI. Devuelve el código de salida."""
    args = _parse_args(argv)
    input_path = Path(args.input_path)

    if not input_path.is_file():
        print(f"❌ El archivo no existe: {input_path}")
        return 1

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"❌ Configuración inválida: {e}")
        return 1

    if args.engine:
        settings = replace(settings, extraction_engine=args.engine)

    logger = ConsoleLogger()
    processor = create_processor(settings, logger)

    mime_type, _ = mimetypes.guess_type(input_path.name)
    upload = StatementUpload(
        content=input_path.read_bytes(),
        file_name=input_path.name,
        bank_account_id=args.account,
        currency=args.currency,
        mime_type=mime_type or "",
        force_recognition=args.ocr,
        preview_only=args.preview,
    )

    print("=" * 60)
    print("BCA STATEMENT PARSER")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Cuenta:   {args.account} ({args.currency})")
    print()

    try:
        result = processor.process(upload)
    except NoTransactionsError as e:
        print(f"\n❌ {e}")
        print("\n  Sugerencias:")
        for suggestion in e.suggestions:
            print(f"    - {suggestion}")
        logger.print_summary()
        return 2
    except ParserBaseError as e:
        print(f"\n❌ {e}")
        logger.print_summary()
        return 1

    statement = result.statement
    print(f"\n  Periodo:        {statement.period or '(sin PERIODE)'}")
    print(f"  Saldo inicial:  {format_amount(statement.opening_balance)}")
    print(f"  Saldo final:    {format_amount(statement.closing_balance)}")
    print(f"  Total débitos:  {format_amount(statement.total_debits)}")
    print(f"  Total créditos: {format_amount(statement.total_credits)}")

    if args.preview:
        print(json.dumps(result.preview(), indent=2, ensure_ascii=False, default=str))
    else:
        output_dir = Path(args.output_dir) if args.output_dir else input_path.parent
        output_file = output_dir / f"mutasi_{input_path.stem}.xlsx"
        try:
            written = ExcelWriter().write(result, output_file)
        except ParserBaseError as e:
            print(f"\n❌ {e}")
            return 1
        print(f"\n📁 Excel generado: {written}")

    logger.print_summary()
    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="bca-parser",
        description="Extractor de movimientos de estados de cuenta BCA (mutasi rekening)",
        epilog="Ejemplo: bca-parser mutasi_januari.pdf --preview",
    )

    parser.add_argument(
        "input_path",
        help="Ruta al estado de cuenta (PDF, PNG o JPG)",
    )

    parser.add_argument(
        "--currency",
        default="IDR",
        help="Moneda de la cuenta destino (default: IDR)",
    )

    parser.add_argument(
        "--account",
        default="default",
        help="Identificador de la cuenta bancaria destino",
    )

    parser.add_argument(
        "--ocr",
        action="store_true",
        help="Forzar el reconocimiento de texto aunque el archivo sea un PDF",
    )

    parser.add_argument(
        "--engine",
        choices=EXTRACTION_ENGINES,
        help="Motor de extracción nativa. Sobrescribe BCA_EXTRACTION_ENGINE.",
    )

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Solo previsualizar: imprime los primeros movimientos y no genera Excel",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para el Excel. "
        "Si no se especifica, se usa el mismo directorio del archivo.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
