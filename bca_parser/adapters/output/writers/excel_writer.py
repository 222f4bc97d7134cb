"""
Adaptador de salida: Escritor de Excel.

Genera un archivo Excel para revisar un estado de cuenta antes de
importarlo, con el layout de 2 hojas:
- Hoja 1 (Resumen): periodo, saldos y totales de débitos/créditos.
- Hoja 2 (Movimientos): detalle de cada movimiento.

Los montos son Decimal en el dominio; se convierten a float SOLO aquí,
en la frontera con Excel.
"""

from pathlib import Path

import pandas as pd

from bca_parser.domain.exceptions import OutputError
from bca_parser.domain.models.processing_result import ProcessingResult
from bca_parser.domain.ports.output_writer import OutputWriter

_MOVIMIENTOS_COLUMNS = [
    "Fecha",
    "Descripción",
    "Referencia",
    "Sucursal",
    "Débito",
    "Crédito",
    "Saldo",
]


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write(self, result: ProcessingResult, output_path: Path) -> Path:
        """Escribe un estado de cuenta a Excel.

        Args:
            result: Resultado del pipeline.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(result, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, result: ProcessingResult, output_path: Path) -> None:
        statement = result.statement

        filas_movimientos = [
            {
                "Fecha": t.date.strftime("%d/%m/%Y"),
                "Descripción": t.description.replace("\n", " "),
                "Referencia": t.reference,
                "Sucursal": t.branch_code,
                "Débito": float(t.debit_amount),
                "Crédito": float(t.credit_amount),
                "Saldo": float(t.balance) if t.balance is not None else None,
            }
            for t in statement.transactions
        ]
        # columns explícitas: un DataFrame vacío conserva los encabezados
        df_movimientos = pd.DataFrame(filas_movimientos, columns=_MOVIMIENTOS_COLUMNS)

        df_resumen = pd.DataFrame(
            [
                {
                    "Periodo": statement.period,
                    "Desde": statement.start_date.strftime("%d/%m/%Y"),
                    "Hasta": statement.end_date.strftime("%d/%m/%Y"),
                    "Moneda": statement.currency,
                    "Saldo Inicial": float(statement.opening_balance),
                    "Saldo Final": float(statement.closing_balance),
                    "Total Débitos": float(statement.total_debits),
                    "Total Créditos": float(statement.total_credits),
                    "Num Movimientos": len(statement.transactions),
                    "Fuente": result.source,
                    "Archivo": result.file_name,
                }
            ]
        )

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_movimientos.to_excel(writer, index=False, sheet_name="Movimientos")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_movimientos = writer.sheets["Movimientos"]

            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 16)  # Periodo
            ws_resumen.set_column("B:C", 12)  # Desde/Hasta
            ws_resumen.set_column("D:D", 8)  # Moneda
            ws_resumen.set_column("E:H", 18, money_format)  # Saldos y totales
            ws_resumen.set_column("I:I", 16)  # Num Movimientos
            ws_resumen.set_column("J:J", 16)  # Fuente
            ws_resumen.set_column("K:K", 30)  # Archivo

            # --- Formato Hoja Movimientos ---
            ws_movimientos.set_column("A:A", 12)  # Fecha
            ws_movimientos.set_column("B:B", 50)  # Descripción
            ws_movimientos.set_column("C:C", 24, text_format)  # Referencia
            ws_movimientos.set_column("D:D", 10, text_format)  # Sucursal
            ws_movimientos.set_column("E:G", 18, money_format)  # Débito/Crédito/Saldo
