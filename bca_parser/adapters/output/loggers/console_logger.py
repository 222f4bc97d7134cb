"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y acumula contadores para el resumen final.

Útil para:
- Desarrollo y debugging.
- Ejecución manual desde terminal (`bca-parser`).

Para un servicio web se podría implementar un logger que escriba al
log del servidor con la misma interfaz, sin cambiar el dominio.
"""

from bca_parser.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_sin_movimientos: int = 0
        self._total_movimientos: int = 0
        self._lineas_insertadas: int = 0
        self._lineas_duplicadas: int = 0
        self._errores: list[dict] = []

    # --- Entrada ---

    def log_file_received(self, file_name: str, size: int, mime_type: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_name} ({size} bytes, {mime_type or 'sin tipo'})")

    def log_input_rejected(self, file_name: str, reason: str) -> None:
        self._errores.append({"archivo": file_name, "error": reason})
        print(f"  ⛔ Rechazado: {file_name} — {reason}")

    # --- Adquisición de texto ---

    def log_extraction_start(self, file_name: str, strategies: list[str]) -> None:
        print(f"  🔍 Extrayendo texto ({', '.join(strategies)}): {file_name}")

    def log_extraction_complete(
        self, file_name: str, strategy: str | None, num_blocks: int, num_chars: int
    ) -> None:
        if strategy is None:
            print(f"  ⚠️  Sin capa de texto: {file_name}")
            return
        print(f"  ✅ Texto extraído ({strategy}): {num_blocks} bloques, {num_chars} caracteres")

    def log_recognition_start(self, file_name: str, engine: str) -> None:
        print(f"  🖼️  Reconociendo texto ({engine}): {file_name}")

    def log_recognition_complete(self, file_name: str, engine: str, num_chars: int) -> None:
        print(f"  ✅ Texto reconocido ({engine}): {num_chars} caracteres")

    # --- Parseo ---

    def log_parse_complete(
        self, file_name: str, num_transactions: int, total_debits: str, total_credits: str
    ) -> None:
        self._archivos_procesados += 1
        self._total_movimientos += num_transactions
        print(
            f"  ✅ Completado: {file_name} — {num_transactions} movimientos "
            f"(DB {total_debits} / CR {total_credits})"
        )

    def log_no_transactions(self, file_name: str, text_length: int, text_sample: str) -> None:
        self._archivos_sin_movimientos += 1
        print(f"  ❌ Sin movimientos: {file_name} — {text_length} caracteres leídos")
        if text_sample:
            print("  --- Muestra del texto ---")
            print(text_sample[:500])
            print("  -------------------------")

    # --- Persistencia ---

    def log_line_duplicate(self, file_name: str, reference: str) -> None:
        self._lineas_duplicadas += 1
        print(f"  ⏭️  Duplicada: {reference or '(sin referencia)'} — {file_name}")

    def log_import_complete(
        self, file_name: str, inserted: int, duplicates: int, failed: int
    ) -> None:
        self._lineas_insertadas += inserted
        print(
            f"  📥 Importado: {file_name} — {inserted} insertadas, "
            f"{duplicates} duplicadas, {failed} fallidas"
        )

    def log_error(self, file_name: str, error: Exception) -> None:
        self._errores.append({"archivo": file_name, "error": str(error)})
        print(f"  ❌ Error: {file_name} — {error}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_sin_movimientos": self._archivos_sin_movimientos,
            "archivos_con_error": len(self._errores),
            "total_movimientos": self._total_movimientos,
            "lineas_insertadas": self._lineas_insertadas,
            "lineas_duplicadas": self._lineas_duplicadas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:       {self._archivos_recibidos}")
        print(f"  Archivos procesados:      {self._archivos_procesados}")
        print(f"  Archivos sin movimientos: {self._archivos_sin_movimientos}")
        print(f"  Archivos con error:       {len(self._errores)}")
        print(f"  Total movimientos:        {self._total_movimientos}")

        if self._lineas_insertadas or self._lineas_duplicadas:
            print(f"  Líneas insertadas:        {self._lineas_insertadas}")
            print(f"  Líneas duplicadas:        {self._lineas_duplicadas}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
