"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar los EVENTOS de negocio del pipeline:
- "Se recibió un archivo"
- "La estrategia hex-string encontró 120 bloques"
- "El parser no encontró movimientos"

La implementación puede imprimir a consola, escribir con `logging` o
acumular en memoria para los tests; el dominio solo conoce los eventos.
"""

from abc import ABC, abstractmethod


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Entrada ---

    @abstractmethod
    def log_file_received(self, file_name: str, size: int, mime_type: str) -> None:
        """Registra que se recibió un documento para procesar."""
        ...

    @abstractmethod
    def log_input_rejected(self, file_name: str, reason: str) -> None:
        """Registra que la solicitud se rechazó antes de extraer."""
        ...

    # --- Adquisición de texto ---

    @abstractmethod
    def log_extraction_start(self, file_name: str, strategies: list[str]) -> None:
        """Registra el inicio de la extracción nativa y las estrategias a probar."""
        ...

    @abstractmethod
    def log_extraction_complete(
        self, file_name: str, strategy: str | None, num_blocks: int, num_chars: int
    ) -> None:
        """Registra qué estrategia ganó (None si ninguna) y cuánto texto produjo."""
        ...

    @abstractmethod
    def log_recognition_start(self, file_name: str, engine: str) -> None:
        """Registra que se envió el documento al motor de reconocimiento."""
        ...

    @abstractmethod
    def log_recognition_complete(self, file_name: str, engine: str, num_chars: int) -> None:
        """Registra el fin exitoso del reconocimiento."""
        ...

    # --- Parseo ---

    @abstractmethod
    def log_parse_complete(
        self, file_name: str, num_transactions: int, total_debits: str, total_credits: str
    ) -> None:
        """Registra el fin exitoso del parseo con sus totales formateados."""
        ...

    @abstractmethod
    def log_no_transactions(self, file_name: str, text_length: int, text_sample: str) -> None:
        """Registra que el texto no produjo movimientos (con muestra para debug)."""
        ...

    # --- Persistencia ---

    @abstractmethod
    def log_line_duplicate(self, file_name: str, reference: str) -> None:
        """Registra una línea rechazada por duplicada."""
        ...

    @abstractmethod
    def log_import_complete(
        self, file_name: str, inserted: int, duplicates: int, failed: int
    ) -> None:
        """Registra los conteos finales de la inserción."""
        ...

    @abstractmethod
    def log_error(self, file_name: str, error: Exception) -> None:
        """Registra un error durante el procesamiento."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_sin_movimientos': int,
                'archivos_con_error': int,
                'total_movimientos': int,
                'lineas_insertadas': int,
                'lineas_duplicadas': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
