"""
Puerto de salida: Escritor de resultados.

Define el contrato para volcar un resultado de procesamiento a un
archivo que el usuario pueda revisar antes de importarlo (Excel hoy;
CSV o JSON mañana, sin tocar el dominio).
"""

from abc import ABC, abstractmethod
from pathlib import Path

from bca_parser.domain.models.processing_result import ProcessingResult


class OutputWriter(ABC):
    """Interfaz para escribir resultados de procesamiento."""

    @abstractmethod
    def write(self, result: ProcessingResult, output_path: Path) -> Path:
        """Escribe el resultado de un estado de cuenta.

        Args:
            result: Resultado del pipeline.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
