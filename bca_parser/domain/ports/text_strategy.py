"""
Puerto de entrada: Estrategia de extracción de texto.

El RawTextExtractor no es una función monolítica con "si falla esto,
prueba aquello". Es una LISTA ORDENADA de estrategias; gana la primera
que devuelve al menos un bloque:

    TextStrategy (interfaz)
    ├── PdfplumberStrategy      → capa de texto nativa (opcional)
    ├── LiteralStringStrategy   → objetos de texto "(...)" del PDF
    └── HexStringStrategy       → objetos de texto "<...>" en hexadecimal

¿Por qué recibe bytes y no str?
Porque algunas estrategias (pdfplumber) necesitan el documento binario
completo y otras (literal, hex) lo decodifican a su manera.
"""

from abc import ABC, abstractmethod


class TextStrategy(ABC):
    """Interfaz para una estrategia de extracción de bloques de texto."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la estrategia. Para logging y trazabilidad.

        Ejemplo: 'literal-string', 'hex-string', 'pdfplumber'
        """
        ...

    @abstractmethod
    def extract_blocks(self, data: bytes) -> list[str]:
        """Extrae los bloques de texto del documento, en orden de aparición.

        Args:
            data: Bytes crudos del documento.

        Returns:
            Lista de bloques (puede estar vacía). NUNCA lanza excepción:
            un documento que la estrategia no entiende devuelve [].
        """
        ...
