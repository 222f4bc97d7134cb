"""
Adaptador de entrada: Extractor de texto crudo.

Produce una versión en texto plano "lo mejor posible" de un documento,
probando una LISTA ORDENADA de estrategias (TextStrategy). Gana la
primera que devuelve al menos un bloque; las siguientes ni se ejecutan.

Por defecto:
    1. LiteralStringStrategy  → objetos "(...)"
    2. HexStringStrategy      → objetos "<...>", solo si (1) no dio nada

Los bloques de la estrategia ganadora se unen con saltos de línea.

Este extractor NUNCA lanza excepción. Si ninguna estrategia encuentra
bloques, devuelve texto vacío y es el StatementProcessor quien decide
que eso es un TextLayerNotFoundError.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from bca_parser.adapters.input.text_extractors.hex_string_strategy import HexStringStrategy
from bca_parser.adapters.input.text_extractors.literal_string_strategy import (
    LiteralStringStrategy,
)
from bca_parser.domain.ports.text_strategy import TextStrategy


@dataclass(frozen=True)
class Extraction:
    """Resultado de una extracción: texto, estrategia ganadora y bloques."""

    text: str
    strategy: str | None = None
    """Nombre de la estrategia que produjo el texto. None si ninguna."""

    blocks: list[str] = field(default_factory=list)


class RawTextExtractor:
    """Extractor de texto por estrategias ordenadas, primera no vacía gana."""

    def __init__(self, strategies: Sequence[TextStrategy] | None = None) -> None:
        """
        Args:
            strategies: Estrategias en orden de prioridad. Si es None se
                        usan literal + hexadecimal.
        """
        if strategies is None:
            strategies = [LiteralStringStrategy(), HexStringStrategy()]
        self._strategies = list(strategies)

    @property
    def strategy_names(self) -> list[str]:
        return [s.name for s in self._strategies]

    def run(self, data: bytes) -> Extraction:
        """Ejecuta las estrategias en orden y devuelve la primera con bloques."""
        for strategy in self._strategies:
            blocks = strategy.extract_blocks(data)
            if blocks:
                return Extraction(text="\n".join(blocks), strategy=strategy.name, blocks=blocks)
        return Extraction(text="")

    def extract(self, data: bytes) -> str:
        """Devuelve solo el texto. Cadena vacía si ninguna estrategia encontró nada."""
        return self.run(data).text
