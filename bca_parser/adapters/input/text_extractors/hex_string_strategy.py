"""
Adaptador de entrada: Estrategia de objetos de texto hexadecimales "<...>".

Algunos generadores de PDF escriben el texto como `<30352F3031> Tj` en
lugar de `(05/01) Tj`. Esta estrategia es el FALLBACK de la literal:
el RawTextExtractor solo la usa si la literal no encontró ningún bloque.

Cada par hexadecimal es un byte:
- 32-126 (ASCII imprimible) → se conserva tal cual.
- 10 → salto de línea.
- Cualquier otro valor → se descarta (bytes de fuentes CID, controles...).
"""

import re

from bca_parser.domain.ports.text_strategy import TextStrategy
from bca_parser.domain.shared.text_cleaner import decode_permissive

_HEX_PATTERN = re.compile(r"<([0-9A-Fa-f]+)>")


class HexStringStrategy(TextStrategy):
    """Extrae los objetos de texto hexadecimales de longitud par."""

    @property
    def name(self) -> str:
        return "hex-string"

    def extract_blocks(self, data: bytes) -> list[str]:
        raw = decode_permissive(data)
        blocks: list[str] = []

        for match in _HEX_PATTERN.finditer(raw):
            hex_run = match.group(1)
            if len(hex_run) % 2 != 0:
                continue

            decoded = decode_hex_run(hex_run)
            if decoded.strip():
                blocks.append(decoded)

        return blocks


def decode_hex_run(hex_run: str) -> str:
    """Decodifica una corrida hexadecimal de longitud par.

    Ejemplos:
        >>> decode_hex_run("30352F3031")
        '05/01'
        >>> decode_hex_run("41000A42")
        'A\\nB'
    """
    chars: list[str] = []
    for byte in bytes.fromhex(hex_run):
        if 32 <= byte <= 126:
            chars.append(chr(byte))
        elif byte == 10:
            chars.append("\n")
    return "".join(chars)
