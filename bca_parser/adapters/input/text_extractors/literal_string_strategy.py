"""
Adaptador de entrada: Estrategia de objetos de texto literales "(...)".

En el modelo de texto de un PDF, el contenido de una página se escribe
con operadores como `(05/01) Tj` o `[(TRANSFER) -250 (MASUK)] TJ`: el
texto va entre paréntesis, con escapes de barra invertida para los
caracteres especiales.

Esta estrategia NO interpreta el PDF: decodifica los bytes de forma
permisiva y busca con regex todo lo que esté entre paréntesis no
escapados. Funciona con los PDFs de e-Banking BCA porque sus streams de
contenido no van comprimidos; con un PDF comprimido simplemente no
encuentra nada útil y el parser devuelve cero movimientos.
"""

import re

from bca_parser.domain.ports.text_strategy import TextStrategy
from bca_parser.domain.shared.text_cleaner import decode_permissive

# "(" no escapado, luego escapes (\x) o cualquier cosa que no sea "\" ni ")",
# y el ")" de cierre.
_LITERAL_PATTERN = re.compile(r"(?<!\\)\(((?:\\.|[^\\)])+)\)", re.DOTALL)

_ESCAPE_PATTERN = re.compile(r"\\([nrt\\()])")

# \r se descarta y \t se vuelve espacio: el parser trabaja por líneas
# y solo le sirven los \n.
_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "",
    "t": " ",
    "\\": "\\",
    "(": "(",
    ")": ")",
}


class LiteralStringStrategy(TextStrategy):
    """Extrae los objetos de texto literales del PDF, en orden de aparición."""

    @property
    def name(self) -> str:
        return "literal-string"

    def extract_blocks(self, data: bytes) -> list[str]:
        raw = decode_permissive(data)
        return [unescape(m.group(1)) for m in _LITERAL_PATTERN.finditer(raw)]


def unescape(text: str) -> str:
    """Resuelve las secuencias de escape de un literal de PDF en una sola pasada.

    Ejemplos:
        >>> unescape(r"SALDO\\nAWAL")
        'SALDO\\nAWAL'
        >>> unescape(r"\\(CR\\)")
        '(CR)'
    """
    return _ESCAPE_PATTERN.sub(lambda m: _ESCAPES[m.group(1)], text)
