"""
Adaptador de entrada: Estrategia de capa de texto nativa con pdfplumber.

A diferencia de las estrategias literal y hexadecimal, pdfplumber SÍ
interpreta el PDF: descomprime los streams y resuelve las fuentes. Es
más precisa con PDFs comprimidos, pero también más lenta, por eso es
opcional (`--engine pdfplumber`). Cuando se activa se coloca PRIMERA en
la lista del RawTextExtractor.

Igual que las demás estrategias, nunca lanza excepción: si pdfplumber no
está instalado o no puede abrir el documento, devuelve cero bloques y el
extractor pasa a la siguiente estrategia.
"""

import io

from bca_parser.domain.ports.text_strategy import TextStrategy

# Import lazy: pdfplumber es pesado y solo se usa con --engine pdfplumber.
try:
    import pdfplumber
except ImportError:
    pdfplumber = None  # type: ignore[assignment]


class PdfplumberStrategy(TextStrategy):
    """Un bloque por página con texto, en orden de página."""

    @property
    def name(self) -> str:
        return "pdfplumber"

    def extract_blocks(self, data: bytes) -> list[str]:
        if pdfplumber is None or not data:
            return []

        blocks: list[str] = []
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                for page in pdf.pages:
                    text = page.extract_text() or ""
                    if text.strip():
                        blocks.append(text)
        except Exception:
            # PDF corrupto, cifrado o que no es PDF: se sigue con la
            # siguiente estrategia de la lista.
            return []

        return blocks
