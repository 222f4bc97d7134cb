"""
Adaptador de entrada: Reconocimiento local con Tesseract OCR.

Alternativa sin red al servicio de visión. Implementa el mismo puerto
(RecognitionService), así que el StatementProcessor no distingue uno
del otro.

Workflow:
- Imagen (PNG/JPG): Pillow la abre desde los bytes.
- PDF: pdf2image convierte cada página a imagen PIL (300 DPI).
- pytesseract ejecuta OCR sobre cada imagen; las páginas se unen con
  salto de línea.

¿Por qué ind+eng?
Los estados de cuenta BCA están en indonesio (KETERANGAN, SALDO AWAL)
con conceptos en inglés (TRANSFER, E-BANKING). Si "ind" no está
instalado se hace fallback a "eng".

Dependencias externas:
- pytesseract (wrapper Python de Tesseract OCR)
- pdf2image (wrapper de poppler-utils para convertir PDF a imagen)
- Pillow (apertura de imágenes)
- Tesseract OCR y poppler-utils (binarios del sistema)
"""

import io

from bca_parser.domain.exceptions import InsufficientTextError, RecognitionServiceError
from bca_parser.domain.ports.recognition_service import RecognitionService
from bca_parser.domain.shared.text_cleaner import clean_recognized_text

# Imports lazy: solo se cargan cuando se usan.
try:
    import pytesseract
except ImportError:
    pytesseract = None  # type: ignore[assignment]

try:
    from pdf2image import convert_from_bytes
except ImportError:
    convert_from_bytes = None  # type: ignore[assignment]

try:
    from PIL import Image
except ImportError:
    Image = None  # type: ignore[assignment]


class TesseractRecognizer(RecognitionService):
    """Transcribe imágenes y PDFs escaneados con Tesseract."""

    def __init__(
        self,
        dpi: int = 300,
        lang: str = "ind+eng",
        min_chars: int = 50,
        tesseract_cmd: str | None = None,
    ) -> None:
        """
        Args:
            dpi: Resolución para la conversión PDF→imagen.
            lang: Idiomas para Tesseract (formato "lang1+lang2").
            min_chars: Longitud mínima de una transcripción utilizable.
            tesseract_cmd: Ruta al ejecutable si no está en el PATH.
        """
        self._dpi = dpi
        self._lang = lang
        self._lang_fallback = "eng"
        self._min_chars = min_chars

        if tesseract_cmd and pytesseract is not None:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    @property
    def name(self) -> str:
        return "ocr-tesseract"

    def recognize(self, data: bytes, mime_type: str) -> str:
        """Ejecuta OCR sobre todas las páginas/imágenes del documento.

        Raises:
            RecognitionServiceError: Librería o binario no disponible, o
                                     el documento no se pudo rasterizar.
            InsufficientTextError: Menos de `min_chars` caracteres.
        """
        if pytesseract is None:
            raise RecognitionServiceError(
                self.name,
                "pytesseract no está instalado. Instalar con: pip install pytesseract",
            )

        images = self._load_images(data, mime_type)
        lang_efectivo = self._resolve_lang()

        textos: list[str] = []
        for image in images:
            try:
                textos.append(pytesseract.image_to_string(image, lang=lang_efectivo))
            except pytesseract.TesseractNotFoundError:
                raise RecognitionServiceError(
                    self.name, "Tesseract no está instalado o no está en el PATH"
                )
            except pytesseract.TesseractError as e:
                raise RecognitionServiceError(self.name, f"Error de Tesseract: {e}")

        text = clean_recognized_text("\n".join(textos))

        if len(text) < self._min_chars:
            raise InsufficientTextError(self.name, len(text), self._min_chars)

        return text

    def _load_images(self, data: bytes, mime_type: str) -> list:
        """Convierte el documento en una lista de imágenes PIL."""
        if "image/" in mime_type:
            if Image is None:
                raise RecognitionServiceError(
                    self.name, "Pillow no está instalado. Instalar con: pip install Pillow"
                )
            try:
                return [Image.open(io.BytesIO(data))]
            except Exception as e:
                raise RecognitionServiceError(self.name, f"No se pudo abrir la imagen: {e}")

        if convert_from_bytes is None:
            raise RecognitionServiceError(
                self.name, "pdf2image no está instalado. Instalar con: pip install pdf2image"
            )
        try:
            images = convert_from_bytes(data, dpi=self._dpi)
        except Exception as e:
            raise RecognitionServiceError(self.name, f"Error al convertir PDF a imágenes: {e}")

        if not images:
            raise RecognitionServiceError(self.name, "pdf2image no produjo ninguna imagen")
        return images

    def _resolve_lang(self) -> str:
        """Usa el idioma configurado si está instalado; si no, 'eng'.

        Si get_languages() falla se intenta con el configurado y que
        Tesseract reporte el error.
        """
        try:
            available = pytesseract.get_languages()
        except Exception:
            return self._lang

        requested = self._lang.split("+")
        if all(lg in available for lg in requested):
            return self._lang
        if self._lang_fallback in available:
            return self._lang_fallback
        return self._lang
