"""
Puerto de entrada: Servicio de reconocimiento (OCR / visión).

Se usa cuando el documento es una imagen o cuando el usuario pide
explícitamente el reconocimiento. Es una frontera de ADQUISICIÓN DE TEXTO
pura: recibe bytes, devuelve texto. No parsea nada.

    RecognitionService (interfaz)
    ├── OpenAIVisionRecognizer   → servicio externo con modelo de visión
    └── TesseractRecognizer      → OCR local (pytesseract + pdf2image)

Cualquier falla se reporta con una subclase de RecognitionError, nunca
se degrada en silencio a un texto vacío.
"""

from abc import ABC, abstractmethod


class RecognitionService(ABC):
    """Interfaz para transcribir un documento a texto."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del motor. Ejemplo: 'openai-vision', 'ocr-tesseract'."""
        ...

    @abstractmethod
    def recognize(self, data: bytes, mime_type: str) -> str:
        """Transcribe el documento completo.

        Args:
            data: Bytes crudos del documento (imagen o PDF).
            mime_type: Tipo MIME declarado. Vacío si se desconoce.

        Returns:
            Texto transcrito, con la estructura de líneas preservada.

        Raises:
            RecognitionServiceError: Servicio inalcanzable, timeout o error.
            UnsupportedFormatError: El servicio rechaza el formato.
            EmptyRecognitionError: La respuesta no trae transcripción.
            InsufficientTextError: Transcripción menor al mínimo utilizable.
        """
        ...
