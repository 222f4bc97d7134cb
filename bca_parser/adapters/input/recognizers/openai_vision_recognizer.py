"""
Adaptador de entrada: Reconocimiento con un modelo de visión de OpenAI.

Es el FALLBACK para documentos sin capa de texto (fotos o escaneos del
estado de cuenta) y para cuando el usuario pide "Run OCR Anyway".

Workflow:
1. Los bytes se codifican en base64 dentro de una data URL.
2. Se hace UNA sola petición de chat con la imagen y un prompt fijo que
   pide el texto literal, con la estructura de líneas y los marcadores
   de fecha, monto, DB/CR, PERIODE y SALDO.
3. Se devuelve la transcripción tal cual (solo se normalizan saltos de línea).

Sin reintentos: el cliente se crea con max_retries=0 y un timeout
explícito. Un timeout es un RecognitionServiceError más.

¿Por qué un PDF se envía como image/png?
El endpoint de chat solo acepta imágenes en `image_url`. Si el archivo no
es imagen se etiqueta como PNG; cuando el servicio lo rechaza, el error
menciona el formato y se convierte en UnsupportedFormatError, cuyo
mensaje pide subir el estado de cuenta como imagen.
"""

import base64
from typing import Any

import openai
from openai import OpenAI

from bca_parser.domain.exceptions import (
    EmptyRecognitionError,
    InsufficientTextError,
    RecognitionNotConfiguredError,
    RecognitionServiceError,
    UnsupportedFormatError,
)
from bca_parser.domain.ports.recognition_service import RecognitionService
from bca_parser.domain.shared.text_cleaner import clean_recognized_text

RECOGNITION_PROMPT = """You are an OCR system. Extract ALL text from this BCA (Bank Central Asia) bank statement.

CRITICAL REQUIREMENTS:
1. Extract EVERY line of text exactly as shown
2. Preserve the exact format and spacing
3. Include dates in DD/MM format
4. Include all transaction descriptions
5. Include all amounts with their DB/CR indicators
6. Include period information (PERIODE: BULAN TAHUN)
7. Include balance information (SALDO AWAL, SALDO AKHIR)
8. Maintain the row structure - each transaction on its own lines

Output ONLY the extracted text, no explanations or commentary."""

# Palabras que delatan un rechazo por formato en el cuerpo del error
_FORMAT_KEYWORDS: tuple[str, ...] = ("pdf", "format")


class OpenAIVisionRecognizer(RecognitionService):
    """Transcribe documentos con un modelo de visión vía chat completions."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o",
        timeout: float = 60.0,
        min_chars: int = 50,
        max_tokens: int = 4096,
        client: Any = None,
    ) -> None:
        """
        Args:
            api_key: Llave del servicio. Obligatoria si no se pasa `client`.
            model: Modelo con capacidad de visión.
            timeout: Segundos antes de dar el servicio por inalcanzable.
            min_chars: Longitud mínima de una transcripción utilizable.
            max_tokens: Tope de tokens de la respuesta.
            client: Cliente ya construido (los tests inyectan uno falso).

        Raises:
            RecognitionNotConfiguredError: Sin api_key ni client.
        """
        if client is None:
            if not api_key:
                raise RecognitionNotConfiguredError(self.name)
            client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

        self._client = client
        self._model = model
        self._timeout = timeout
        self._min_chars = min_chars
        self._max_tokens = max_tokens

    @property
    def name(self) -> str:
        return "openai-vision"

    def recognize(self, data: bytes, mime_type: str) -> str:
        """Envía el documento al servicio y devuelve la transcripción.

        Raises:
            RecognitionServiceError: Timeout, conexión fallida o respuesta no-OK.
            UnsupportedFormatError: El servicio rechazó el formato.
            EmptyRecognitionError: La respuesta no trae el texto.
            InsufficientTextError: Menos de `min_chars` caracteres.
        """
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": RECOGNITION_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {
                                    "url": build_data_url(data, mime_type),
                                    "detail": "high",
                                },
                            },
                        ],
                    }
                ],
                max_tokens=self._max_tokens,
                temperature=0,
            )
        except openai.APITimeoutError:
            raise RecognitionServiceError(
                self.name, f"El servicio no respondió en {self._timeout:g} segundos"
            )
        except openai.APIConnectionError as e:
            raise RecognitionServiceError(self.name, f"Servicio inalcanzable: {e}")
        except openai.APIStatusError as e:
            detalle = _error_text(e)
            if any(keyword in detalle.lower() for keyword in _FORMAT_KEYWORDS):
                raise UnsupportedFormatError(self.name, detalle[:200])
            raise RecognitionServiceError(
                self.name, f"El servicio respondió {e.status_code}: {detalle[:200]}"
            )
        except openai.APIError as e:
            raise RecognitionServiceError(
                self.name, f"Respuesta inválida del servicio: {str(e)[:200]}"
            )

        text = self._read_transcription(response)

        if len(text) < self._min_chars:
            raise InsufficientTextError(self.name, len(text), self._min_chars)

        return text

    def _read_transcription(self, response: Any) -> str:
        """Saca choices[0].message.content o lanza EmptyRecognitionError."""
        choices = getattr(response, "choices", None)
        if not choices:
            raise EmptyRecognitionError(self.name, "El servicio no devolvió resultados")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None) if message is not None else None
        if not content:
            raise EmptyRecognitionError(self.name, "La respuesta no trae transcripción")

        return clean_recognized_text(content)


def build_data_url(data: bytes, mime_type: str) -> str:
    """Codifica los bytes como data URL base64.

    Ejemplos:
        >>> build_data_url(b"abc", "image/jpeg")
        'data:image/jpeg;base64,YWJj'
        >>> build_data_url(b"abc", "application/pdf")
        'data:image/png;base64,YWJj'
    """
    encoded = base64.b64encode(data).decode("ascii")
    media_type = mime_type if "image/" in mime_type else "image/png"
    return f"data:{media_type};base64,{encoded}"


def _error_text(error: openai.APIStatusError) -> str:
    """Texto del error para buscar palabras clave y mostrar al usuario."""
    if error.body:
        return str(error.body)
    return error.message or ""
