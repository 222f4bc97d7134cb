"""
Modelo de dominio: Documento recibido para procesar.

Es la frontera de entrada del núcleo: bytes crudos + pistas del llamador.
No sabe nada de HTTP ni de formularios; el CLI (o cualquier otra capa)
lo construye a partir de lo que tenga.
"""

import re
from dataclasses import dataclass

_IMAGE_NAME_PATTERN = re.compile(r"\.(png|jpg|jpeg)$", re.IGNORECASE)


@dataclass(frozen=True)
class StatementUpload:
    """Estado de cuenta a procesar."""

    content: bytes
    """Bytes del archivo tal como se recibió."""

    file_name: str
    """Nombre original del archivo. Para trazabilidad y clasificación."""

    bank_account_id: str
    """Cuenta bancaria destino en el libro."""

    currency: str
    """Moneda de la cuenta destino (ej: 'IDR'). Se pasa sin modificar."""

    mime_type: str = ""
    """Tipo MIME declarado por el llamador. Puede venir vacío."""

    force_recognition: bool = False
    """Forzar el reconocimiento aunque el archivo no sea imagen."""

    preview_only: bool = False
    """Solo previsualizar: no se generan inserciones."""

    @property
    def is_image(self) -> bool:
        """True si el archivo se clasifica como imagen (por MIME o extensión)."""
        return "image/" in self.mime_type or bool(_IMAGE_NAME_PATTERN.search(self.file_name))

    @property
    def needs_recognition(self) -> bool:
        return self.is_image or self.force_recognition

    @property
    def resolved_mime_type(self) -> str:
        """MIME declarado, o deducido de la extensión si viene vacío."""
        if self.mime_type:
            return self.mime_type
        m = _IMAGE_NAME_PATTERN.search(self.file_name)
        if m:
            extension = m.group(1).lower()
            return "image/png" if extension == "png" else "image/jpeg"
        return "application/pdf"
