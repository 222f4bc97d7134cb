"""
Configuración desde variables de entorno.

Todas las perillas del pipeline se leen UNA vez, al arrancar, y viajan
en un Settings inmutable. Ningún adaptador lee os.environ por su cuenta.

Si existe un archivo .env en el directorio de trabajo, python-dotenv lo
carga primero (sin pisar variables ya definidas en el entorno).

Variables:
    OPENAI_API_KEY            Llave del servicio de visión.
    OPENAI_MODEL              Modelo de visión (default: gpt-4o).
    BCA_RECOGNITION_ENGINE    openai | tesseract (default: openai).
    BCA_RECOGNITION_TIMEOUT   Segundos de espera del servicio (default: 60).
    TESSERACT_CMD             Ruta al ejecutable de Tesseract.
    BCA_OCR_DPI               DPI para rasterizar PDFs (default: 300).
    BCA_OCR_LANG              Idiomas de Tesseract (default: ind+eng).
    BCA_EXTRACTION_ENGINE     raw | pdfplumber (default: raw).
    BCA_DEFAULT_YEAR          Año si el texto no trae PERIODE (default: año actual).
"""

import os
from dataclasses import dataclass, field
from datetime import date

from dotenv import load_dotenv

RECOGNITION_ENGINES: tuple[str, ...] = ("openai", "tesseract")
EXTRACTION_ENGINES: tuple[str, ...] = ("raw", "pdfplumber")


@dataclass(frozen=True)
class Settings:
    """Configuración resuelta del pipeline."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    recognition_engine: str = "openai"
    recognition_timeout: float = 60.0
    tesseract_cmd: str | None = None
    ocr_dpi: int = 300
    ocr_lang: str = "ind+eng"
    extraction_engine: str = "raw"
    default_year: int = field(default_factory=lambda: date.today().year)
    """Año por defecto, resuelto una sola vez al construir el Settings."""


def load_settings(use_dotenv: bool = True) -> Settings:
    """Lee las variables de entorno y construye el Settings.

    Args:
        use_dotenv: Si True, carga antes el archivo .env (los tests lo
                    apagan para no depender del directorio de trabajo).

    Raises:
        ValueError: Si una variable numérica o de selección es inválida.
                    El mensaje nombra la variable.
    """
    if use_dotenv:
        load_dotenv()

    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL") or "gpt-4o",
        recognition_engine=_env_choice("BCA_RECOGNITION_ENGINE", "openai", RECOGNITION_ENGINES),
        recognition_timeout=_env_float("BCA_RECOGNITION_TIMEOUT", 60.0),
        tesseract_cmd=os.getenv("TESSERACT_CMD") or None,
        ocr_dpi=_env_int("BCA_OCR_DPI", 300),
        ocr_lang=os.getenv("BCA_OCR_LANG") or "ind+eng",
        extraction_engine=_env_choice("BCA_EXTRACTION_ENGINE", "raw", EXTRACTION_ENGINES),
        default_year=_env_int("BCA_DEFAULT_YEAR", date.today().year),
    )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} debe ser un entero, se recibió '{raw}'")
    if value <= 0:
        raise ValueError(f"{name} debe ser positivo, se recibió '{raw}'")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} debe ser un número, se recibió '{raw}'")
    if value <= 0:
        raise ValueError(f"{name} debe ser positivo, se recibió '{raw}'")
    return value


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw not in choices:
        raise ValueError(f"{name} debe ser uno de {', '.join(choices)}; se recibió '{raw}'")
    return raw
