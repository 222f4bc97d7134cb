"""
Utilidades de limpieza de texto.

Funciones reutilizables para decodificar y normalizar el texto que sale
de los extractores y de los motores de reconocimiento, antes de que el
parser lo procese.

Estas funciones NO tienen lógica de negocio (no saben de bancos ni montos).
Solo operan sobre strings y bytes.
"""


def decode_permissive(data: bytes) -> str:
    """Decodifica bytes como UTF-8 reemplazando secuencias inválidas.

    Un PDF es mayormente binario; lo que interesa son los fragmentos
    ASCII de sus objetos de texto. Nunca lanza UnicodeDecodeError.
    """
    return data.decode("utf-8", errors="replace")


def remove_non_printable(text: str) -> str:
    """Reemplaza caracteres de control por espacio, excepto \\n, \\r y \\t.

    El OCR a veces deja caracteres invisibles que rompen los regex.

    Ejemplos:
        >>> remove_non_printable("BIAYA\\x00ADM")
        'BIAYA ADM'
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_recognized_text(text: str) -> str:
    """Limpieza común para texto de OCR o del servicio de visión.

    No colapsa espacios: el parser trabaja línea por línea y necesita
    los saltos de línea intactos.
    """
    text = remove_non_printable(text)
    text = normalize_line_endings(text)
    return text.strip()
