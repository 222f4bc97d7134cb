"""
Normalización de montos con separadores ambiguos.

CONTEXTO DEL PROBLEMA:
Los estados de cuenta BCA usan la convención indonesia: punto para miles
y coma para decimales ("1.234.567,89"). Pero el texto que llega al parser
no siempre sale del PDF nativo: el OCR y algunas exportaciones devuelven
la convención inglesa ("1,234,567.89"). Un mismo token numérico puede
venir en cualquiera de las dos.

SOLUCIÓN:
Una sola función `normalize` que decide qué separador es el decimal
contando puntos y comas, en este orden:

1. Más de un punto        → los puntos son miles, la coma es decimal.
2. Más de una coma        → las comas son miles.
3. Un punto y una coma    → punto = miles, coma = decimal (convención indonesia).
4. Una coma y ningún punto → la coma es decimal.
5. Cualquier otro caso    → ya está en formato decimal estándar.

Esta función es una HEURÍSTICA:
nunca lanza excepción. Un token vacío o imposible de leer vale 0, y el
parser lo descarta por rango.
"""

import re
from decimal import Decimal, InvalidOperation

_NON_NUMERIC = re.compile(r"[^0-9,.]")

# Prefijo numérico válido, como lo leería un parseFloat tolerante:
# "123", "123.45", "123." o ".5". Lo que sigue al prefijo se ignora.
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def normalize(token: str) -> Decimal:
    """Convierte un token numérico con separadores ambiguos a Decimal.

    Args:
        token: Texto con dígitos, comas y puntos. Cualquier otro carácter
               se elimina antes de decidir.

    Returns:
        Decimal con el valor. Decimal("0") si el token está vacío o no
        contiene un número legible.

    Ejemplos:
        >>> normalize("1.234.567,89")
        Decimal('1234567.89')
        >>> normalize("1,234,567.89")
        Decimal('1234567.89')
        >>> normalize("1.234,00")
        Decimal('1234.00')
        >>> normalize("50,5")
        Decimal('50.5')
        >>> normalize("")
        Decimal('0')
    """
    if not token:
        return Decimal("0")

    cleaned = _NON_NUMERIC.sub("", token)
    dots = cleaned.count(".")
    commas = cleaned.count(",")

    if dots > 1:
        cleaned = _replace_last(cleaned.replace(".", ""), ",", ".")
    elif commas > 1:
        cleaned = cleaned.replace(",", "")
    elif dots == 1 and commas == 1:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    elif commas == 1 and dots == 0:
        cleaned = cleaned.replace(",", ".")

    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return Decimal("0")

    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return Decimal("0")


def _replace_last(text: str, old: str, new: str) -> str:
    """Reemplaza solo la última aparición de `old`."""
    head, sep, tail = text.rpartition(old)
    if not sep:
        return text
    return head + new + tail


def format_amount(amount: Decimal | None) -> str:
    """Formatea un Decimal con la convención indonesia para logs y previews.

    Ejemplos:
        >>> format_amount(Decimal("1234567.8"))
        '1.234.567,80'
        >>> format_amount(None)
        '-'
    """
    if amount is None:
        return "-"
    amount = amount.quantize(Decimal("0.01"))
    # Se formatea en inglés y se intercambian los separadores
    english = f"{amount:,.2f}"
    return english.replace(",", "_").replace(".", ",").replace("_", ".")
