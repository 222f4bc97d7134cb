"""
Fechas de los estados de cuenta BCA.

Cada movimiento empieza con una línea que es SOLO la fecha en formato
DD/MM, sin año ("05/01"). El año (y el mes por defecto cuando no hay
periodo) vienen del encabezado o de la configuración; nunca se leen del
reloj aquí dentro.
"""

import calendar
import re
from datetime import date

_DAY_MONTH_LINE = re.compile(r"^(\d{2})/(\d{2})$", re.ASCII)


def match_day_month(line: str) -> tuple[int, int] | None:
    """Reconoce una línea de fecha DD/MM.

    La línea debe ser exactamente dos dígitos, barra, dos dígitos, con
    día en [1, 31] y mes en [1, 12]. No valida el calendario: "31/02"
    se reconoce como límite de bloque y falla después al construir la
    fecha.

    Returns:
        (día, mes) si la línea es una fecha válida, None si no.

    Ejemplos:
        >>> match_day_month("05/01")
        (5, 1)
        >>> match_day_month("13/13") is None
        True
        >>> match_day_month("00/05") is None
        True
    """
    m = _DAY_MONTH_LINE.match(line.strip())
    if not m:
        return None
    day, month = int(m.group(1)), int(m.group(2))
    if not (1 <= day <= 31 and 1 <= month <= 12):
        return None
    return day, month


def build_date(year: int, month: int, day: int) -> date:
    """Construye la fecha y da un mensaje claro si no existe (31/02)."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Fecha inválida: año={year}, mes={month}, día={day} — {e}")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Primer y último día del mes.

    Ejemplos:
        >>> month_bounds(2024, 2)
        (datetime.date(2024, 2, 1), datetime.date(2024, 2, 29))
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
