"""
Mapeo de nombres de meses en indonesio a números.

El encabezado de los estados de cuenta BCA trae el periodo como
"PERIODE : JANUARI 2025". Solo se aceptan los 12 nombres completos en
indonesio; es un vocabulario cerrado que también alimenta el regex del
parser (`MONTH_NAMES`).

El lookup siempre es case-insensitive (se normaliza a mayúsculas).
"""

_MONTH_MAP: dict[str, int] = {
    "JANUARI": 1,
    "FEBRUARI": 2,
    "MARET": 3,
    "APRIL": 4,
    "MEI": 5,
    "JUNI": 6,
    "JULI": 7,
    "AGUSTUS": 8,
    "SEPTEMBER": 9,
    "OKTOBER": 10,
    "NOVEMBER": 11,
    "DESEMBER": 12,
}

# En orden de calendario, para construir alternancias de regex.
MONTH_NAMES: tuple[str, ...] = tuple(_MONTH_MAP)


def month_to_int(month_name: str) -> int:
    """Convierte un nombre de mes indonesio a su número 1-12.

    Raises:
        ValueError: Si el nombre no pertenece al vocabulario.

    Ejemplos:
        >>> month_to_int("Januari")
        1
        >>> month_to_int("DESEMBER")
        12
    """
    normalized = month_name.strip().upper()
    result = _MONTH_MAP.get(normalized)
    if result is None:
        raise ValueError(
            f"Mes no reconocido: '{month_name}'. Valores válidos: {', '.join(MONTH_NAMES)}"
        )
    return result
