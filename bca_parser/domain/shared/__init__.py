"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el parser, los extractores y los
reconocedores, y no dependen de ninguna librería externa.

Uso:
    from bca_parser.domain.shared.amount import normalize, format_amount
    from bca_parser.domain.shared.month_map import month_to_int, MONTH_NAMES
    from bca_parser.domain.shared.date_parser import match_day_month, month_bounds
    from bca_parser.domain.shared.text_cleaner import decode_permissive, clean_recognized_text
"""
