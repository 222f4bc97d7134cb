"""
Excepciones de dominio del proyecto bca-statement-parser.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque el StatementProcessor y el CLI necesitan distinguir entre
"el archivo no trae capa de texto", "el servicio de reconocimiento falló"
y "se leyó el texto pero no hay movimientos". Cada caso tiene un mensaje
y una acción sugerida distinta para el usuario.

Jerarquía:
    ParserBaseError
    ├── InputError                     → Faltan datos obligatorios (archivo, cuenta)
    ├── ExtractionError                → Error al extraer texto del documento
    │   └── TextLayerNotFoundError     → Ninguna estrategia encontró texto
    ├── RecognitionError               → Error del servicio de reconocimiento
    │   ├── RecognitionNotConfiguredError
    │   ├── RecognitionServiceError    → Servicio caído, timeout, respuesta no-OK
    │   ├── UnsupportedFormatError     → El servicio rechaza el formato (subir imagen)
    │   ├── EmptyRecognitionError      → Respuesta sin transcripción
    │   └── InsufficientTextError      → Transcripción demasiado corta
    ├── NoTransactionsError            → Texto leído, cero movimientos (con sugerencias)
    ├── PersistenceError               → Error al insertar en el libro
    │   └── DuplicateLineError         → Línea ya existente (se cuenta, no aborta)
    └── OutputError                    → Error al generar el archivo de salida
"""


class ParserBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar CUALQUIER error del proyecto con un solo
    `except ParserBaseError` en el CLI, sin exponer trazas al usuario.
    """


class InputError(ParserBaseError):
    """Se lanza cuando la solicitud no trae los campos obligatorios.

    Se valida ANTES de cualquier extracción:
    - No se recibió archivo (o viene vacío).
    - No se indicó la cuenta bancaria destino.
    - No se indicó la moneda.
    """

    def __init__(self, campo: str, detalle: str = ""):
        self.campo = campo
        self.detalle = detalle
        mensaje = f"Falta el campo obligatorio '{campo}'"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(ParserBaseError):
    """Se lanza cuando falla la extracción de texto de un archivo."""

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo texto de '{archivo}': {causa}")


class TextLayerNotFoundError(ExtractionError):
    """Ninguna estrategia de extracción encontró bloques de texto.

    Típico de PDFs escaneados (solo imagen) o cifrados. La salida es
    reintentar con reconocimiento o usar otro formato de exportación.
    """

    def __init__(self, archivo: str):
        super().__init__(
            archivo,
            "El documento no tiene texto extraíble. "
            "Active el reconocimiento (OCR) o use la exportación a Excel de e-Banking.",
        )


class RecognitionError(ParserBaseError):
    """Base de los errores del adaptador de reconocimiento."""

    def __init__(self, motor: str, causa: str):
        self.motor = motor
        self.causa = causa
        super().__init__(f"Error de reconocimiento ({motor}): {causa}")


class RecognitionNotConfiguredError(RecognitionError):
    """Se pidió reconocimiento pero no hay motor configurado."""

    def __init__(self, motor: str = "ninguno"):
        super().__init__(
            motor,
            "El reconocimiento no está configurado. Use la exportación a Excel.",
        )


class RecognitionServiceError(RecognitionError):
    """El servicio no respondió, expiró el timeout o devolvió un error."""


class UnsupportedFormatError(RecognitionError):
    """El servicio rechazó el formato del archivo.

    El mensaje indica al usuario que vuelva a subir el documento como
    imagen (PNG/JPG) en lugar del formato original.
    """

    def __init__(self, motor: str, detalle: str = ""):
        self.detalle = detalle
        super().__init__(
            motor,
            "El servicio no puede procesar este formato directamente. "
            "Suba el estado de cuenta como imagen PNG/JPG o use la exportación a Excel.",
        )


class EmptyRecognitionError(RecognitionError):
    """La respuesta del servicio no trae el campo de transcripción."""


class InsufficientTextError(RecognitionError):
    """La transcripción es más corta que el mínimo utilizable."""

    def __init__(self, motor: str, longitud: int, minimo: int):
        self.longitud = longitud
        self.minimo = minimo
        super().__init__(
            motor,
            f"No se pudo extraer suficiente texto del archivo "
            f"({longitud} caracteres, mínimo {minimo})",
        )


class NoTransactionsError(ParserBaseError):
    """Se leyó texto pero el parser no encontró ningún movimiento.

    NO es un crash: es una falla recuperable que el usuario puede resolver.
    Por eso lleva una lista de sugerencias accionables y la bandera
    `can_use_recognition` para que la interfaz ofrezca reintentar con OCR.
    """

    SUGGESTIONS: tuple[str, ...] = (
        'Use "Download as Excel" from BCA e-Banking (recommended)',
        'Click "Run OCR Anyway" to process with optical character recognition',
        "Upload as PNG/JPG image instead of PDF",
        "Manually enter transactions using the Excel template",
    )

    def __init__(self, archivo: str, longitud_texto: int = 0):
        self.archivo = archivo
        self.longitud_texto = longitud_texto
        self.can_use_recognition = True
        self.suggestions = list(self.SUGGESTIONS)
        super().__init__(
            f"No se encontraron movimientos válidos en '{archivo}'. "
            f"El documento puede estar cifrado o ser solo imagen."
        )

    def to_payload(self) -> dict:
        """Cuerpo de respuesta para la interfaz de revisión."""
        return {
            "error": str(self),
            "canUseOCR": self.can_use_recognition,
            "suggestions": list(self.suggestions),
        }


class PersistenceError(ParserBaseError):
    """Error al insertar una línea en el libro de bancos."""


class DuplicateLineError(PersistenceError):
    """La línea ya existe (restricción de unicidad del almacenamiento).

    No es fatal: el StatementProcessor la cuenta como duplicado y sigue
    con las líneas restantes.
    """


class OutputError(ParserBaseError):
    """Se lanza cuando falla la generación del archivo de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
