"""
Puerto de entrada: Parser de estados de cuenta.

Recibe texto plano (venga de la extracción nativa o del reconocimiento)
y devuelve un ParsedStatement ya finalizado por el Aggregator.

¿Por qué recibe str y no páginas?
Porque el texto de la extracción por objetos de PDF no conserva la
paginación, y el del servicio de visión tampoco. El parser de bloques
no la necesita: trabaja sobre la secuencia de líneas.
"""

from abc import ABC, abstractmethod

from bca_parser.domain.models.parsed_statement import ParsedStatement


class StatementParser(ABC):
    """Interfaz para parsear el texto de un estado de cuenta."""

    @abstractmethod
    def parse(self, text: str, currency: str = "") -> ParsedStatement:
        """Parsea el texto completo.

        Args:
            text: Texto del estado de cuenta.
            currency: Moneda de la cuenta destino. Se copia al resultado
                      sin usarse en el parseo.

        Returns:
            ParsedStatement con totales calculados. Si no se reconoce
            ningún movimiento, `transactions` viene vacía: decidir qué
            hacer con eso es responsabilidad del llamador, no del parser.
        """
        ...
