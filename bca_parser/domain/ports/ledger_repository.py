"""
Puerto de salida: Libro de bancos (almacenamiento relacional).

El esquema, la inserción y la detección de duplicados viven fuera de
este proyecto. El núcleo solo necesita poder insertar una línea y saber
si el almacenamiento la rechazó por duplicada.
"""

from abc import ABC, abstractmethod

from bca_parser.domain.models.ledger_line import LedgerLine


class LedgerRepository(ABC):
    """Interfaz para insertar líneas de estado de cuenta."""

    @abstractmethod
    def insert_line(self, line: LedgerLine) -> None:
        """Inserta una línea.

        Raises:
            DuplicateLineError: Si viola la restricción de unicidad.
            PersistenceError: Ante cualquier otro error de inserción.
        """
        ...
