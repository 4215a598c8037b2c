"""
Modelo de dominio: Tarjeta bancaria.

Solo transporta el número. La validación del número (Luhn, emisor,
vigencia) le corresponde al banco, no al cajero.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """Tarjeta insertada en el cajero."""

    number: str
    """Número de la tarjeta tal como lo leyó el lector."""

    @classmethod
    def create(cls, number: str) -> "Card":
        return cls(number=number)

    @property
    def masked(self) -> str:
        """Número enmascarado para bitácoras y comprobantes.

        Ejemplo:
            >>> Card.create("1111222233334444").masked
            '************4444'
        """
        visibles = self.number[-4:]
        return "*" * (len(self.number) - len(visibles)) + visibles
