"""
Modelo de dominio: Billetes (denominaciones) que el cajero puede entregar.

El catálogo es fijo por moneda. Hoy el cajero solo opera en zlotys
(PLN), con billetes de 10 a 500. Agregar una moneda nueva es agregar
sus miembros a la enumeración; banknotes_for() los recoge solo.
"""

from enum import Enum


class Banknote(Enum):
    """Denominación de billete, con su valor facial y su moneda."""

    PL_10 = (10, "PLN")
    PL_20 = (20, "PLN")
    PL_50 = (50, "PLN")
    PL_100 = (100, "PLN")
    PL_200 = (200, "PLN")
    PL_500 = (500, "PLN")

    def __init__(self, face_value: int, currency: str) -> None:
        self.face_value = face_value
        self.currency = currency

    @property
    def value_label(self) -> str:
        """Etiqueta legible: '500 PLN'."""
        return f"{self.face_value} {self.currency}"


def banknotes_for(currency: str) -> list[Banknote]:
    """Devuelve el catálogo de billetes de una moneda.

    El orden es estrictamente descendente por valor facial, que es el
    orden en que el algoritmo de selección los recorre.

    Returns:
        Lista de Banknote (vacía si la moneda no tiene billetes).
    """
    notas = [b for b in Banknote if b.currency == currency]
    return sorted(notas, key=lambda b: b.face_value, reverse=True)
