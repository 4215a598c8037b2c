"""
Modelo de dominio: Resultado de un retiro exitoso.

Un Withdrawal es la lista exacta de billetes a entregar, en orden de
entrega (primero la denominación más alta). Se usa tupla y no lista
para que el resultado sea inmutable de verdad: ningún componente puede
"agregar un billete" a un retiro ya cobrado.
"""

from dataclasses import dataclass

from src.domain.models.banknote import Banknote


@dataclass(frozen=True)
class Withdrawal:
    """Billetes a entregar al cliente."""

    banknotes: tuple[Banknote, ...] = ()

    @property
    def total(self) -> int:
        """Suma de los valores faciales de los billetes."""
        return sum(b.face_value for b in self.banknotes)

    @property
    def is_empty(self) -> bool:
        return not self.banknotes

    def breakdown(self) -> dict[Banknote, int]:
        """Cantidad de billetes por denominación, en orden de entrega.

        Ejemplo:
            >>> Withdrawal((Banknote.PL_200, Banknote.PL_200, Banknote.PL_10)).breakdown()
            {<Banknote.PL_200: (200, 'PLN')>: 2, <Banknote.PL_10: (10, 'PLN')>: 1}
        """
        conteo: dict[Banknote, int] = {}
        for billete in self.banknotes:
            conteo[billete] = conteo.get(billete, 0) + 1
        return conteo

    def __post_init__(self) -> None:
        # Acepta listas por comodidad, pero siempre guarda una tupla
        if not isinstance(self.banknotes, tuple):
            object.__setattr__(self, "banknotes", tuple(self.banknotes))
