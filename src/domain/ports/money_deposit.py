"""
Puerto de entrada: Depósito de billetes del cajero.

Representa el inventario físico de billetes. Lo modifica la máquina
(al entregar o al recargar), nunca el núcleo: para el ATMachine es de
solo lectura.
"""

from abc import ABC, abstractmethod

from src.domain.models.banknote import Banknote


class MoneyDeposit(ABC):
    """Interfaz del inventario de billetes."""

    @abstractmethod
    def get_currency(self) -> str:
        """Moneda de los billetes que contiene el depósito."""
        ...

    @abstractmethod
    def get_available_count_of(self, banknote: Banknote) -> int:
        """Cantidad disponible de una denominación.

        Returns:
            Entero >= 0. Una denominación que no está en el depósito
            devuelve 0.
        """
        ...
