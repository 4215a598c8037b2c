"""
Adaptador de entrada: Depósito de billetes en memoria.

Implementación de MoneyDeposit respaldada por un diccionario
Banknote → cantidad. La usan el CLI (tras cargar el inventario desde
un archivo) y los tests.
"""

from collections.abc import Mapping
from types import MappingProxyType

from src.domain.models.banknote import Banknote
from src.domain.ports.money_deposit import MoneyDeposit


class InMemoryMoneyDeposit(MoneyDeposit):
    """Inventario fijo de billetes de una sola moneda."""

    def __init__(self, currency: str, counts: Mapping[Banknote, int] | None = None) -> None:
        """
        Args:
            currency: Moneda del depósito.
            counts: Cantidad por denominación. Las que no aparecen
                    cuentan como 0.

        Raises:
            ValueError: Si hay cantidades negativas o billetes de otra moneda.
        """
        counts = dict(counts or {})
        for billete, cantidad in counts.items():
            if billete.currency != currency:
                raise ValueError(
                    f"{billete.name} es de {billete.currency}, el depósito es de {currency}"
                )
            if cantidad < 0:
                raise ValueError(f"Cantidad negativa para {billete.name}: {cantidad}")

        self._currency = currency
        self._counts = counts

    def get_currency(self) -> str:
        return self._currency

    def get_available_count_of(self, banknote: Banknote) -> int:
        return self._counts.get(banknote, 0)

    @property
    def counts(self) -> Mapping[Banknote, int]:
        """Vista de solo lectura del inventario."""
        return MappingProxyType(self._counts)

    @property
    def total(self) -> int:
        """Valor total del inventario."""
        return sum(b.face_value * c for b, c in self._counts.items())
