"""
Puerto de salida: Banco.

Define el contrato con el sistema bancario que autoriza y cobra los
retiros. El cajero no sabe si del otro lado hay un core bancario real,
un simulador en memoria o un doble de prueba: solo conoce esta interfaz.

La conexión (red, protocolo, reintentos) es responsabilidad de quien
implemente el puerto. Para el cajero ambas llamadas son síncronas.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.domain.models.authorization_token import AuthorizationToken
from src.domain.models.money import Money


class Bank(ABC):
    """Interfaz del banco que respalda al cajero."""

    @abstractmethod
    def authorize(self, pin_digits: Sequence[int], card_number: str) -> AuthorizationToken:
        """Autoriza una operación para el par PIN/tarjeta.

        Args:
            pin_digits: Los 4 dígitos del PIN, en orden.
            card_number: Número de la tarjeta.

        Returns:
            Token opaco que se debe presentar en charge().

        Raises:
            AuthorizationError: Si el banco rechaza las credenciales.
        """
        ...

    @abstractmethod
    def charge(self, token: AuthorizationToken, amount: Money) -> None:
        """Carga `amount` a la cuenta asociada al token.

        Raises:
            AccountError: Si el cargo no se puede completar (saldo
                          insuficiente, token inválido, etc.).
        """
        ...
