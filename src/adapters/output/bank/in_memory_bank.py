"""
Adaptador de salida: Banco simulado en memoria.

Implementación de Bank para correr el cajero de punta a punta sin un
core bancario real (CLI, demos, tests de integración). No pretende
reproducir las reglas de un banco real: solo PIN, saldo y moneda.

Reglas:
- authorize() emite un token aleatorio nuevo por cada autorización.
- Un token sirve para UN cargo: se consume cuando el cargo se completa.
- charge() falla si el token no existe, si la moneda no es la de la
  cuenta o si el saldo no alcanza. En ese caso el saldo no cambia.
"""

import secrets
from collections.abc import Sequence
from dataclasses import dataclass

from src.domain.exceptions import AccountError, AuthorizationError
from src.domain.models.authorization_token import AuthorizationToken
from src.domain.models.money import Money
from src.domain.ports.bank import Bank


@dataclass
class _Cuenta:
    pin_digits: tuple[int, ...]
    balance: int
    currency: str


class InMemoryBank(Bank):
    """Banco con cuentas en memoria, una por tarjeta."""

    def __init__(self) -> None:
        self._cuentas: dict[str, _Cuenta] = {}
        # token → número de tarjeta
        self._tokens: dict[str, str] = {}

    def register_account(
        self, card_number: str, pin_digits: Sequence[int], balance: Money
    ) -> None:
        """Da de alta una cuenta asociada a una tarjeta.

        Raises:
            ValueError: Si la tarjeta ya tiene cuenta o el saldo no tiene moneda.
        """
        if card_number in self._cuentas:
            raise ValueError(f"La tarjeta ya tiene una cuenta registrada: {card_number[-4:]}")
        if balance.currency is None:
            raise ValueError("El saldo inicial debe indicar una moneda")
        self._cuentas[card_number] = _Cuenta(
            pin_digits=tuple(pin_digits),
            balance=balance.amount,
            currency=balance.currency,
        )

    def balance_of(self, card_number: str) -> Money:
        cuenta = self._cuentas[card_number]
        return Money(cuenta.balance, cuenta.currency)

    def authorize(self, pin_digits: Sequence[int], card_number: str) -> AuthorizationToken:
        cuenta = self._cuentas.get(card_number)
        if cuenta is None:
            raise AuthorizationError("Tarjeta desconocida")
        if tuple(pin_digits) != cuenta.pin_digits:
            raise AuthorizationError("PIN incorrecto")

        token = secrets.token_hex(16)
        self._tokens[token] = card_number
        return AuthorizationToken.create(token)

    def charge(self, token: AuthorizationToken, amount: Money) -> None:
        card_number = self._tokens.get(token.value)
        if card_number is None:
            raise AccountError("token de autorización inválido o ya utilizado")

        cuenta = self._cuentas[card_number]
        if not amount.matches_currency(cuenta.currency):
            raise AccountError(
                f"la cuenta es en {cuenta.currency}, el cargo es en {amount.currency}"
            )
        if amount.amount > cuenta.balance:
            raise AccountError(
                f"saldo insuficiente: disponible {cuenta.balance}, se pidió {amount.amount}"
            )

        cuenta.balance -= amount.amount
        del self._tokens[token.value]
