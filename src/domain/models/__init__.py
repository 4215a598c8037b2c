"""
Modelos de dominio del proyecto atm-withdrawal.

Todos los modelos son objetos de valor inmutables (dataclasses con
frozen=True o enumeraciones) sin dependencias externas.

Uso:
    from src.domain.models import Money, Card, PinCode, Banknote, Withdrawal
"""

from src.domain.models.authorization_token import AuthorizationToken
from src.domain.models.banknote import Banknote, banknotes_for
from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.pin_code import PinCode
from src.domain.models.withdrawal import Withdrawal

__all__ = [
    "AuthorizationToken",
    "Banknote",
    "Card",
    "Money",
    "PinCode",
    "Withdrawal",
    "banknotes_for",
]
