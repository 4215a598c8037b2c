"""
Modelo de dominio: Token de autorización.

Valor opaco que entrega el banco al autorizar. El cajero no lo
interpreta: solo lo devuelve al banco en el cargo.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthorizationToken:
    value: str

    @classmethod
    def create(cls, value: str) -> "AuthorizationToken":
        return cls(value=value)
