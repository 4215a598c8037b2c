"""
Modelo de dominio: Money (monto + moneda).

Decisiones de diseño:
- El monto es `int` (unidades enteras de la moneda). Un cajero solo
  entrega billetes, así que nunca hay centavos en un retiro.
- La moneda es un código ISO de 3 letras en mayúsculas ("PLN", "USD").
- Existe el centinela Money.ZERO, con moneda `None`: representa "no
  retirar nada" y pasa cualquier validación de moneda.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Money:
    """Cantidad de dinero en una moneda concreta. Inmutable."""

    amount: int
    """Monto en unidades enteras. Siempre >= 0."""

    currency: str | None
    """Código ISO 4217. None solo en el centinela de monto cero."""

    ZERO: ClassVar["Money"]

    def matches_currency(self, currency: str) -> bool:
        """Indica si este monto puede operarse en `currency`.

        El centinela sin moneda coincide con cualquiera.
        """
        return self.currency is None or self.currency == currency

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def __post_init__(self) -> None:
        # bool es subclase de int; Money(True, "PLN") no tiene sentido
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise TypeError(f"amount debe ser int, recibió {type(self.amount).__name__}")
        if self.amount < 0:
            raise ValueError(f"amount no puede ser negativo: {self.amount}")
        if self.currency is None:
            if self.amount != 0:
                raise ValueError("Solo un monto cero puede omitir la moneda")
            return
        if len(self.currency) != 3 or not self.currency.isalpha() or not self.currency.isupper():
            raise ValueError(
                f"currency debe ser un código de 3 letras mayúsculas: '{self.currency}'"
            )

    def __str__(self) -> str:
        if self.currency is None:
            return str(self.amount)
        return f"{self.amount} {self.currency}"


Money.ZERO = Money(0, None)
