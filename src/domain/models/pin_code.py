"""
Modelo de dominio: PIN de 4 dígitos.
"""

from dataclasses import dataclass, field

PIN_LENGTH = 4


@dataclass(frozen=True)
class PinCode:
    """PIN tecleado por el cliente.

    `repr=False` en los dígitos evita que el PIN termine en una bitácora
    o en un traceback por accidente.
    """

    digits: tuple[int, ...] = field(repr=False)
    """Secuencia ordenada de exactamente 4 enteros entre 0 y 9."""

    @classmethod
    def create(cls, *digits: int) -> "PinCode":
        """Crea un PIN a partir de sus dígitos.

        Ejemplo:
            >>> PinCode.create(1, 2, 3, 4).digits
            (1, 2, 3, 4)
        """
        return cls(digits=tuple(digits))

    def __post_init__(self) -> None:
        if len(self.digits) != PIN_LENGTH:
            raise ValueError(
                f"El PIN debe tener {PIN_LENGTH} dígitos, tiene {len(self.digits)}"
            )
        for digit in self.digits:
            if not isinstance(digit, int) or isinstance(digit, bool) or not 0 <= digit <= 9:
                raise ValueError(f"Dígito de PIN inválido: {digit!r}")
