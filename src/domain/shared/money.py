"""
Utilidades para manejo de montos de retiro.

Un cajero solo entrega billetes, así que los montos son enteros. Estas
funciones convierten lo que teclea el usuario (o lo que viene en un
archivo de inventario) a `int`, y dan formato legible para consola y
comprobantes.

Formatos aceptados por parse_amount:
    "1080", "1,080", "$1,080", " 1 080 ", "1080.00"

Formatos rechazados (lanzan ValueError):
    "", "-50", "1080.50", "MIL"
"""

from decimal import Decimal, InvalidOperation


def parse_amount(text: str) -> int:
    """Convierte un texto con formato monetario a un monto entero.

    Args:
        text: Texto que representa un monto.

    Returns:
        Monto en unidades enteras (>= 0).

    Raises:
        TypeError: Si no se recibe un str.
        ValueError: Si el texto está vacío, es negativo, tiene centavos
                    distintos de cero o no es un número.

    Ejemplos:
        >>> parse_amount("$1,080")
        1080
        >>> parse_amount("200.00")
        200
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_amount espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    # Quitar símbolo de moneda, espacios y comas de miles
    cleaned = text.strip().replace("$", "").replace(" ", "").replace(",", "")

    if not cleaned or cleaned == "-":
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    try:
        valor = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{cleaned}')")

    if not valor.is_finite():
        raise ValueError(f"No se pudo convertir a monto: '{text}'")
    if valor < 0:
        raise ValueError(f"El monto no puede ser negativo: '{text}'")
    if valor != valor.to_integral_value():
        raise ValueError(f"El cajero no entrega centavos: '{text}'")

    return int(valor)


def format_amount(amount: int, currency: str | None = None) -> str:
    """Formatea un monto entero con separador de miles.

    Ejemplos:
        >>> format_amount(1080, "PLN")
        '1,080 PLN'
        >>> format_amount(0)
        '0'
    """
    texto = f"{amount:,}"
    if currency:
        return f"{texto} {currency}"
    return texto
