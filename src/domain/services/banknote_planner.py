"""
Servicio de dominio: Selección de billetes para un monto.

Algoritmo voraz (greedy), de la denominación más alta a la más baja:

    para cada denominación d (valor v, disponibles c):
        k = min(c, restante // v)
        agregar k billetes d
        restante -= k * v

Si al final restante != 0, el monto NO se puede entregar con el
inventario actual y no se entrega nada (no hay entregas parciales).

LIMITACIÓN CONOCIDA:
El algoritmo no retrocede. Con inventario limitado puede fallar aunque
exista otra combinación válida. Ejemplo: monto 60, con un billete de 50
y tres de 20. Greedy toma el 50, quedan 10 y no hay billetes de 10,
así que falla; la combinación 20+20+20 sí existía. Se mantiene así a
propósito: el comportamiento del cajero debe ser predecible.
"""

from collections.abc import Sequence

from src.domain.exceptions import ATMOperationError, ErrorCode
from src.domain.models.banknote import Banknote
from src.domain.ports.money_deposit import MoneyDeposit


def plan_banknotes(
    amount: int,
    denominations: Sequence[Banknote],
    deposit: MoneyDeposit,
) -> list[Banknote]:
    """Calcula los billetes a entregar para `amount`.

    Args:
        amount: Monto a entregar, en unidades enteras.
        denominations: Catálogo de la moneda en orden descendente
                       (ver banknotes_for).
        deposit: Inventario a consultar. Se pregunta una sola vez por
                 cada denominación; nunca se modifica.

    Returns:
        Lista de billetes cuya suma es exactamente `amount`, de mayor a
        menor. Lista vacía si `amount` es 0 (sin consultar el depósito).

    Raises:
        ATMOperationError: INSUFFICIENT_FUNDS_BREAKDOWN si el recorrido
                           voraz no llega exactamente a `amount`.

    Ejemplos:
        Inventario {500:1, 200:2, 100:0, 50:3, 20:1, 10:1}, monto 1080
        → [500, 200, 200, 50, 50, 50, 20, 10]
    """
    if amount < 0:
        raise ValueError(f"El monto no puede ser negativo: {amount}")
    if amount == 0:
        return []

    billetes: list[Banknote] = []
    restante = amount

    for billete in denominations:
        disponibles = deposit.get_available_count_of(billete)
        if disponibles < 0:
            raise ValueError(
                f"El depósito reportó una cantidad negativa de {billete.name}: {disponibles}"
            )

        tomar = min(disponibles, restante // billete.face_value)
        billetes.extend([billete] * tomar)
        restante -= tomar * billete.face_value

    if restante != 0:
        raise ATMOperationError(
            ErrorCode.INSUFFICIENT_FUNDS_BREAKDOWN,
            f"no se puede armar {amount} con el inventario, quedan {restante} sin cubrir",
        )

    return billetes
