"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import Bank, MoneyDeposit, OperationLogger
"""

from src.domain.ports.bank import Bank
from src.domain.ports.money_deposit import MoneyDeposit
from src.domain.ports.operation_logger import OperationLogger
from src.domain.ports.receipt_writer import ReceiptWriter

__all__ = [
    "Bank",
    "MoneyDeposit",
    "OperationLogger",
    "ReceiptWriter",
]
