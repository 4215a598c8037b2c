"""
Puerto de salida: Escritor de comprobantes.

Define el contrato para dejar constancia de un retiro en algún formato
persistente (Excel, PDF, ticket impreso). Hoy es Excel; el dominio no
lo sabe.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.withdrawal import Withdrawal


class ReceiptWriter(ABC):
    """Interfaz para escribir comprobantes de retiro."""

    @abstractmethod
    def write_receipt(
        self,
        card: Card,
        amount: Money,
        withdrawal: Withdrawal,
        output_path: Path,
    ) -> Path:
        """Escribe el comprobante de un retiro exitoso.

        Args:
            card: Tarjeta con la que se retiró (se escribe enmascarada).
            amount: Monto solicitado y cobrado.
            withdrawal: Billetes entregados.
            output_path: Ruta donde crear el archivo.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...
