"""
Puerto de salida: Bitácora de operaciones del cajero.

Define el contrato para registrar los eventos de negocio de un retiro.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "El banco rechazó la tarjeta" (no "WARNING: auth failed")
- "No se pudo armar el monto" (no "ERROR: remaining=3")

La implementación puede imprimir a consola, acumular en memoria para
tests o enviar a un sistema de auditoría, sin que el ATMachine cambie.

Regla: ningún método recibe el PIN. Las tarjetas se registran
enmascaradas.
"""

from abc import ABC, abstractmethod

from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.withdrawal import Withdrawal


class OperationLogger(ABC):
    """Interfaz para la bitácora de operaciones."""

    # --- Validación y autorización ---

    @abstractmethod
    def log_withdrawal_requested(self, card: Card, amount: Money) -> None:
        """Registra que llegó una solicitud de retiro."""
        ...

    @abstractmethod
    def log_currency_rejected(self, amount: Money, expected_currency: str) -> None:
        """Registra que el monto venía en una moneda que el cajero no maneja."""
        ...

    @abstractmethod
    def log_authorization_granted(self, card: Card) -> None:
        ...

    @abstractmethod
    def log_authorization_failed(self, card: Card, error: Exception) -> None:
        ...

    # --- Selección de billetes ---

    @abstractmethod
    def log_banknotes_planned(self, amount: Money, withdrawal: Withdrawal) -> None:
        """Registra los billetes elegidos para el monto."""
        ...

    @abstractmethod
    def log_breakdown_failed(self, amount: Money, error: Exception) -> None:
        """Registra que el monto no se pudo armar con el inventario.

        Args:
            amount: Monto solicitado.
            error: ATMOperationError con el detalle de lo que quedó sin
                   cubrir.
        """
        ...

    # --- Cargo ---

    @abstractmethod
    def log_charge_completed(self, card: Card, amount: Money) -> None:
        ...

    @abstractmethod
    def log_error(self, card: Card, error: Exception) -> None:
        """Registra un error no recuperable (por ejemplo, el cargo falló)."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de las operaciones registradas.

        Returns:
            Diccionario con métricas:
            {
                'solicitudes': int,
                'retiros_completados': int,
                'retiros_rechazados': int,
                'monto_entregado': int,
                'billetes_entregados': int,
                'errores': List[dict],  # [{tarjeta, error}]
            }
        """
        ...
