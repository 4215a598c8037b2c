"""
Adaptador de salida: Bitácora en memoria.

Implementación de OperationLogger que acumula los eventos en una lista.
La usan los tests para verificar qué pasó en un retiro sin capturar stdout.

Cada evento se guarda como (nombre_evento, datos).
"""

from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.withdrawal import Withdrawal
from src.domain.ports.operation_logger import OperationLogger


class InMemoryLogger(OperationLogger):
    """Bitácora que guarda los eventos en memoria."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []
        self._solicitudes: int = 0
        self._completados: int = 0
        self._rechazados: int = 0
        self._monto_entregado: int = 0
        self._billetes_entregados: int = 0
        self._errores: list[dict] = []
        # Billetes del último plan, se cuentan cuando el cargo se confirma
        self._billetes_pendientes: int = 0

    @property
    def event_names(self) -> list[str]:
        return [nombre for nombre, _ in self.events]

    # --- Validación y autorización ---

    def log_withdrawal_requested(self, card: Card, amount: Money) -> None:
        self._solicitudes += 1
        self.events.append(("withdrawal_requested", {"tarjeta": card.masked, "monto": str(amount)}))

    def log_currency_rejected(self, amount: Money, expected_currency: str) -> None:
        self._rechazados += 1
        self.events.append(
            ("currency_rejected", {"monto": str(amount), "esperada": expected_currency})
        )

    def log_authorization_granted(self, card: Card) -> None:
        self.events.append(("authorization_granted", {"tarjeta": card.masked}))

    def log_authorization_failed(self, card: Card, error: Exception) -> None:
        self._rechazados += 1
        self.events.append(
            ("authorization_failed", {"tarjeta": card.masked, "error": str(error)})
        )

    # --- Selección de billetes ---

    def log_banknotes_planned(self, amount: Money, withdrawal: Withdrawal) -> None:
        self.events.append(
            (
                "banknotes_planned",
                {"monto": str(amount), "billetes": [b.face_value for b in withdrawal.banknotes]},
            )
        )
        self._billetes_pendientes = len(withdrawal.banknotes)
        if amount.is_zero:
            # Un retiro en cero no llega al cargo: termina aquí
            self._completados += 1

    def log_breakdown_failed(self, amount: Money, error: Exception) -> None:
        self._rechazados += 1
        self.events.append(("breakdown_failed", {"monto": str(amount), "error": str(error)}))

    # --- Cargo ---

    def log_charge_completed(self, card: Card, amount: Money) -> None:
        self._completados += 1
        self._monto_entregado += amount.amount
        self._billetes_entregados += self._billetes_pendientes
        self._billetes_pendientes = 0
        self.events.append(("charge_completed", {"tarjeta": card.masked, "monto": str(amount)}))

    def log_error(self, card: Card, error: Exception) -> None:
        self._rechazados += 1
        self._errores.append({"tarjeta": card.masked, "error": str(error)})
        self.events.append(("error", {"tarjeta": card.masked, "error": str(error)}))

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "solicitudes": self._solicitudes,
            "retiros_completados": self._completados,
            "retiros_rechazados": self._rechazados,
            "monto_entregado": self._monto_entregado,
            "billetes_entregados": self._billetes_entregados,
            "errores": self._errores,
        }
