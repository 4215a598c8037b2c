"""
Adaptador de salida: Logger a consola.

Implementación de OperationLogger que imprime cada evento a stdout con
un formato consistente y un resumen final. Reutiliza los contadores de
InMemoryLogger; solo agrega la impresión.

Útil para:
- Desarrollo y debugging.
- Ejecución manual desde terminal (CLI atm-withdraw).
"""

from src.adapters.output.loggers.memory_logger import InMemoryLogger
from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.withdrawal import Withdrawal
from src.domain.shared.money import format_amount


class ConsoleLogger(InMemoryLogger):
    """Logger que imprime eventos del cajero a consola."""

    # --- Validación y autorización ---

    def log_withdrawal_requested(self, card: Card, amount: Money) -> None:
        super().log_withdrawal_requested(card, amount)
        print(f"  💳 Solicitud: {card.masked} — {_fmt(amount)}")

    def log_currency_rejected(self, amount: Money, expected_currency: str) -> None:
        super().log_currency_rejected(amount, expected_currency)
        print(f"  ❌ Moneda rechazada: {amount.currency} (se esperaba {expected_currency})")

    def log_authorization_granted(self, card: Card) -> None:
        super().log_authorization_granted(card)
        print(f"  🔓 Autorizado: {card.masked}")

    def log_authorization_failed(self, card: Card, error: Exception) -> None:
        super().log_authorization_failed(card, error)
        print(f"  🔒 Autorización rechazada: {card.masked} — {error}")

    # --- Selección de billetes ---

    def log_banknotes_planned(self, amount: Money, withdrawal: Withdrawal) -> None:
        super().log_banknotes_planned(amount, withdrawal)
        if withdrawal.is_empty:
            print("  💵 Sin billetes que entregar (monto cero)")
            return
        detalle = ", ".join(
            f"{cantidad} x {billete.face_value}"
            for billete, cantidad in withdrawal.breakdown().items()
        )
        print(f"  💵 Billetes: {detalle}")

    def log_breakdown_failed(self, amount: Money, error: Exception) -> None:
        super().log_breakdown_failed(amount, error)
        print(f"  ❌ No se puede entregar {_fmt(amount)} — {error}")

    # --- Cargo ---

    def log_charge_completed(self, card: Card, amount: Money) -> None:
        super().log_charge_completed(card, amount)
        print(f"  ✅ Cargo realizado: {card.masked} — {_fmt(amount)}")

    def log_error(self, card: Card, error: Exception) -> None:
        super().log_error(card, error)
        print(f"  ❌ Error: {card.masked} — {error}")

    # --- Resumen ---

    def print_summary(self) -> None:
        """Imprime el resumen final de operaciones."""
        resumen = self.get_summary()
        print("\n" + "=" * 60)
        print("RESUMEN DE OPERACIONES")
        print("=" * 60)
        print(f"  Solicitudes:          {resumen['solicitudes']}")
        print(f"  Retiros completados:  {resumen['retiros_completados']}")
        print(f"  Retiros rechazados:   {resumen['retiros_rechazados']}")
        print(f"  Monto entregado:      {format_amount(resumen['monto_entregado'])}")
        print(f"  Billetes entregados:  {resumen['billetes_entregados']}")

        if resumen["errores"]:
            print("\n  ERRORES:")
            for err in resumen["errores"]:
                print(f"    - {err['tarjeta']}: {err['error']}")

        print("=" * 60)


def _fmt(amount: Money) -> str:
    return format_amount(amount.amount, amount.currency)
