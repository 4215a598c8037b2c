"""
Servicio de dominio: Cajero automático (retiro de efectivo).

Orquesta un retiro completo:
1. Valida la moneda del monto (sin tocar el banco).
2. Pide autorización al banco (PIN + tarjeta).
3. Calcula los billetes a entregar (banknote_planner).
4. Carga la cuenta con el monto ORIGINAL solicitado.
5. Devuelve el Withdrawal con los billetes.

Estados de una llamada:

    START → CURRENCY_VALIDATED → AUTHORIZED → PLANNED → CHARGED → DONE

con salida temprana en la validación de moneda, en la autorización y
en la selección de billetes. Ninguna salida temprana llega a cargar la
cuenta. Cada llamada es independiente: el cajero no guarda estado
entre retiros, salvo el banco, la moneda y el depósito configurados.
"""

from src.domain.exceptions import ATMOperationError, AuthorizationError, ErrorCode
from src.domain.models.banknote import banknotes_for
from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.pin_code import PinCode
from src.domain.models.withdrawal import Withdrawal
from src.domain.ports.bank import Bank
from src.domain.ports.money_deposit import MoneyDeposit
from src.domain.ports.operation_logger import OperationLogger
from src.domain.services.banknote_planner import plan_banknotes


class ATMachine:
    """Cajero automático que opera en una sola moneda.

    Recibe sus dependencias por constructor (Dependency Injection). El
    depósito se asigna después con set_deposit(), porque en la máquina
    real el casete de billetes se coloca una vez que el cajero ya está
    conectado al banco.
    """

    def __init__(
        self,
        bank: Bank,
        currency: str,
        logger: OperationLogger,
    ) -> None:
        """
        Args:
            bank: Banco que autoriza y cobra.
            currency: Moneda de operación (código ISO, ej. 'PLN').
            logger: Bitácora de operaciones.
        """
        self._bank = bank
        self._currency = currency
        self._logger = logger
        self._deposit: MoneyDeposit | None = None

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def logger(self) -> OperationLogger:
        return self._logger

    def set_deposit(self, deposit: MoneyDeposit) -> None:
        """Asigna el inventario de billetes. Debe llamarse antes de withdraw()."""
        self._deposit = deposit

    def withdraw(self, pin: PinCode, card: Card, amount: Money) -> Withdrawal:
        """Ejecuta un retiro.

        Args:
            pin: PIN tecleado por el cliente.
            card: Tarjeta insertada.
            amount: Monto solicitado. Money.ZERO es válido: se autoriza
                    pero no se cobra ni se entregan billetes.

        Returns:
            Withdrawal con los billetes a entregar, de mayor a menor.

        Raises:
            ATMOperationError: CURRENCY_MISMATCH, AUTHORIZATION_FAILURE o
                               INSUFFICIENT_FUNDS_BREAKDOWN. En ningún
                               caso se llegó a cargar la cuenta.
            AccountError: Si el banco no pudo completar el cargo. Se
                          propaga sin traducir.
            RuntimeError: Si no se asignó un depósito.
        """
        if self._deposit is None:
            raise RuntimeError("No hay depósito asignado: llamar set_deposit() antes de withdraw()")

        self._logger.log_withdrawal_requested(card, amount)

        # Paso 1: Moneda. Se valida ANTES de hablar con el banco.
        self._check_currency(amount)

        # Paso 2: Autorización
        try:
            token = self._bank.authorize(pin.digits, card.number)
        except AuthorizationError as e:
            self._logger.log_authorization_failed(card, e)
            raise ATMOperationError(ErrorCode.AUTHORIZATION_FAILURE, e.detalle) from e

        self._logger.log_authorization_granted(card)

        # Paso 3: Billetes
        try:
            billetes = plan_banknotes(amount.amount, banknotes_for(self._currency), self._deposit)
        except ATMOperationError as e:
            self._logger.log_breakdown_failed(amount, e)
            raise

        withdrawal = Withdrawal(tuple(billetes))
        self._logger.log_banknotes_planned(amount, withdrawal)

        # Monto cero: autorizado, pero no hay nada que cobrar
        if amount.is_zero:
            return withdrawal

        # Paso 4: Cargo. Los errores de cuenta no se traducen ni se reintentan.
        try:
            self._bank.charge(token, amount)
        except Exception as e:
            self._logger.log_error(card, e)
            raise

        self._logger.log_charge_completed(card, amount)
        return withdrawal

    def _check_currency(self, amount: Money) -> None:
        """Lanza CURRENCY_MISMATCH si el monto no es de la moneda del cajero
        o de la del depósito."""
        deposit_currency = self._deposit.get_currency()

        if not amount.matches_currency(self._currency):
            self._logger.log_currency_rejected(amount, self._currency)
            raise ATMOperationError(
                ErrorCode.CURRENCY_MISMATCH,
                f"el cajero opera en {self._currency}, se pidió {amount.currency}",
            )

        if not amount.matches_currency(deposit_currency):
            self._logger.log_currency_rejected(amount, deposit_currency)
            raise ATMOperationError(
                ErrorCode.CURRENCY_MISMATCH,
                f"el depósito tiene billetes en {deposit_currency}, se pidió {amount.currency}",
            )
