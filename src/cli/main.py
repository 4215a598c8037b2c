"""
Punto de entrada CLI: atm-withdraw.

Uso:
    # Retirar 1080 PLN con el inventario de un CSV
    atm-withdraw /ruta/casete.csv 1080 --card 1111222233334444 --pin 1234

    # Con saldo inicial y comprobante en Excel
    atm-withdraw /ruta/casete.xlsx 1,080 --card 1111222233334444 --pin 1234 \\
        --balance 5000 -o /ruta/comprobante.xlsx

El banco es simulado (InMemoryBank) con una sola cuenta para la tarjeta
indicada. Este módulo es el ÚNICO lugar donde se ensamblan los
componentes; no contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from src.adapters.input.deposits.spreadsheet_loader import load_deposit
from src.adapters.output.bank.in_memory_bank import InMemoryBank
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.writers.excel_writer import ExcelReceiptWriter
from src.domain.exceptions import ATMBaseError
from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.pin_code import PinCode
from src.domain.services.atm_machine import ATMachine
from src.domain.shared.money import format_amount, parse_amount


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    try:
        amount = Money(parse_amount(args.amount), args.currency)
        balance = Money(parse_amount(args.balance), args.currency)
        pin = _parse_pin(args.pin)
    except ValueError as e:
        print(f"❌ Argumento inválido: {e}")
        sys.exit(2)

    card = Card.create(args.card)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()

    bank = InMemoryBank()
    bank.register_account(card.number, pin.digits, balance)

    print("=" * 60)
    print("CAJERO AUTOMÁTICO — RETIRO")
    print("=" * 60)
    print(f"  Depósito: {args.deposit_file}")
    print(f"  Tarjeta:  {card.masked}")
    print(f"  Monto:    {format_amount(amount.amount, amount.currency)}")
    print()

    try:
        deposit = load_deposit(Path(args.deposit_file))
        atm = ATMachine(bank, args.currency, logger=logger)
        atm.set_deposit(deposit)

        withdrawal = atm.withdraw(pin, card, amount)

        if args.output:
            ruta = ExcelReceiptWriter().write_receipt(card, amount, withdrawal, Path(args.output))
            print(f"\n📁 Comprobante generado: {ruta}")
    except ATMBaseError as e:
        print(f"\n❌ {e}")
        logger.print_summary()
        sys.exit(1)

    print(f"\n  Saldo restante: {format_amount(bank.balance_of(card.number).amount, args.currency)}")

    # --- Resumen final ---
    logger.print_summary()


def _parse_pin(text: str) -> PinCode:
    """Convierte '1234' en PinCode(1, 2, 3, 4)."""
    if not text.isdigit():
        raise ValueError("el PIN solo puede contener dígitos")
    return PinCode.create(*(int(c) for c in text))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Simula un retiro de efectivo en un cajero automático",
        epilog="Ejemplo: atm-withdraw casete.csv 1080 --card 1111222233334444 --pin 1234",
    )

    parser.add_argument(
        "deposit_file",
        help="Archivo CSV o XLSX con el inventario (Moneda, Denominacion, Cantidad)",
    )

    parser.add_argument("amount", help="Monto a retirar, en unidades enteras")

    parser.add_argument("--card", required=True, help="Número de tarjeta")

    parser.add_argument("--pin", required=True, help="PIN de 4 dígitos")

    parser.add_argument(
        "--currency",
        default="PLN",
        help="Moneda de operación del cajero (por defecto: PLN)",
    )

    parser.add_argument(
        "--balance",
        default="10000",
        help="Saldo inicial de la cuenta simulada (por defecto: 10000)",
    )

    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Ruta del comprobante Excel. Si no se especifica, no se genera.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
