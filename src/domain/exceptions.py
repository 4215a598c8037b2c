"""
Excepciones de dominio del proyecto atm-withdrawal.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque quien llama a ATMachine.withdraw necesita distinguir entre
"la moneda no corresponde" y "el banco rechazó el PIN" para mostrar
un mensaje distinto en pantalla, sin parsear textos de error.

Jerarquía:
    ATMBaseError
    ├── ATMOperationError     → El cajero rechazó la operación (con ErrorCode)
    ├── AuthorizationError    → El banco rechazó el PIN/tarjeta
    ├── AccountError          → El banco no pudo cargar la cuenta
    ├── DepositLoadError      → No se pudo leer el inventario de billetes
    └── OutputError           → Error al generar el comprobante
"""

from enum import Enum


class ErrorCode(Enum):
    """Sub-código de ATMOperationError.

    Cada valor corresponde a un punto de salida temprana del retiro.
    """

    CURRENCY_MISMATCH = "currency_mismatch"
    """La moneda solicitada no es la del cajero ni la del depósito."""

    AUTHORIZATION_FAILURE = "authorization_failure"
    """El banco rechazó el par PIN/tarjeta."""

    INSUFFICIENT_FUNDS_BREAKDOWN = "insufficient_funds_breakdown"
    """El monto no se puede armar con los billetes disponibles."""


class ATMBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite que el CLI capture cualquier error del cajero con un solo
    `except ATMBaseError`.
    """


class ATMOperationError(ATMBaseError):
    """Se lanza cuando el cajero rechaza un retiro.

    El motivo concreto viaja en `error_code`. Nunca se lanza después de
    haber cargado la cuenta: si hay ATMOperationError, no hubo cargo.
    """

    def __init__(self, error_code: ErrorCode, detalle: str = ""):
        self.error_code = error_code
        self.detalle = detalle
        mensaje = f"Operación rechazada: {error_code.name}"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class AuthorizationError(ATMBaseError):
    """Lo lanza el Bank cuando el PIN o la tarjeta no son válidos.

    El ATMachine la traduce a ATMOperationError(AUTHORIZATION_FAILURE).
    """

    def __init__(self, detalle: str = "Credenciales rechazadas"):
        self.detalle = detalle
        super().__init__(detalle)


class AccountError(ATMBaseError):
    """Lo lanza el Bank cuando no puede completar un cargo.

    Esto puede pasar porque:
    - El saldo de la cuenta es insuficiente.
    - El token de autorización no existe o ya fue usado.
    - La moneda del cargo no es la de la cuenta.

    El ATMachine NO la traduce ni reintenta: llega tal cual al llamador.
    """

    def __init__(self, causa: str):
        self.causa = causa
        super().__init__(f"Error en la cuenta: {causa}")


class DepositLoadError(ATMBaseError):
    """Se lanza cuando falla la carga del inventario de billetes.

    Esto puede pasar porque:
    - El archivo no existe o no es CSV/XLSX.
    - Faltan columnas (Moneda, Denominacion, Cantidad).
    - Hay denominaciones desconocidas, repetidas o cantidades negativas.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error cargando depósito desde '{archivo}': {causa}")


class OutputError(ATMBaseError):
    """Se lanza cuando falla la generación del comprobante de retiro.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
