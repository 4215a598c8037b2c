"""
Adaptador de entrada: Carga del inventario de billetes desde archivo.

El personal que recarga el cajero entrega una hoja con el conteo de
billetes del casete. Este adaptador la lee (CSV o Excel) con pandas y
devuelve un InMemoryMoneyDeposit.

Formato esperado (una fila por denominación):

    Moneda | Denominacion | Cantidad
    PLN    | 500          | 1
    PLN    | 200          | 2
    ...

Las denominaciones que no aparecen cuentan como 0.
"""

import re
from pathlib import Path

import pandas as pd

from src.adapters.input.deposits.in_memory_deposit import InMemoryMoneyDeposit
from src.domain.exceptions import DepositLoadError
from src.domain.models.banknote import Banknote, banknotes_for

COLUMNAS = ("Moneda", "Denominacion", "Cantidad")

EXTENSIONES_SOPORTADAS = (".csv", ".xlsx")

# Enteros sin signo; Excel guarda los números como "500.0"
_ENTERO = re.compile(r"^\d+(\.0+)?$")


def load_deposit(path: Path) -> InMemoryMoneyDeposit:
    """Lee un archivo de inventario y construye el depósito.

    Args:
        path: Ruta a un .csv o .xlsx con las columnas COLUMNAS.

    Returns:
        InMemoryMoneyDeposit con los conteos del archivo.

    Raises:
        DepositLoadError: Si el archivo no existe, no es CSV/XLSX o su
                          contenido no es un inventario válido.
    """
    path = Path(path)
    if not path.is_file():
        raise DepositLoadError(str(path), "el archivo no existe")

    df = _leer_tabla(path)

    faltantes = [c for c in COLUMNAS if c not in df.columns]
    if faltantes:
        raise DepositLoadError(str(path), f"faltan columnas: {', '.join(faltantes)}")

    if df.empty:
        raise DepositLoadError(str(path), "el archivo no tiene filas")

    monedas = {str(m).strip().upper() for m in df["Moneda"]}
    if len(monedas) != 1:
        raise DepositLoadError(str(path), f"el depósito mezcla monedas: {sorted(monedas)}")
    moneda = monedas.pop()

    catalogo = {b.face_value: b for b in banknotes_for(moneda)}
    if not catalogo:
        raise DepositLoadError(str(path), f"no hay billetes registrados para {moneda}")

    conteos: dict[Banknote, int] = {}
    for num_fila, fila in enumerate(df.itertuples(index=False), start=2):
        try:
            denominacion = _parse_entero(fila.Denominacion, "Denominacion")
            cantidad = _parse_entero(fila.Cantidad, "Cantidad")
        except ValueError as e:
            raise DepositLoadError(str(path), f"fila {num_fila}: {e}")

        billete = catalogo.get(denominacion)
        if billete is None:
            raise DepositLoadError(
                str(path), f"fila {num_fila}: denominación {denominacion} {moneda} desconocida"
            )
        if billete in conteos:
            raise DepositLoadError(
                str(path), f"fila {num_fila}: denominación {denominacion} repetida"
            )
        conteos[billete] = cantidad

    return InMemoryMoneyDeposit(moneda, conteos)


def _leer_tabla(path: Path) -> pd.DataFrame:
    """Lee el archivo como texto: la conversión a enteros la hace _parse_entero."""
    sufijo = path.suffix.lower()
    if sufijo not in EXTENSIONES_SOPORTADAS:
        raise DepositLoadError(
            str(path), f"extensión '{sufijo}' no soportada, se esperaba .csv o .xlsx"
        )

    try:
        if sufijo == ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(path, dtype=str, keep_default_na=False)
    except Exception as e:
        # Un .xlsx truncado lanza zipfile.BadZipFile, que no es OSError
        raise DepositLoadError(str(path), f"no se pudo leer el archivo: {e}")

    df.columns = [str(c).strip() for c in df.columns]
    return df


def _parse_entero(valor: object, columna: str) -> int:
    """Convierte una celda a entero no negativo.

    A diferencia de parse_amount, no acepta símbolos de moneda, comas ni
    notación científica: un conteo de billetes es solo dígitos.

    Raises:
        ValueError: Si la celda no es un entero sin signo.
    """
    texto = str(valor).strip()
    if not _ENTERO.match(texto):
        raise ValueError(f"{columna} debe ser un entero sin signo, se leyó '{texto}'")
    return int(texto.split(".")[0])
