"""
Tests para la carga del inventario desde CSV/XLSX (load_deposit).

Los archivos se generan en tmp_path: no se versionan hojas de ejemplo.
"""

import pandas as pd
import pytest

from src.adapters.input.deposits.spreadsheet_loader import load_deposit
from src.domain.exceptions import DepositLoadError
from src.domain.models import Banknote


def _write_csv(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadDepositCsv:
    def test_carga_inventario(self, tmp_path):
        path = _write_csv(
            tmp_path / "casete.csv",
            "Moneda,Denominacion,Cantidad\nPLN,500,1\nPLN,200,2\nPLN,50,3\n",
        )

        deposit = load_deposit(path)

        assert deposit.get_currency() == "PLN"
        assert deposit.get_available_count_of(Banknote.PL_500) == 1
        assert deposit.get_available_count_of(Banknote.PL_200) == 2
        assert deposit.get_available_count_of(Banknote.PL_50) == 3
        assert deposit.get_available_count_of(Banknote.PL_10) == 0

    def test_moneda_en_minusculas_y_espacios(self, tmp_path):
        path = _write_csv(
            tmp_path / "casete.csv",
            "Moneda , Denominacion , Cantidad\n pln ,100, 4 \n",
        )

        deposit = load_deposit(path)

        assert deposit.get_currency() == "PLN"
        assert deposit.get_available_count_of(Banknote.PL_100) == 4

    def test_archivo_inexistente(self, tmp_path):
        with pytest.raises(DepositLoadError, match="no existe"):
            load_deposit(tmp_path / "no_existe.csv")

    def test_extension_no_soportada(self, tmp_path):
        path = _write_csv(tmp_path / "casete.txt", "Moneda,Denominacion,Cantidad\n")

        with pytest.raises(DepositLoadError, match="no soportada"):
            load_deposit(path)

    def test_faltan_columnas(self, tmp_path):
        path = _write_csv(tmp_path / "casete.csv", "Moneda,Denominacion\nPLN,100\n")

        with pytest.raises(DepositLoadError, match="Cantidad"):
            load_deposit(path)

    def test_sin_filas(self, tmp_path):
        path = _write_csv(tmp_path / "casete.csv", "Moneda,Denominacion,Cantidad\n")

        with pytest.raises(DepositLoadError, match="no tiene filas"):
            load_deposit(path)

    def test_archivo_vacio(self, tmp_path):
        path = _write_csv(tmp_path / "casete.csv", "")

        with pytest.raises(DepositLoadError):
            load_deposit(path)

    def test_monedas_mezcladas(self, tmp_path):
        path = _write_csv(
            tmp_path / "casete.csv",
            "Moneda,Denominacion,Cantidad\nPLN,100,1\nEUR,100,1\n",
        )

        with pytest.raises(DepositLoadError, match="mezcla monedas"):
            load_deposit(path)

    def test_moneda_sin_billetes(self, tmp_path):
        path = _write_csv(tmp_path / "casete.csv", "Moneda,Denominacion,Cantidad\nUSD,100,1\n")

        with pytest.raises(DepositLoadError, match="USD"):
            load_deposit(path)

    def test_denominacion_desconocida(self, tmp_path):
        path = _write_csv(tmp_path / "casete.csv", "Moneda,Denominacion,Cantidad\nPLN,30,1\n")

        with pytest.raises(DepositLoadError, match="fila 2.*desconocida"):
            load_deposit(path)

    def test_denominacion_repetida(self, tmp_path):
        path = _write_csv(
            tmp_path / "casete.csv",
            "Moneda,Denominacion,Cantidad\nPLN,100,1\nPLN,100,2\n",
        )

        with pytest.raises(DepositLoadError, match="fila 3.*repetida"):
            load_deposit(path)

    @pytest.mark.parametrize("denominacion", ["$500", "5e2"])
    def test_denominacion_no_entera_se_rechaza(self, tmp_path, denominacion):
        path = _write_csv(
            tmp_path / "casete.csv",
            f"Moneda,Denominacion,Cantidad\nPLN,{denominacion},1\n",
        )

        with pytest.raises(DepositLoadError, match="fila 2: Denominacion"):
            load_deposit(path)

    @pytest.mark.parametrize("cantidad", ["-1", "2.5", "muchos", "", "1e3", "\"1,000\"", "$5"])
    def test_cantidad_invalida(self, tmp_path, cantidad):
        path = _write_csv(
            tmp_path / "casete.csv",
            f"Moneda,Denominacion,Cantidad\nPLN,100,{cantidad}\n",
        )

        with pytest.raises(DepositLoadError, match="fila 2"):
            load_deposit(path)


class TestLoadDepositExcel:
    def test_carga_inventario_xlsx(self, tmp_path):
        path = tmp_path / "casete.xlsx"
        pd.DataFrame(
            {
                "Moneda": ["PLN", "PLN"],
                "Denominacion": [200, 20],
                "Cantidad": [5, 7],
            }
        ).to_excel(path, index=False, engine="xlsxwriter")

        deposit = load_deposit(path)

        assert deposit.get_available_count_of(Banknote.PL_200) == 5
        assert deposit.get_available_count_of(Banknote.PL_20) == 7
        assert deposit.total == 1140

    def test_xlsx_truncado(self, tmp_path):
        """Un .xlsx corrupto no es un zip válido: debe llegar como DepositLoadError."""
        path = tmp_path / "casete.xlsx"
        path.write_bytes(b"PK\x03\x04contenido-truncado")

        with pytest.raises(DepositLoadError, match="no se pudo leer"):
            load_deposit(path)
