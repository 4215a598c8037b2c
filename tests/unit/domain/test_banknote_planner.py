"""
Tests para el algoritmo de selección de billetes (plan_banknotes).

Usan un depósito de prueba que cuenta cuántas veces se consultó cada
denominación, para verificar que el inventario se lee una sola vez por
billete y nunca cuando el monto es cero.
"""

import pytest

from src.domain.exceptions import ATMOperationError, ErrorCode
from src.domain.models.banknote import Banknote, banknotes_for
from src.domain.ports.money_deposit import MoneyDeposit
from src.domain.services.banknote_planner import plan_banknotes

PLN = banknotes_for("PLN")


class CountingDeposit(MoneyDeposit):
    """Depósito fijo que registra cada consulta."""

    def __init__(self, counts: dict[Banknote, int]):
        self._counts = counts
        self.queries: list[Banknote] = []

    def get_currency(self) -> str:
        return "PLN"

    def get_available_count_of(self, banknote: Banknote) -> int:
        self.queries.append(banknote)
        return self._counts.get(banknote, 0)


class TestPlanBanknotes:
    def test_escenario_inventario_limitado(self):
        """Inventario {500:1, 200:2, 100:0, 50:3, 20:1, 10:1}, monto 1080."""
        deposit = CountingDeposit(
            {
                Banknote.PL_500: 1,
                Banknote.PL_200: 2,
                Banknote.PL_100: 0,
                Banknote.PL_50: 3,
                Banknote.PL_20: 1,
                Banknote.PL_10: 1,
            }
        )

        billetes = plan_banknotes(1080, PLN, deposit)

        assert billetes == [
            Banknote.PL_500,
            Banknote.PL_200,
            Banknote.PL_200,
            Banknote.PL_50,
            Banknote.PL_50,
            Banknote.PL_50,
            Banknote.PL_20,
            Banknote.PL_10,
        ]

    def test_monto_no_alcanzable(self):
        """123 con {100:1, 20:1}: quedan 3 sin cubrir."""
        deposit = CountingDeposit({Banknote.PL_100: 1, Banknote.PL_20: 1})

        with pytest.raises(ATMOperationError) as exc:
            plan_banknotes(123, PLN, deposit)

        assert exc.value.error_code == ErrorCode.INSUFFICIENT_FUNDS_BREAKDOWN
        assert "quedan 3" in exc.value.detalle

    def test_un_solo_billete(self):
        deposit = CountingDeposit({Banknote.PL_200: 1})

        assert plan_banknotes(200, PLN, deposit) == [Banknote.PL_200]

    def test_monto_cero_no_consulta_deposito(self):
        deposit = CountingDeposit({Banknote.PL_100: 5})

        assert plan_banknotes(0, PLN, deposit) == []
        assert deposit.queries == []

    def test_cada_denominacion_se_consulta_una_vez(self):
        deposit = CountingDeposit({Banknote.PL_100: 5})

        plan_banknotes(100, PLN, deposit)

        assert deposit.queries == PLN

    def test_greedy_no_retrocede(self):
        """60 con {50:1, 20:3}: existe 20+20+20, pero greedy toma el 50
        y se queda con 10 sin cubrir. Es la limitación documentada."""
        deposit = CountingDeposit({Banknote.PL_50: 1, Banknote.PL_20: 3})

        with pytest.raises(ATMOperationError) as exc:
            plan_banknotes(60, PLN, deposit)

        assert exc.value.error_code == ErrorCode.INSUFFICIENT_FUNDS_BREAKDOWN

    def test_prefiere_denominaciones_altas(self):
        deposit = CountingDeposit({Banknote.PL_100: 10, Banknote.PL_10: 100})

        assert plan_banknotes(310, PLN, deposit) == [
            Banknote.PL_100,
            Banknote.PL_100,
            Banknote.PL_100,
            Banknote.PL_10,
        ]

    def test_usa_billetes_chicos_cuando_se_agotan_los_grandes(self):
        deposit = CountingDeposit({Banknote.PL_100: 1, Banknote.PL_50: 4})

        assert plan_banknotes(300, PLN, deposit) == [
            Banknote.PL_100,
            Banknote.PL_50,
            Banknote.PL_50,
            Banknote.PL_50,
            Banknote.PL_50,
        ]

    def test_monto_no_multiplo_de_la_menor_denominacion(self):
        deposit = CountingDeposit({b: 100 for b in PLN})

        with pytest.raises(ATMOperationError):
            plan_banknotes(15, PLN, deposit)

    def test_deposito_vacio(self):
        with pytest.raises(ATMOperationError):
            plan_banknotes(10, PLN, CountingDeposit({}))

    def test_es_determinista(self):
        counts = {Banknote.PL_200: 3, Banknote.PL_50: 2, Banknote.PL_20: 5}

        primero = plan_banknotes(560, PLN, CountingDeposit(counts))
        segundo = plan_banknotes(560, PLN, CountingDeposit(counts))

        assert primero == segundo

    def test_monto_negativo_lanza_error(self):
        with pytest.raises(ValueError):
            plan_banknotes(-10, PLN, CountingDeposit({}))

    def test_cantidad_negativa_del_deposito_lanza_error(self):
        with pytest.raises(ValueError, match="negativa"):
            plan_banknotes(100, PLN, CountingDeposit({Banknote.PL_100: -1}))

    @pytest.mark.parametrize("amount", [10, 70, 380, 880, 1000, 1990])
    def test_suma_exacta_y_orden_descendente(self, amount):
        deposit = CountingDeposit({b: 3 for b in PLN})

        billetes = plan_banknotes(amount, PLN, deposit)

        assert sum(b.face_value for b in billetes) == amount
        valores = [b.face_value for b in billetes]
        assert valores == sorted(valores, reverse=True)
