"""
Adaptador de salida: Comprobante de retiro en Excel.

Genera un archivo Excel con 2 hojas:
- Hoja 1 (Resumen): tarjeta enmascarada, moneda, monto y número de billetes.
- Hoja 2 (Billetes): una fila por denominación entregada.

Se usa xlsxwriter como motor, igual que el resto de las salidas a Excel.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.card import Card
from src.domain.models.money import Money
from src.domain.models.withdrawal import Withdrawal
from src.domain.ports.receipt_writer import ReceiptWriter


class ExcelReceiptWriter(ReceiptWriter):
    """Genera comprobantes de retiro en formato Excel."""

    def write_receipt(
        self,
        card: Card,
        amount: Money,
        withdrawal: Withdrawal,
        output_path: Path,
    ) -> Path:
        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(card, amount, withdrawal, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(
        self,
        card: Card,
        amount: Money,
        withdrawal: Withdrawal,
        output_path: Path,
    ) -> None:
        df_resumen = pd.DataFrame(
            [
                {
                    "Tarjeta": card.masked,
                    "Moneda": amount.currency or "",
                    "Monto": amount.amount,
                    "Num Billetes": len(withdrawal.banknotes),
                }
            ]
        )

        filas_billetes = [
            {
                "Denominacion": billete.face_value,
                "Cantidad": cantidad,
                "Subtotal": billete.face_value * cantidad,
            }
            for billete, cantidad in withdrawal.breakdown().items()
        ]
        df_billetes = pd.DataFrame(filas_billetes, columns=["Denominacion", "Cantidad", "Subtotal"])

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_billetes.to_excel(writer, index=False, sheet_name="Billetes")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_billetes = writer.sheets["Billetes"]

            # Formato para montos (separador de miles, sin decimales)
            money_format = workbook.add_format({"num_format": "#,##0"})

            ws_resumen.set_column("A:A", 22)  # Tarjeta
            ws_resumen.set_column("B:B", 8)  # Moneda
            ws_resumen.set_column("C:C", 14, money_format)  # Monto
            ws_resumen.set_column("D:D", 14)  # Num Billetes

            ws_billetes.set_column("A:A", 14, money_format)  # Denominacion
            ws_billetes.set_column("B:B", 10)  # Cantidad
            ws_billetes.set_column("C:C", 14, money_format)  # Subtotal
