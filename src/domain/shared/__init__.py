"""
Utilidades compartidas del dominio.

No dependen de ninguna librería externa. Solo operan sobre tipos
nativos de Python.

Uso:
    from src.domain.shared.money import parse_amount, format_amount
"""
