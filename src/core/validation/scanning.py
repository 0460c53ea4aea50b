"""Primitivas de escaneo carácter a carácter.

Estas funciones son totales: cualquier valor que no sea `str` devuelve False.
"""

from __future__ import annotations

from typing import Any

DIGITS = "0123456789"


def is_under_charset(value: Any, charset: str, case_sensitive: bool = True) -> bool:
    """True si `value` es un string y cada carácter aparece en `charset`.

    Con `case_sensitive=False` se comparan ambos en minúsculas. Un string vacío
    cumple trivialmente.
    """

    if not isinstance(value, str):
        return False

    if not case_sensitive:
        value = value.lower()
        charset = charset.lower()

    for char in value:
        if char not in charset:
            return False
    return True


def is_integer_string(value: Any) -> bool:
    """True si `value` es un string compuesto solo por dígitos 0-9.

    Sin signo, exponente ni punto decimal (`"10e+1"` no pasa). `""` pasa.
    """

    return is_under_charset(value, DIGITS)
