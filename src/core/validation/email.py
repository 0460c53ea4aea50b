"""Gramática de email (ASCII) implementada como escaneo manual.

Dos pasadas:
1. Validación global: un único `@` que no esté en los extremos y todos los
   caracteres dentro del charset permitido.
2. Escaneo de adyacencia de separadores (`.` y `-`) sobre el segmento de
   dominio.

Nota:
- El segmento de dominio incluye el propio `@`, y el escaneo de adyacencia
  lee los caracteres del valor completo en las posiciones del segmento (no
  del segmento). Para direcciones con local-part y dominio de distinta
  longitud, el escaneo puede inspeccionar el local-part. Se mantiene así.
"""

from __future__ import annotations

from typing import Any

from core.validation.scanning import is_under_charset

EMAIL_CHARSET = "abcdefghijklmnopqrstuvwxyz0123456789@.-_"
SEPARATORS = ".-"


def _has_single_inner_at(value: str) -> bool:
    return value.count("@") == 1 and not value.startswith("@") and not value.endswith("@")


def _domain_segment(value: str) -> str:
    return value[value.index("@"):]


def _has_valid_bounds(segment: str) -> bool:
    if not segment or "_" in segment:
        return False
    return segment[0] not in SEPARATORS and segment[-1] not in SEPARATORS


def _has_valid_separators(value: str, segment: str) -> bool:
    after_dot = False
    after_dash = False

    for index in range(len(segment)):
        char = value[index]

        if char == ".":
            if after_dot or after_dash:
                return False
            after_dot = True
        elif char == "-":
            if after_dot:
                return False
            after_dash = True
        else:
            after_dot = False
            after_dash = False

    return True


def is_email(value: Any) -> bool:
    """True si `value` es un string con la gramática de email soportada."""

    if not isinstance(value, str):
        return False

    if not _has_single_inner_at(value):
        return False
    if not is_under_charset(value, EMAIL_CHARSET, case_sensitive=False):
        return False

    segment = _domain_segment(value)
    if not _has_valid_bounds(segment):
        return False

    return _has_valid_separators(value, segment)
