"""Base de validación de campos simples (template method).

Por qué una clase base:
- `validate()` fija el flujo: decide con `on_validate()` y, solo si falla,
  obtiene el mensaje con `on_fail()`.
- Las subclases componen la decisión con los predicados compartidos
  (`is_string`, `is_email`, ...), que nunca lanzan excepciones.

Ejemplo:

    class CodeField(ValidationField):
        def on_validate(self) -> bool:
            return self.is_string() and len(self.value.strip()) == 4

        def on_fail(self) -> str:
            return "Expected a 4-character code."

    CodeField("1234").validate()  # None
"""

from __future__ import annotations

import datetime
import logging
import math
from abc import ABC, abstractmethod
from typing import Any

from core.validation.email import is_email
from core.validation.scanning import is_integer_string, is_under_charset

logger = logging.getLogger(__name__)

MAX_SAFE_INTEGER = 2**53 - 1


class _Undefined:
    """Marca un valor nunca asignado (distinto de None)."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()


class ValidationField(ABC):
    """Campo de validación abstracto.

    El valor se guarda tal cual durante toda la vida de la instancia y nunca
    se modifica.
    """

    def __init__(self, value: Any = UNDEFINED) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    @abstractmethod
    def on_validate(self) -> bool:
        """Decide si el valor es válido."""

    @abstractmethod
    def on_fail(self) -> str:
        """Mensaje de error; solo se llama cuando `on_validate()` es False."""

    def validate(self) -> str | None:
        """Devuelve None si el valor es válido, o el mensaje de `on_fail()`."""

        if self.on_validate():
            return None

        message = self.on_fail()
        logger.debug("%r failed validation: %s", self, message)
        return message

    # Predicados de tipo

    def is_string(self) -> bool:
        return isinstance(self.value, str)

    def is_number(self) -> bool:
        return isinstance(self.value, (int, float)) and not isinstance(self.value, bool)

    def is_boolean(self) -> bool:
        return isinstance(self.value, bool)

    def is_integer(self) -> bool:
        """Entero seguro: |v| <= 2**53 - 1 (también floats integrales)."""

        if isinstance(self.value, bool):
            return False
        if isinstance(self.value, int):
            return abs(self.value) <= MAX_SAFE_INTEGER
        if isinstance(self.value, float):
            return math.isfinite(self.value) and self.value.is_integer() and abs(self.value) <= MAX_SAFE_INTEGER
        return False

    def is_date(self) -> bool:
        return isinstance(self.value, datetime.date)

    def is_null(self) -> bool:
        return self.value is None

    def is_undefined(self) -> bool:
        return self.value is UNDEFINED

    def is_array(self) -> bool:
        return isinstance(self.value, (list, tuple))

    def is_object(self) -> bool:
        return isinstance(self.value, dict)

    # Predicados de escaneo

    def is_integer_string(self) -> bool:
        return is_integer_string(self.value)

    def is_under_charset(self, charset: str, case_sensitive: bool = True) -> bool:
        return is_under_charset(self.value, charset, case_sensitive)

    def is_email(self) -> bool:
        return is_email(self.value)
