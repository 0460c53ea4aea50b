"""Conversión de identificadores entre nomenclaturas.

Por qué existe:
- Un mismo identificador (p.ej. el nombre de un campo) suele necesitarse en
  varias convenciones: `get-cpf` para URLs, `get_cpf` para columnas,
  `GET_CPF` para constantes, `GetCPF` para clases y `getCPF` para métodos.

Reglas:
- El identificador de entrada ya debe estar en dash-case. No se intenta
  normalizar texto arbitrario.
- Las mayúsculas ya presentes se mantienen (`get-CPF` -> `getCPF`).
- Cada nomenclatura se calcula una sola vez por instancia y se cachea.
"""

from __future__ import annotations

import logging

from core.domain.case_style import CaseStyle
from core.domain.models import CaseStyles

logger = logging.getLogger(__name__)

SEPARATOR = "-"


def _capitalize_tokens(value: str, *, force_first_token: bool) -> str:
    """Concatena los tokens de `value` forzando mayúscula al inicio de cada uno.

    Con `force_first_token=False` el primer token conserva su primer carácter
    tal cual (camelCase). Un token vacío (separadores consecutivos) no aporta
    caracteres pero cuenta como token procesado.
    """

    result = ""
    token_passed = force_first_token

    for token in value.split(SEPARATOR):
        for index, char in enumerate(token):
            upper_char = char.upper()
            is_upper_case = char == upper_char
            result += upper_char if (index == 0 and token_passed) or is_upper_case else char

        token_passed = True

    return result


class CodeString:
    """Utilidad para formatear identificadores en varias nomenclaturas.

    Example:
        >>> CodeString("get-CPF").camel
        'getCPF'
    """

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"CodeString expects a str, got {type(value).__name__}")
        self._value = value
        self._cache: dict[CaseStyle, str | None] = {style: None for style in CaseStyle}

    @property
    def value(self) -> str:
        """Identificador original (dash-case)."""

        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"CodeString({self._value!r})"

    def _cached(self, style: CaseStyle) -> str:
        cached = self._cache[style]
        if cached is None:
            cached = _CONVERTERS[style](self._value)
            self._cache[style] = cached
            logger.debug("Computed %s for %r: %r", style.value, self._value, cached)
        return cached

    @property
    def dash(self) -> str:
        return self._cached(CaseStyle.DASH)

    @property
    def snake(self) -> str:
        return self._cached(CaseStyle.SNAKE)

    @property
    def constant(self) -> str:
        return self._cached(CaseStyle.CONSTANT)

    @property
    def pascal(self) -> str:
        return self._cached(CaseStyle.PASCAL)

    @property
    def camel(self) -> str:
        return self._cached(CaseStyle.CAMEL)

    def get(self, style: CaseStyle | str) -> str:
        """Devuelve una nomenclatura por nombre (`"snake"`, `CaseStyle.SNAKE`, ...).

        Un nombre desconocido lanza `ValueError`.
        """

        return getattr(self, CaseStyle(style).value)

    def export_all(self) -> CaseStyles:
        """Exporta todas las nomenclaturas (leídas a través de las propiedades)."""

        return CaseStyles(
            dash=self.dash,
            snake=self.snake,
            constant=self.constant,
            pascal=self.pascal,
            camel=self.camel,
        )


_CONVERTERS = {
    CaseStyle.DASH: lambda value: value.lower(),
    CaseStyle.SNAKE: lambda value: value.replace(SEPARATOR, "_").lower(),
    CaseStyle.CONSTANT: lambda value: value.replace(SEPARATOR, "_").upper(),
    CaseStyle.PASCAL: lambda value: _capitalize_tokens(value, force_first_token=True),
    CaseStyle.CAMEL: lambda value: _capitalize_tokens(value, force_first_token=False),
}
