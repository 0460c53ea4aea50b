"""Contratos de validación de campos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Un campo puede ser una subclase de `ValidationField` o cualquier objeto
  que exponga los mismos métodos (p.ej. una estrategia con closures).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FieldRule(Protocol):
    """Decisión y mensaje de una validación.

    Reglas de diseño:
    - `on_validate` decide si el valor pasa.
    - `on_fail` solo se evalúa cuando `on_validate` devuelve False.
    """

    def on_validate(self) -> bool:
        ...

    def on_fail(self) -> str:
        ...


@runtime_checkable
class Validatable(Protocol):
    """Cualquier objeto que reduce su validación a `str | None`."""

    def validate(self) -> str | None:
        """Devuelve None si el valor es válido, o el mensaje de error."""

        ...
