"""Campos concretos listos para usar.

Cada campo trae un mensaje por defecto que puede sobrescribirse con
`message=`. `RuleField` es la variante estrategia: la decisión y el mensaje
se inyectan como closures en vez de subclasear.
"""

from __future__ import annotations

from typing import Any, Callable

from core.validation.field import UNDEFINED, ValidationField

Rule = Callable[[ValidationField], bool]
Message = str | Callable[[ValidationField], str]


class EmailField(ValidationField):
    """Email con la gramática ASCII soportada por `is_email`."""

    default_message = "Expected a valid email address."

    def __init__(self, value: Any = UNDEFINED, *, message: str | None = None) -> None:
        super().__init__(value)
        self._message = message or self.default_message

    def on_validate(self) -> bool:
        return self.is_email()

    def on_fail(self) -> str:
        return self._message


class IntegerStringField(ValidationField):
    """String compuesto solo por dígitos (sin signo ni exponente)."""

    default_message = "Expected a string of digits (0-9)."

    def __init__(self, value: Any = UNDEFINED, *, message: str | None = None) -> None:
        super().__init__(value)
        self._message = message or self.default_message

    def on_validate(self) -> bool:
        return self.is_integer_string()

    def on_fail(self) -> str:
        return self._message


class CharsetField(ValidationField):
    """String cuyos caracteres pertenecen a `charset`."""

    def __init__(
        self,
        value: Any = UNDEFINED,
        *,
        charset: str,
        case_sensitive: bool = True,
        message: str | None = None,
    ) -> None:
        super().__init__(value)
        self.charset = charset
        self.case_sensitive = case_sensitive
        self._message = message

    def on_validate(self) -> bool:
        return self.is_under_charset(self.charset, self.case_sensitive)

    def on_fail(self) -> str:
        if self._message:
            return self._message
        suffix = "" if self.case_sensitive else " (case-insensitive)"
        return f"Expected only characters from {self.charset!r}{suffix}."


class CodeField(ValidationField):
    """Código de `length` caracteres (ignorando espacios en los extremos)."""

    def __init__(self, value: Any = UNDEFINED, *, length: int = 4, message: str | None = None) -> None:
        super().__init__(value)
        self.length = length
        self._message = message

    def on_validate(self) -> bool:
        return self.is_string() and len(self.value.strip()) == self.length

    def on_fail(self) -> str:
        return self._message or f"Expected a combination of {self.length} characters."


class RuleField(ValidationField):
    """Campo con decisión y mensaje inyectados.

    Example:
        >>> RuleField(7, lambda f: f.is_integer() and f.value > 0, "Expected a positive integer.").validate() is None
        True
    """

    def __init__(self, value: Any, rule: Rule, message: Message) -> None:
        super().__init__(value)
        self._rule = rule
        self._message = message

    def on_validate(self) -> bool:
        return bool(self._rule(self))

    def on_fail(self) -> str:
        if callable(self._message):
            return self._message(self)
        return self._message
