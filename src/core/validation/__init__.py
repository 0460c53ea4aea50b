"""Validación: predicados de escaneo, gramática de email y campos."""

from core.validation.email import is_email
from core.validation.field import UNDEFINED, ValidationField
from core.validation.fields import (
    CharsetField,
    CodeField,
    EmailField,
    IntegerStringField,
    RuleField,
)
from core.validation.scanning import is_integer_string, is_under_charset

__all__ = [
    "UNDEFINED",
    "CharsetField",
    "CodeField",
    "EmailField",
    "IntegerStringField",
    "RuleField",
    "ValidationField",
    "is_email",
    "is_integer_string",
    "is_under_charset",
]
