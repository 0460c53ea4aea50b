"""Case styles supported by `CodeString`.

Keeping the enum in the domain layer lets the converter, the CLI and the
export model share one list of style names.
"""

from __future__ import annotations

from enum import Enum


class CaseStyle(str, Enum):
    """Naming conventions derived from a dash-case identifier."""

    DASH = "dash"
    SNAKE = "snake"
    CONSTANT = "constant"
    PASCAL = "pascal"
    CAMEL = "camel"

    @classmethod
    def names(cls) -> list[str]:
        """Style names in declaration order (CLI help, error messages)."""

        return [style.value for style in cls]

    def label(self) -> str:
        """Human readable label, e.g. `snake_case`."""

        return _LABELS[self]


_LABELS = {
    CaseStyle.DASH: "dash-case",
    CaseStyle.SNAKE: "snake_case",
    CaseStyle.CONSTANT: "CONSTANT_CASE",
    CaseStyle.PASCAL: "PascalCase",
    CaseStyle.CAMEL: "camelCase",
}
