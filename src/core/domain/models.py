"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a la CLI.
- Facilita la serialización (JSON) de los resultados para pipelines.

Nota:
- Estos modelos describen *qué* produce la librería, no *cómo* se calcula.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class CaseStyles(BaseModel):
    """Todas las nomenclaturas de un identificador.

    Por qué existe:
    - Es el resultado de `CodeString.export_all()`: un registro inmutable con
      las cinco representaciones, listo para serializar.
    """

    model_config = ConfigDict(frozen=True)

    dash: str = Field(..., description="Identificador en dash-case.")
    snake: str = Field(..., description="Identificador en snake_case.")
    constant: str = Field(..., description="Identificador en CONSTANT_CASE.")
    pascal: str = Field(..., description="Identificador en PascalCase.")
    camel: str = Field(..., description="Identificador en camelCase.")


class ValidationReport(BaseModel):
    """Resultado de validar un valor con un campo concreto.

    Por qué un modelo separado:
    - `ValidationField.validate()` devuelve solo `str | None`; la CLI necesita
      además el nombre del campo y el valor para presentarlo o exportarlo.
    """

    field: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Nombre del campo usado (p.ej. 'email', 'integer').",
    )
    value: str = Field(
        ...,
        description="Valor validado, tal como se recibió.",
    )
    valid: bool = Field(
        default=True,
        description="True cuando la validación no produjo mensaje de error.",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje de error (None si el valor es válido).",
    )

    @model_validator(mode="after")
    def _valid_matches_message(self) -> "ValidationReport":
        if self.valid != (self.message is None):
            raise ValueError("valid must be True exactly when message is None")
        return self

    @classmethod
    def from_outcome(cls, *, field: str, value: str, outcome: str | None) -> "ValidationReport":
        """Construye el reporte a partir del resultado de `validate()`."""

        return cls(field=field, value=value, valid=outcome is None, message=outcome)
