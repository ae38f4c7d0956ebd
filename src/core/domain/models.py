"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Modelos inmutables (`frozen`) con semántica de valor: copiar es seguro.
- Serialización directa (`model_dump`) para la exportación JSON.

Nota:
- `AddressLiteral` se guarda tal cual se escribió; no se normaliza nada.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from core.services.ipv4_validator import validate

CORRECT_LABEL = "Correct"
NOT_CORRECT_LABEL = "Not Correct"


class AddressLiteral(BaseModel):
    """Una dirección tal como la escribió el usuario."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    literal: str = Field(
        ...,
        description="Texto original de la dirección, sin normalizar.",
    )

    def format(self) -> str:
        return self.literal

    def __str__(self) -> str:
        return self.format()


class ValidatedAddressLiteral(AddressLiteral):
    """Literal + veredicto `is_valid` derivado de los campos ya validados.

    Por qué `computed_field`:
    - `is_valid` es función pura de `literal` y `strict_zero_padding` tal como
      los dejó Pydantic; no se acepta como entrada y no puede quedar desfasado
      (p.ej. tras `model_copy(update=...)`).
    - Se sigue serializando en `model_dump`.
    """

    strict_zero_padding: bool = Field(
        default=False,
        description="Rechaza segmentos con ceros a la izquierda (p.ej. '01').",
    )

    @computed_field(description="True si `literal` es un IPv4 dotted-quad válido.")
    @property
    def is_valid(self) -> bool:
        return validate(self.literal, strict=self.strict_zero_padding)

    def format(self) -> str:
        label = CORRECT_LABEL if self.is_valid else NOT_CORRECT_LABEL
        return f"{super().format()} {label}"


class AddressVerdict(BaseModel):
    """Registro serializable de una línea de salida (exportación JSON)."""

    literal: str = Field(..., description="Texto original de la dirección.")
    validated: bool = Field(
        ...,
        description="Indica si el literal pasó por el validador.",
    )
    is_valid: bool | None = Field(
        default=None,
        description="Veredicto del validador (None si no se validó).",
    )
    line: str = Field(..., description="Línea de texto equivalente.")

    @classmethod
    def from_address(cls, address: AddressLiteral) -> "AddressVerdict":
        if isinstance(address, ValidatedAddressLiteral):
            return cls(
                literal=address.literal,
                validated=True,
                is_valid=address.is_valid,
                line=address.format(),
            )
        return cls(literal=address.literal, validated=False, line=address.format())
