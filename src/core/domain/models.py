"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta (nombre no vacío, código `0x...`) en el momento
  de crear cada icono, no al exportar.
- Facilita la serialización del resultado final a JSON.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ConstantNode(NamedTuple):
    """Entrada cruda del índice: texto del enlace y `href` sin resolver."""

    name: str
    href: str


class Candidate(BaseModel):
    """Constante del índice pendiente de resolver contra su página de detalle."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre de la constante (p.ej. 'add').",
    )
    detail_url: str = Field(
        ...,
        min_length=1,
        description="URL absoluta de la página de detalle.",
    )


class Icon(BaseModel):
    """Icono resuelto: nombre + code point hexadecimal.

    Los nombres de campo son los del fichero de salida.
    """

    model_config = ConfigDict(frozen=True)

    icon_name: str = Field(
        ...,
        min_length=1,
        description="Nombre de la constante de CupertinoIcons.",
    )
    icon_code: str = Field(
        ...,
        pattern=r"^0x[0-9a-fA-F]+$",
        description="Code point tal como aparece en el código de ejemplo (p.ej. '0xf101').",
    )


class ResolutionFailure(BaseModel):
    """Fallo de un candidato individual (no aborta el lote)."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(
        default=None,
        description="Nombre del candidato, si se conoce.",
    )
    url: str | None = Field(
        default=None,
        description="URL de detalle implicada, si se conoce.",
    )
    reason: str = Field(
        ...,
        min_length=1,
        description="Mensaje legible para el operador.",
    )


class BatchResult(BaseModel):
    """Resultado agregado de resolver todos los candidatos.

    `icons` sigue el orden de finalización, no el del índice.
    """

    icons: list[Icon] = Field(default_factory=list)
    failures: list[ResolutionFailure] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.icons)

    @property
    def total(self) -> int:
        return len(self.icons) + len(self.failures)
