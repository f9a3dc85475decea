"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y el codec JSON sin acoplar el Core a librerías de I/O.
- Los nombres de campo coinciden con los del API del ATC (`name`, `paused`, `groups`).

Nota:
- Son value objects inmutables: se construyen por llamada y no se cachean.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def _null_as_empty(value: Any) -> Any:
    # El ATC (Go) serializa slices nil como `null`.
    return [] if value is None else value


class GroupConfig(BaseModel):
    """Subconjunto nombrado de jobs y resources de un pipeline (agrupación visual)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        ...,
        description="Nombre del grupo.",
    )
    jobs: list[str] = Field(
        default_factory=list,
        description="Nombres de jobs, en el orden enviado por el servidor.",
    )
    resources: list[str] = Field(
        default_factory=list,
        description="Nombres de resources, en el orden enviado por el servidor.",
    )

    @field_validator("jobs", "resources", mode="before")
    @classmethod
    def _normalize_lists(cls, value: Any) -> Any:
        return _null_as_empty(value)


class Pipeline(BaseModel):
    """Pipeline tal como lo devuelve `GET /api/v1/pipelines[/{name}]`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre único del pipeline dentro de un listado.",
    )
    paused: bool = Field(
        default=False,
        description="Indica si el pipeline está pausado.",
    )
    groups: list[GroupConfig] = Field(
        default_factory=list,
        description="Grupos del pipeline, en orden.",
    )

    @field_validator("groups", mode="before")
    @classmethod
    def _normalize_groups(cls, value: Any) -> Any:
        return _null_as_empty(value)


class RenameRequest(BaseModel):
    """Cuerpo de `PUT /api/v1/pipelines/{name}/rename`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Nuevo nombre del pipeline (el ATC decide si es válido).",
    )
