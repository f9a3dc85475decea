"""Contrato del API de pipelines.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que la CLI use el cliente HTTP real o un fake en tests sin acoplarse
  a la implementación concreta.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Pipeline


@runtime_checkable
class PipelineAPI(Protocol):
    """Operaciones de gestión de pipelines.

    Reglas de diseño:
    - Un 404 es ausencia, no error: se devuelve `None`/`False`.
    - Cualquier otro status no exitoso lanza `core.errors.UnexpectedResponseError`.
    """

    def pause_pipeline(self, name: str) -> bool:
        ...

    def unpause_pipeline(self, name: str) -> bool:
        ...

    def get_pipeline(self, name: str) -> Pipeline | None:
        ...

    def list_pipelines(self) -> list[Pipeline]:
        ...

    def delete_pipeline(self, name: str) -> bool:
        ...

    def rename_pipeline(self, old_name: str, new_name: str) -> bool:
        ...
