"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo pipelines y grupos.
"""

from core.domain.models import GroupConfig, Pipeline, RenameRequest

__all__ = ["GroupConfig", "Pipeline", "RenameRequest"]
