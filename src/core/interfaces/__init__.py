"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: la CLI depende de abstracciones.
"""

from core.interfaces.pipelines import PipelineAPI

__all__ = ["PipelineAPI"]
