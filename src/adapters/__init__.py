"""Adaptadores de I/O (HTTP, exportadores).

Por qué un paquete:
- Todo lo que habla con el ATC o con el disco vive aquí, fuera del Core.
"""

from adapters.pipelines_client import PipelineClient

__all__ = ["PipelineClient"]
