"""Tabla de endpoints del API de pipelines (`/api/v1`).

Los nombres de pipeline se codifican como un único segmento de path, así un
nombre con `/` o espacios no cambia el endpoint destino. Un nombre vacío se
rechaza: `/pipelines/` es el endpoint del listado.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from core.errors import InvalidPipelineNameError

API_PREFIX = "/api/v1"


@dataclass(frozen=True)
class Route:
    method: str
    path: str

    def build(self, **params: str) -> str:
        encoded: dict[str, str] = {}
        for key, value in params.items():
            if not value:
                raise InvalidPipelineNameError(param=key)
            encoded[key] = quote(value, safe="")
        return API_PREFIX + self.path.format(**encoded)


PAUSE_PIPELINE = Route("PUT", "/pipelines/{pipeline_name}/pause")
UNPAUSE_PIPELINE = Route("PUT", "/pipelines/{pipeline_name}/unpause")
GET_PIPELINE = Route("GET", "/pipelines/{pipeline_name}")
LIST_PIPELINES = Route("GET", "/pipelines")
DELETE_PIPELINE = Route("DELETE", "/pipelines/{pipeline_name}")
RENAME_PIPELINE = Route("PUT", "/pipelines/{pipeline_name}/rename")
