"""Exportación JSON de pipelines.

Por qué JSON:
- Interoperabilidad con otras herramientas (jq, scripts de CI).
- Usa los mismos nombres de campo que el API del ATC.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import Pipeline


def pipelines_to_json(pipelines: Sequence[Pipeline]) -> str:
    """Serializa pipelines a JSON UTF-8 con formato estable (conserva el orden)."""

    payload = [pipeline.model_dump(mode="json") for pipeline in pipelines]
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def export_pipelines_json(*, pipelines: Sequence[Pipeline], output_path: Path) -> Path:
    """Escribe `pipelines` en `output_path`, creando directorios si hace falta."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(pipelines_to_json(pipelines), encoding="utf-8")
    return output_path
