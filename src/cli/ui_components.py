"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `get`, `list` y `doctor`.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Pipeline


def _paused_label(paused: bool) -> Text:
    return Text("yes", style="yellow") if paused else Text("no", style="green")


def build_pipelines_table(pipelines: Sequence[Pipeline]) -> Table:
    """Tabla de pipelines en el orden recibido del servidor."""

    table = Table(title="Pipelines")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Paused")
    table.add_column("Groups", style="dim")
    for pipeline in pipelines:
        groups = ", ".join(group.name for group in pipeline.groups) or "-"
        table.add_row(pipeline.name, _paused_label(pipeline.paused), groups)
    return table


def build_pipeline_panel(pipeline: Pipeline) -> Panel:
    """Panel con el detalle de un pipeline y una tabla por grupo."""

    header = Text.assemble(("Paused: ", "bold"), _paused_label(pipeline.paused))
    parts: list[object] = [header]

    for group in pipeline.groups:
        table = Table(title=f"Group: {group.name}", title_justify="left", expand=True)
        table.add_column("Jobs", style="white")
        table.add_column("Resources", style="magenta")
        rows = max(len(group.jobs), len(group.resources))
        for i in range(rows):
            job = group.jobs[i] if i < len(group.jobs) else ""
            resource = group.resources[i] if i < len(group.resources) else ""
            table.add_row(job, resource)
        parts.append(table)

    if not pipeline.groups:
        parts.append(Text("No groups", style="dim"))

    return Panel(Group(*parts), title=Text(pipeline.name, style="bold cyan"), border_style="cyan")
