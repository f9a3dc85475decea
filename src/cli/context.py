"""Estado compartido entre comandos de la CLI.

Por qué un módulo aparte:
- `cli.main` registra `cli.doctor`; si el estado viviera en `main` habría import circular.
- La configuración se carga una sola vez por invocación (en el callback global).
"""

from __future__ import annotations

from dataclasses import dataclass

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from core.config import AppSettings

_err_console = Console(stderr=True)


@dataclass
class CliState:
    url: str | None = None
    settings: AppSettings | None = None


state = CliState()


def load_settings() -> AppSettings:
    """Carga `AppSettings`; un valor inválido termina con exit code 2."""

    try:
        return AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]error:[/red] invalid configuration\n{escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def current_settings() -> AppSettings:
    if state.settings is None:
        state.settings = load_settings()
    return state.settings
