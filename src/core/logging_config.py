"""Configuración de logging.

Por qué Rich:
- La CLI ya usa Rich para tablas/paneles; los logs comparten consola y estilo.
- Los logs van a stderr para no mezclarse con `--json` en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "atc-pipelines"


def configure_logging(level: str | int = "WARNING") -> None:
    """Instala (una sola vez) un `RichHandler` en el logger raíz."""

    numeric = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    root = logging.getLogger()
    root.setLevel(numeric)

    # httpx loguea cada request en INFO; solo lo dejamos pasar en DEBUG.
    logging.getLogger("httpx").setLevel(logging.DEBUG if numeric <= logging.DEBUG else logging.WARNING)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(numeric)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
