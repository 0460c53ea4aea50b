"""Configuración de logging.

Por qué aquí:
- Los módulos del Core solo usan `logging.getLogger(__name__)`; quién
  decide handlers y nivel es el punto de entrada (CLI).
- Rich formatea los registros en stderr sin mezclarse con la salida JSON.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Instala un `RichHandler` en el logger raíz (idempotente)."""

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setLevel(level)
    root.addHandler(handler)
