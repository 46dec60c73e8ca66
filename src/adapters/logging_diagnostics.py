"""Diagnósticos sobre `logging`.

Implementa `core.interfaces.DiagnosticsSink` escribiendo cada fallo en el
logger del módulo. La configuración de handlers es cosa de la CLI
(`configure_logging`); la librería nunca toca el root logger por su cuenta.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.domain.models import FailureEvent

log = logging.getLogger(__name__)


class LoggingDiagnostics:
    """Sink por defecto: un registro ERROR por evento."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or log

    def emit(self, event: FailureEvent) -> None:
        if event.status_code is not None and event.kind == "unexpected_status":
            message = "Unexpected HTTP status code: %s"
            args: tuple[object, ...] = (event.status_code,)
        else:
            message = "Realm lookup failed (%s): %s"
            args = (event.kind, event.detail)

        self._logger.error(
            message,
            *args,
            extra={"realm_event": event.model_dump(mode="json")},
        )


def configure_logging(level: str | int = "WARNING") -> None:
    """Instala un `RichHandler` en el root logger si no hay handlers."""

    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root.setLevel(level)

    if root.handlers:
        return
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
