"""
JSON output envelope shared by every command's ``--json`` mode.

    {"status": "success", "command": "...", "data": {...}}
    {"status": "error", "command": "...", "error": {"type": "...", "message": "..."}}
"""

import contextlib
import io
import json
import logging
from typing import Any, Dict, Iterator

import click
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class JsonRenderer:
    """Renders a command result, or its failure, as one JSON document."""

    def __init__(self, command: str):
        self.command = command

    @contextlib.contextmanager
    def capture(self) -> Iterator[io.StringIO]:
        """Swallow stray stdout so the JSON document stays parseable."""
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            yield buffer
        if buffer.getvalue():
            logger.debug(f"Suppressed {len(buffer.getvalue())} chars of text output")

    def render_success(self, data: BaseModel | Dict[str, Any]) -> None:
        payload = data.model_dump(mode="json") if isinstance(data, BaseModel) else data
        self._emit({"status": "success", "command": self.command, "data": payload})

    def render_error(self, error: Exception) -> None:
        details: Dict[str, Any] = {
            "type": type(error).__name__,
            "message": getattr(error, "message", None) or str(error),
        }
        kind = getattr(error, "kind", None)
        if kind is not None:
            details["kind"] = str(kind)
        self._emit({"status": "error", "command": self.command, "error": details})

    def _emit(self, envelope: Dict[str, Any]) -> None:
        click.echo(json.dumps(envelope, indent=2, default=str))
