"""
JSON output envelope for machine consumers.

Every command in --json mode prints exactly one document:

    {"meta": {"command": ..., "status": "success" | "error"},
     "data": ... | null,
     "error": {"message": ..., "type": ...} | null}

Anything else a command would print while producing the data is captured
so stdout stays parseable.
"""

import io
import json
from contextlib import contextmanager, redirect_stdout
from typing import Any, Iterator

import click
from pydantic import BaseModel


class JsonRenderer:
    def __init__(self, command_name: str):
        self.command_name = command_name
        self._captured = io.StringIO()

    @contextmanager
    def capture(self) -> Iterator[None]:
        """Swallow stray stdout while the command computes its result."""
        with redirect_stdout(self._captured):
            yield

    @property
    def captured_output(self) -> str:
        return self._captured.getvalue()

    def envelope(self, data: Any = None, error: BaseException | None = None) -> dict:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        return {
            "meta": {
                "command": self.command_name,
                "status": "error" if error is not None else "success",
            },
            "data": data,
            "error": None if error is None else {
                "message": str(error),
                "type": error.__class__.__name__,
            },
        }

    def render_success(self, data: Any) -> None:
        click.echo(json.dumps(self.envelope(data=data), indent=2, default=str))

    def render_error(self, error: BaseException) -> None:
        click.echo(json.dumps(self.envelope(error=error), indent=2, default=str))
