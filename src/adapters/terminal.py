"""Rich/typer implementation of the console port."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import typer
from rich.console import Console, RenderableType

from core.interfaces.console import ConsolePort


class RichConsolePort(ConsolePort):
    """Prints through a rich `Console` and reads answers with `typer.prompt`."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def print(self, message: RenderableType = "") -> None:
        self.console.print(message)

    def print_data(self, data: Any) -> None:
        if isinstance(data, (dict, list)):
            self.console.print_json(data=data)
        else:
            self.console.print(json.dumps(data, indent=2, default=str), markup=False)

    async def prompt(self, text: str, *, secret: bool = False) -> str:
        # typer.prompt blocks on stdin; keep the event loop free while it waits.
        return await asyncio.to_thread(self._ask, text, secret)

    @staticmethod
    def _ask(text: str, secret: bool) -> str:
        answer = typer.prompt(
            text,
            default="",
            show_default=False,
            hide_input=secret,
        )
        return str(answer)
