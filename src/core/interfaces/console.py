"""Console I/O contract.

Why a Protocol:
- The run driver builds one console port and hands it to every step, instead
  of a module-level reader shared by the whole process.
- Tests pass a scripted console that records output and replays answers.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from rich.console import RenderableType


@runtime_checkable
class ConsolePort(Protocol):
    """Minimal terminal surface used by the diagnostic flow.

    Design rules:
    - `prompt` is async because it suspends the flow until the operator answers.
    - `print` accepts rich markup; `print_data` renders a JSON-compatible payload.
    """

    def print(self, message: RenderableType = "") -> None:
        ...

    def print_data(self, data: Any) -> None:
        ...

    async def prompt(self, text: str, *, secret: bool = False) -> str:
        """Ask the operator for one line of input and return it verbatim."""

        ...
