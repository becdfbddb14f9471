"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the `run` and `doctor` commands share the banner and tables.
"""

from __future__ import annotations

from rich.align import Align
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.interfaces.console import ConsolePort
from core.services.diagnostic_flow import RunOutcome


def print_banner(port: ConsolePort) -> None:
    """Print the welcome banner."""

    title = Text("Azure DevOps API Endpoint Tester", style="bold cyan")
    subtitle = Text("Environment • Connectivity • Profile • Organizations", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    port.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _status(ok: bool | None, *, skipped: str = "SKIPPED") -> str:
    if ok is None:
        return skipped
    return "OK" if ok else "FAIL"


def build_summary_table(outcome: RunOutcome) -> Table:
    """Recap of a run, one row per step."""

    table = Table(title="Summary")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row(
        "Environment",
        "OK" if outcome.env_complete else "INCOMPLETE",
        "All AZURE_DEVOPS_* keys set" if outcome.env_complete else "Some keys missing",
    )

    if outcome.reachability:
        reachable = [host for host, ok in outcome.reachability.items() if ok]
        table.add_row(
            "Connectivity",
            _status(len(reachable) == len(outcome.reachability)),
            f"{len(reachable)}/{len(outcome.reachability)} hosts answered ping",
        )
    else:
        table.add_row("Connectivity", "SKIPPED", "")

    if outcome.credential_error is not None:
        table.add_row("Credentials", "FAIL", escape(str(outcome.credential_error)))
        return table
    table.add_row("Credentials", "OK", f"{outcome.auth_scheme} header")

    table.add_row(
        "Profile endpoint",
        _status(outcome.public_alias is not None),
        escape(outcome.public_alias) if outcome.public_alias else "no public alias",
    )
    if outcome.public_alias is None:
        table.add_row("Organizations endpoint", "SKIPPED", "requires a public alias")
    else:
        ok = outcome.accounts is not None
        details = f"{len(outcome.accounts)} organization(s)" if outcome.accounts is not None else "request failed"
        table.add_row("Organizations endpoint", _status(ok), details)
    return table
