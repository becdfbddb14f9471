"""CLI entry point (Typer)."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.azure_cli import AzureCliProvider
from adapters.terminal import RichConsolePort
from cli import doctor
from cli.ui_components import build_summary_table, print_banner
from core.services.diagnostic_flow import RunOptions, run_diagnostics

app = typer.Typer(
    no_args_is_help=True,
    help="Test Azure DevOps profile and organizations endpoints with a PAT or Azure CLI token.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console(highlight=False)


@app.command(name="run")
def run_command(
    env_file: Path | None = doctor.EnvFileOption,
    skip_network_check: bool = typer.Option(
        False,
        "--skip-network-check",
        help="Do not ping the Azure DevOps hosts.",
    ),
) -> None:
    """Check the environment, pick a credential and call both endpoints."""

    port = RichConsolePort(_console)
    print_banner(port)

    try:
        settings, env_files = doctor.load_settings(env_file)
        outcome = asyncio.run(
            run_diagnostics(
                settings=settings,
                port=port,
                provider=AzureCliProvider(settings),
                options=RunOptions(env_files=env_files, check_network=not skip_network_check),
            )
        )
        port.print()
        port.print(build_summary_table(outcome))
    except Exception as exc:
        _console.print(f"[red]Fatal error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
