"""Doctor commands: run single diagnostic steps without prompting."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.azure_cli import AzureCliProvider
from adapters.terminal import RichConsolePort
from core.config import AppSettings, default_env_files
from core.services.connectivity import probe_connectivity
from core.services.environment import check_environment

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console(highlight=False)


def load_settings(env_file: Path | None) -> tuple[AppSettings, tuple[Path, ...]]:
    """Settings plus the `.env` files they were hydrated from."""

    if env_file is None:
        env_files = default_env_files()
        return AppSettings(_env_file=env_files), env_files
    return AppSettings(_env_file=env_file), (env_file,)


EnvFileOption = typer.Option(
    None,
    "--env-file",
    exists=True,
    dir_okay=False,
    help="Read AZURE_DEVOPS_* settings from this file instead of .env.",
)


@app.command()
def env(env_file: Path | None = EnvFileOption) -> None:
    """Report which AZURE_DEVOPS_* settings are present."""

    settings, env_files = load_settings(env_file)
    complete = check_environment(settings=settings, port=RichConsolePort(_console), env_files=env_files)
    if not complete:
        _console.print("\n[yellow]Note:[/yellow] missing keys are optional for `run`; the PAT can be typed in.")


@app.command()
def ping() -> None:
    """Ping the Azure DevOps hosts."""

    settings, _ = load_settings(None)
    asyncio.run(probe_connectivity(settings=settings, port=RichConsolePort(_console)))


@app.command(name="azure-cli")
def azure_cli() -> None:
    """Check that the Azure CLI is installed and signed in."""

    settings, _ = load_settings(None)
    provider = AzureCliProvider(settings)

    async def _check() -> tuple[bool, str]:
        if not await provider.is_available():
            return False, "az not installed or not in PATH"
        account = await provider.is_authenticated()
        if account is None:
            return False, f'not logged in (run "{provider.login_hint}")'
        return True, account.user.name

    ok, detail = asyncio.run(_check())

    table = Table(title="Azure CLI")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    table.add_row("az login", "OK" if ok else "FAIL", escape(detail))
    _console.print(table)
