"""Environment inspection.

Reports which `AZURE_DEVOPS_*` keys are present in the configuration
snapshot and flags PAT values that are likely malformed. It only reports:
nothing here aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from rich.markup import escape

from core.config import REQUIRED_KEYS, AppSettings, env_name
from core.interfaces.console import ConsolePort

PAT_MIN_LENGTH = 30

# Keys whose value is safe to echo back.
_ECHOED_KEYS = frozenset({"org_url", "auth_method"})

PAT_COLON_WARNING = (
    "PAT contains colon character. This is unusual and might indicate incorrect format."
)
PAT_SPACE_WARNING = "PAT contains spaces. This might cause authentication issues."


def pat_warnings(pat: str) -> list[str]:
    """Shape checks for a static token."""

    warnings: list[str] = []
    if len(pat) < PAT_MIN_LENGTH:
        warnings.append(
            f"PAT seems too short ({len(pat)} chars). Azure DevOps PATs are typically longer."
        )
    if " " in pat:
        warnings.append(PAT_SPACE_WARNING)
    if ":" in pat:
        warnings.append(PAT_COLON_WARNING)
    return warnings


@dataclass
class EnvVarCheck:
    field_name: str
    present: bool
    value: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def env_name(self) -> str:
        return env_name(self.field_name)


def inspect_settings(settings: AppSettings) -> list[EnvVarCheck]:
    checks: list[EnvVarCheck] = []
    for key in REQUIRED_KEYS:
        value = settings.value_of(key)
        check = EnvVarCheck(field_name=key, present=bool(value), value=value or None)
        if value and key == "pat":
            check.warnings = pat_warnings(value)
        checks.append(check)
    return checks


def existing_env_files(candidates: Iterable[Path]) -> list[Path]:
    return [p for p in candidates if p.exists() and p.is_file()]


def check_environment(
    *,
    settings: AppSettings,
    port: ConsolePort,
    env_files: Iterable[Path] = (),
) -> bool:
    """Print one line per key; True if every key has a non-empty value."""

    port.print("\n[bold]Checking environment variables...[/bold]")

    for path in existing_env_files(env_files):
        port.print(f"[green]✅ Found and loaded {escape(str(path))}[/green]")

    all_present = True
    for check in inspect_settings(settings):
        if not check.present:
            port.print(f"[red]❌ {check.env_name}: Not set[/red]")
            all_present = False
            continue

        if check.field_name == "pat":
            length = len(check.value or "")
            port.print(f"[green]✅ {check.env_name}: Set (length: {length} characters)[/green]")
        else:
            port.print(f"[green]✅ {check.env_name}: Set[/green]")
            if check.field_name in _ECHOED_KEYS:
                port.print(f"   Value: {escape(check.value or '')}")

        for warning in check.warnings:
            port.print(f"   [yellow]⚠️ WARNING: {warning}[/yellow]")

    return all_present
