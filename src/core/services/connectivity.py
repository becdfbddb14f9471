"""Network reachability check (advisory only)."""

from __future__ import annotations

from typing import Iterable

from adapters.ping import PingProbe, ping_host
from core.config import AppSettings
from core.interfaces.console import ConsolePort


async def probe_connectivity(
    *,
    settings: AppSettings,
    port: ConsolePort,
    hosts: Iterable[str] | None = None,
    probe: PingProbe = ping_host,
) -> dict[str, bool]:
    """Ping each host in turn and print one line per host.

    Never raises: a failing probe counts as "cannot reach".
    """

    port.print("\n[bold]Testing network connectivity...[/bold]")

    results: dict[str, bool] = {}
    for host in hosts if hosts is not None else settings.probe_hosts:
        try:
            reachable = await probe(host, settings.ping_timeout_seconds)
        except Exception:
            reachable = False
        results[host] = reachable
        if reachable:
            port.print(f"[green]✅ Can reach {host}[/green]")
        else:
            port.print(f"[red]❌ Cannot reach {host}[/red]")
    return results
