"""End-to-end diagnostic run.

This module sequences the five steps of one run (environment, connectivity,
credentials, profile, accounts). The CLI only builds the collaborators
(settings, console port, credential provider) and delegates here, which keeps
the flow reusable from tests with scripted doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from adapters.http_client import ClientFactory, build_async_client
from adapters.ping import PingProbe, ping_host
from core.config import AppSettings
from core.domain.errors import CredentialError
from core.domain.models import Account
from core.interfaces.console import ConsolePort
from core.interfaces.credential_provider import ExternalCredentialProvider
from core.services.connectivity import probe_connectivity
from core.services.credentials import acquire_authorization
from core.services.devops_endpoints import list_accounts, resolve_public_alias
from core.services.environment import check_environment


@dataclass
class RunOptions:
    """Parameters that control a run."""

    env_files: Sequence[Path] = ()
    check_network: bool = True
    probe: PingProbe = ping_host
    client_factory: ClientFactory = build_async_client


@dataclass
class RunOutcome:
    """What a run produced, for callers that want more than console output."""

    env_complete: bool = False
    reachability: dict[str, bool] = field(default_factory=dict)
    auth_scheme: str | None = None
    credential_error: CredentialError | None = None
    public_alias: str | None = None
    accounts: list[Account] | None = None


async def run_diagnostics(
    *,
    settings: AppSettings,
    port: ConsolePort,
    provider: ExternalCredentialProvider,
    options: RunOptions | None = None,
) -> RunOutcome:
    options = options or RunOptions()
    outcome = RunOutcome()

    outcome.env_complete = check_environment(settings=settings, port=port, env_files=options.env_files)

    if options.check_network:
        outcome.reachability = await probe_connectivity(settings=settings, port=port, probe=options.probe)

    try:
        auth = await acquire_authorization(settings=settings, port=port, provider=provider)
    except CredentialError as exc:
        port.print(f"[red]❌ {escape(str(exc))}[/red]")
        outcome.credential_error = exc
        return outcome
    outcome.auth_scheme = auth.scheme

    async with options.client_factory(settings) as client:
        outcome.public_alias = await resolve_public_alias(
            client=client,
            auth=auth,
            settings=settings,
            port=port,
        )
        outcome.accounts = await list_accounts(
            client=client,
            auth=auth,
            public_alias=outcome.public_alias,
            settings=settings,
            port=port,
        )

    return outcome
