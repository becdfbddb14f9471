"""Credential acquisition.

Asks the operator for an auth strategy and turns the resulting secret into a
single `Authorization` header. Every failure here is a `CredentialError`,
which ends the run before any endpoint is called.
"""

from __future__ import annotations

from rich.markup import escape

from core.config import AppSettings
from core.domain.errors import (
    InvalidChoiceError,
    MissingCredentialError,
    NotLoggedInError,
    ToolNotInstalledError,
)
from core.domain.models import AuthorizationHeader, AuthStrategy
from core.interfaces.console import ConsolePort
from core.interfaces.credential_provider import ExternalCredentialProvider
from core.services.environment import PAT_COLON_WARNING


def create_basic_auth_header(pat: str) -> str:
    """`Basic` header value for a PAT: Base64 of `:<pat>`."""

    return AuthorizationHeader.basic_from_pat(pat).value


def menu_text() -> str:
    lines = ["", "Choose authentication method:"]
    for strategy in AuthStrategy:
        lines.append(f"{strategy.value}. {strategy.label()}")
    lines.append(f"Enter choice ({'/'.join(s.value for s in AuthStrategy)})")
    return "\n".join(lines)


async def acquire_pat_header(*, settings: AppSettings, port: ConsolePort) -> AuthorizationHeader:
    default_pat = settings.pat or ""
    hint = " [press Enter to use configured PAT]" if default_pat else ""
    answer = await port.prompt(f"Enter your Personal Access Token (PAT){hint}", secret=True)

    pat = answer.strip() or default_pat
    if not pat:
        raise MissingCredentialError()

    port.print("Creating Basic Auth header...")
    if ":" in pat:
        port.print(f"[yellow]⚠️ WARNING: {PAT_COLON_WARNING}[/yellow]")
    return AuthorizationHeader.basic_from_pat(pat)


async def acquire_delegated_header(
    *,
    settings: AppSettings,
    port: ConsolePort,
    provider: ExternalCredentialProvider,
) -> AuthorizationHeader:
    """Bearer header from an external identity tool (Azure CLI by default)."""

    port.print(f"Attempting to get {provider.name} token...")

    if not await provider.is_available():
        raise ToolNotInstalledError(provider.name)

    account = await provider.is_authenticated()
    if account is None:
        raise NotLoggedInError(provider.name, provider.login_hint)
    port.print(f"[green]✅ {provider.name} logged in as: {escape(account.user.name)}[/green]")

    token = await provider.acquire_token(settings.devops_resource_id)
    port.print(f"[green]✅ Successfully acquired {provider.name} token[/green]")
    return AuthorizationHeader.bearer(token)


async def acquire_authorization(
    *,
    settings: AppSettings,
    port: ConsolePort,
    provider: ExternalCredentialProvider,
) -> AuthorizationHeader:
    choice = (await port.prompt(menu_text())).strip()

    try:
        strategy = AuthStrategy(choice)
    except ValueError:
        raise InvalidChoiceError(choice) from None

    if strategy is AuthStrategy.PAT:
        return await acquire_pat_header(settings=settings, port=port)
    return await acquire_delegated_header(settings=settings, port=port, provider=provider)
