"""Profile and accounts endpoint checks.

The two calls deliberately differ in how they treat failures:
- the profile call accepts every status as a response and inspects it;
- the accounts call turns non-2xx into an `ApiError` and catches it itself.
Neither lets an error escape to the run driver.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError
from rich.markup import escape

from adapters.http_client import auth_headers
from core.config import AppSettings
from core.domain.errors import ApiError, TransportFailureError
from core.domain.models import (
    Account,
    AccountsResponse,
    AuthorizationHeader,
    HttpResponseRecord,
    ProfileResponse,
)
from core.interfaces.console import ConsolePort


def _record(response: httpx.Response) -> HttpResponseRecord:
    try:
        body: Any = response.json()
    except ValueError:
        body = response.text
    return HttpResponseRecord(
        status_code=response.status_code,
        headers=dict(response.headers),
        body=body,
    )


def _print_no_response(port: ConsolePort, detail: str) -> None:
    port.print("No response received. Network error or endpoint unavailable.")
    port.print(f"Error details: {escape(detail)}")


async def resolve_public_alias(
    *,
    client: httpx.AsyncClient,
    auth: AuthorizationHeader,
    settings: AppSettings,
    port: ConsolePort,
) -> str | None:
    """Call `profiles/me` and return the caller's public alias, or None."""

    params = {"api-version": settings.api_version}
    port.print("\n[bold]Testing profile endpoint...[/bold]")
    port.print(f"URL: {settings.profile_url}?api-version={settings.api_version}")
    port.print(f"Authorization header type: {auth.scheme}")

    try:
        port.print("Making request...")
        response = await client.get(settings.profile_url, params=params, headers=auth_headers(auth))
        port.print(f"Response received with status: {response.status_code}")

        record = _record(response)
        if response.status_code != 200:
            port.print("[red]❌ Error accessing profile endpoint:[/red]")
            port.print(f"Status: {record.status_code}")
            port.print("Headers:")
            port.print_data(record.headers)
            port.print("Data:")
            port.print_data(record.body)
            return None

        try:
            profile = ProfileResponse.model_validate(record.body)
        except ValidationError as exc:
            raise ApiError(record.status_code, record.body, f"unexpected profile payload: {exc}") from exc

        port.print("[green]✅ Profile endpoint accessible![/green]")
        port.print(f"Public alias: {escape(profile.public_alias)}")
        return profile.public_alias or None
    except httpx.TransportError as exc:
        port.print("[red]❌ Error accessing profile endpoint:[/red]")
        _print_no_response(port, str(exc) or exc.__class__.__name__)
        return None
    except ApiError as exc:
        port.print("[red]❌ Error accessing profile endpoint:[/red]")
        port.print(f"Status: {exc.status_code}")
        port.print(f"Error: {escape(str(exc))}")
        return None
    except Exception as exc:
        port.print("[red]❌ Error accessing profile endpoint:[/red]")
        port.print(f"Error: {escape(str(exc))}")
        return None


async def fetch_accounts(
    *,
    client: httpx.AsyncClient,
    auth: AuthorizationHeader,
    public_alias: str,
    settings: AppSettings,
) -> tuple[int, AccountsResponse]:
    """Raw accounts call. Raises `ApiError` or `TransportFailureError`."""

    params = {"memberId": public_alias, "api-version": settings.api_version}
    try:
        response = await client.get(settings.accounts_url, params=params, headers=auth_headers(auth))
    except httpx.TransportError as exc:
        raise TransportFailureError(str(exc) or exc.__class__.__name__) from exc

    record = _record(response)
    if not response.is_success:
        raise ApiError(record.status_code, record.body)

    try:
        return record.status_code, AccountsResponse.model_validate(record.body)
    except ValidationError as exc:
        raise ApiError(record.status_code, record.body, f"unexpected accounts payload: {exc}") from exc


async def list_accounts(
    *,
    client: httpx.AsyncClient,
    auth: AuthorizationHeader,
    public_alias: str | None,
    settings: AppSettings,
    port: ConsolePort,
) -> list[Account] | None:
    """List the organizations of `public_alias`; None if the call failed or was skipped."""

    if not public_alias:
        port.print("\n[red]❌ Cannot test organizations endpoint without publicAlias[/red]")
        return None

    port.print("\n[bold]Testing organizations endpoint...[/bold]")
    port.print(
        f"URL: {settings.accounts_url}?memberId={escape(public_alias)}&api-version={settings.api_version}"
    )

    try:
        status_code, payload = await fetch_accounts(
            client=client,
            auth=auth,
            public_alias=public_alias,
            settings=settings,
        )
    except TransportFailureError as exc:
        port.print("[red]❌ Error accessing organizations endpoint:[/red]")
        _print_no_response(port, str(exc))
        return None
    except ApiError as exc:
        port.print("[red]❌ Error accessing organizations endpoint:[/red]")
        port.print(f"Status: {exc.status_code}")
        port.print("Data:")
        port.print_data(exc.body)
        return None

    port.print("[green]✅ Organizations endpoint accessible![/green]")
    port.print(f"Response status: {status_code}")
    port.print(f"Number of organizations: {len(payload.value)}")
    if payload.value:
        port.print(f"Organizations: {escape(', '.join(payload.account_names()))}")
    else:
        port.print("No organizations found for this user.")
    return payload.value
