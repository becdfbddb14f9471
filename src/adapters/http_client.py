"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and default headers for both endpoint calls.
- Eases testing: the run driver takes a client factory, so tests can swap in
  an `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Callable

import httpx

from core.config import AppSettings
from core.domain.models import AuthorizationHeader

ClientFactory = Callable[[AppSettings], httpx.AsyncClient]


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the tester's defaults.

    Notes:
    - No status code raises by itself; each caller decides what a failure is.
    - The timeout applies to connect, read, write and pool alike.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


def auth_headers(auth: AuthorizationHeader) -> dict[str, str]:
    return {
        "Authorization": auth.value,
        "Content-Type": "application/json",
    }
