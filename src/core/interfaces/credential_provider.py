"""External credential provider contract.

Why Protocol:
- The delegated-token strategy only needs three capabilities, so the Azure CLI
  adapter and a test double are interchangeable without inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CliAccount


@runtime_checkable
class ExternalCredentialProvider(Protocol):
    """A locally installed identity tool that can issue access tokens.

    Design rules:
    - Every method is async because it typically runs a subprocess.
    - `acquire_token` raises `TokenAcquisitionError`; the probes never raise.
    """

    name: str
    login_hint: str

    async def is_available(self) -> bool:
        """Whether the tool is installed and runnable."""

        ...

    async def is_authenticated(self) -> CliAccount | None:
        """The signed-in account, or None when there is no active session."""

        ...

    async def acquire_token(self, resource: str) -> str:
        """Return a raw access token scoped to `resource`."""

        ...
