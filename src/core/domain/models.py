"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Responses from the profile/accounts endpoints and the Azure CLI are
  validated on receipt instead of being read as untyped dicts.
- A schema mismatch surfaces as a `ValidationError` that callers turn
  into an `ApiError`.

These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

import base64
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class AuthStrategy(str, Enum):
    """Authentication strategies offered in the interactive menu."""

    PAT = "1"
    AZURE_CLI = "2"

    def label(self) -> str:
        """Human readable label for the menu."""

        return "Personal Access Token (PAT)" if self is AuthStrategy.PAT else "Azure CLI"


class AuthorizationHeader(BaseModel):
    """Value of the `Authorization` header shared by both endpoint calls."""

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(..., min_length=1, description="'Basic' or 'Bearer'.")
    credential: str = Field(..., min_length=1, description="Encoded PAT or raw access token.")

    @classmethod
    def basic_from_pat(cls, pat: str) -> "AuthorizationHeader":
        # Azure DevOps expects PATs as `:<pat>` (empty user name) before Base64.
        encoded = base64.b64encode(f":{pat}".encode("utf-8")).decode("ascii")
        return cls(scheme="Basic", credential=encoded)

    @classmethod
    def bearer(cls, token: str) -> "AuthorizationHeader":
        return cls(scheme="Bearer", credential=token)

    @property
    def value(self) -> str:
        return f"{self.scheme} {self.credential}"

    def __str__(self) -> str:
        return self.value


class ProfileResponse(BaseModel):
    """Payload of `_apis/profile/profiles/me`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    public_alias: str = Field(
        ...,
        alias="publicAlias",
        description="Opaque per-user identifier required by the accounts query.",
    )
    display_name: str | None = Field(default=None, alias="displayName")
    email_address: str | None = Field(default=None, alias="emailAddress")
    id: str | None = Field(default=None)


class Account(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    account_name: str = Field(..., alias="accountName", description="Organization name.")
    account_id: str | None = Field(default=None, alias="accountId")
    account_uri: str | None = Field(default=None, alias="accountUri")


class AccountsResponse(BaseModel):
    """Payload of `_apis/accounts?memberId=...`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    count: int | None = Field(default=None, ge=0)
    value: list[Account] = Field(..., description="Organizations the member belongs to.")

    def account_names(self) -> list[str]:
        return [account.account_name for account in self.value]


class CliUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Signed-in principal (UPN or app id).")
    type: str | None = None


class CliAccount(BaseModel):
    """Subset of `az account show --output json`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user: CliUser
    name: str | None = Field(default=None, description="Subscription name.")
    tenant_id: str | None = Field(default=None, alias="tenantId")


class CliAccessToken(BaseModel):
    """Subset of `az account get-access-token --output json`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    access_token: str = Field(..., min_length=1, alias="accessToken")
    expires_on: str | None = Field(default=None, alias="expiresOn")
    token_type: str | None = Field(default=None, alias="tokenType")


class HttpResponseRecord(BaseModel):
    """Status, headers and body of one response, kept only for logging."""

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None
