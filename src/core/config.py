"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP, Azure CLI, ping) read tunables consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "AZURE_DEVOPS_"

# Keys the Environment Inspector reports on, in display order.
REQUIRED_KEYS: tuple[str, ...] = ("org_url", "auth_method", "pat", "default_project")


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "ado-endpoint-tester"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "ado-endpoint-tester"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ado-endpoint-tester"
    return Path.home() / ".config" / "ado-endpoint-tester"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def default_env_files() -> tuple[Path, ...]:
    # Order: project first (dev), then the user's global config.
    return (Path(".env"), get_user_env_file())


def env_name(field_name: str) -> str:
    """Environment variable backing a settings field (`pat` -> `AZURE_DEVOPS_PAT`)."""

    return f"{ENV_PREFIX}{field_name.upper()}"


class AppSettings(BaseSettings):
    """Configuration snapshot for one run.

    Why pydantic-settings:
    - Typed, validated at the edge (env vars and `.env` files).
    - A single config contract shared by the CLI, the services and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=tuple(str(p) for p in default_env_files()),
        env_file_encoding="utf-8",
        frozen=True,
    )

    org_url: str | None = Field(
        default=None,
        description="Organization URL, e.g. https://dev.azure.com/<org>.",
    )
    auth_method: str | None = Field(
        default=None,
        description="Preferred auth method (informational: 'pat' or 'azure-cli').",
    )
    pat: str | None = Field(
        default=None,
        description="Personal Access Token used as the default for the PAT prompt.",
    )
    default_project: str | None = Field(
        default=None,
        description="Default project name (reported only).",
    )

    vssps_base_url: str = Field(
        default="https://app.vssps.visualstudio.com",
        min_length=8,
        description="Base URL of the Visual Studio profile/accounts service.",
    )
    api_version: str = Field(
        default="6.0",
        min_length=1,
        description="`api-version` query parameter sent to both endpoints.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per HTTP request (seconds).",
    )
    user_agent: str = Field(
        default="ado-endpoint-tester/0.1",
        min_length=1,
        description="User-Agent for outbound requests.",
    )

    devops_resource_id: str = Field(
        default="499b84ac-1321-427f-aa17-267ca6975798",
        min_length=1,
        description="Azure AD resource ID of Azure DevOps, used for `az account get-access-token`.",
    )
    cli_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for each Azure CLI invocation (seconds).",
    )

    probe_hosts: tuple[str, ...] = Field(
        default=("app.vssps.visualstudio.com", "dev.azure.com"),
        description="Hosts pinged by the connectivity check.",
    )
    ping_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Timeout for a single ping probe (seconds).",
    )

    def value_of(self, field_name: str) -> str | None:
        value = getattr(self, field_name)
        return value if isinstance(value, str) else None

    def is_set(self, field_name: str) -> bool:
        return bool(self.value_of(field_name))

    @property
    def profile_url(self) -> str:
        return f"{self.vssps_base_url.rstrip('/')}/_apis/profile/profiles/me"

    @property
    def accounts_url(self) -> str:
        return f"{self.vssps_base_url.rstrip('/')}/_apis/accounts"
