"""Azure CLI credential provider.

Implementation:
- Resolves `az` on PATH (`az.cmd` on Windows) with `shutil.which`.
- Runs `az --version`, `az account show` and `az account get-access-token`
  one after the other, each bounded by `cli_timeout_seconds`.
- Parses JSON output into `CliAccount` / `CliAccessToken`.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.errors import TokenAcquisitionError
from core.domain.models import CliAccessToken, CliAccount
from core.interfaces.credential_provider import ExternalCredentialProvider


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


CommandRunner = Callable[[Sequence[str], float], Awaitable[CommandResult]]


async def run_command(args: Sequence[str], timeout: float) -> CommandResult:
    """Run a command without a shell and capture its output.

    Raises `FileNotFoundError` if the executable is missing and
    `asyncio.TimeoutError` if it does not finish in `timeout` seconds.
    """

    proc = await asyncio.create_subprocess_exec(
        *args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        raise
    return CommandResult(
        returncode=proc.returncode if proc.returncode is not None else -1,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )


class AzureCliProvider(ExternalCredentialProvider):
    """Delegated credentials from a host already signed in with `az login`."""

    name = "Azure CLI"
    login_hint = "az login"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        executable: str = "az",
        runner: CommandRunner = run_command,
    ) -> None:
        self._settings = settings or AppSettings()
        self._executable = executable
        self._runner = runner

    def _resolve(self) -> str:
        return shutil.which(self._executable) or self._executable

    async def _run(self, *args: str) -> CommandResult:
        return await self._runner([self._resolve(), *args], self._settings.cli_timeout_seconds)

    async def is_available(self) -> bool:
        try:
            result = await self._run("--version")
        except (OSError, asyncio.TimeoutError):
            return False
        return result.ok

    async def is_authenticated(self) -> CliAccount | None:
        try:
            result = await self._run("account", "show", "--output", "json")
        except (OSError, asyncio.TimeoutError):
            return None
        if not result.ok:
            return None
        try:
            return CliAccount.model_validate(json.loads(result.stdout))
        except (ValueError, ValidationError):
            return None

    async def acquire_token(self, resource: str) -> str:
        try:
            result = await self._run(
                "account",
                "get-access-token",
                "--resource",
                resource,
                "--output",
                "json",
            )
        except asyncio.TimeoutError as exc:
            raise TokenAcquisitionError(
                f"az account get-access-token timed out after {self._settings.cli_timeout_seconds:g}s"
            ) from exc
        except OSError as exc:
            raise TokenAcquisitionError(str(exc)) from exc

        if not result.ok:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise TokenAcquisitionError(detail)

        try:
            token = CliAccessToken.model_validate(json.loads(result.stdout))
        except (ValueError, ValidationError) as exc:
            raise TokenAcquisitionError(f"unexpected az output: {exc}") from exc
        return token.access_token
