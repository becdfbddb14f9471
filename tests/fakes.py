"""Test doubles for the console port and the external credential provider."""

from __future__ import annotations

import json
from typing import Any

from core.domain.errors import TokenAcquisitionError
from core.domain.models import CliAccount, CliUser


class ScriptedConsole:
    """Records everything printed and replays canned answers to prompts."""

    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = list(answers or [])
        self.lines: list[str] = []
        self.renderables: list[Any] = []
        self.data: list[Any] = []
        self.prompts: list[tuple[str, bool]] = []

    def print(self, message: Any = "") -> None:
        if isinstance(message, str):
            self.lines.append(message)
        else:
            self.renderables.append(message)

    def print_data(self, data: Any) -> None:
        self.data.append(data)
        self.lines.append(json.dumps(data, default=str))

    async def prompt(self, text: str, *, secret: bool = False) -> str:
        self.prompts.append((text, secret))
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {text!r}")
        return self.answers.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class FakeCredentialProvider:
    name = "Fake CLI"
    login_hint = "fake login"

    def __init__(
        self,
        *,
        available: bool = True,
        user: str | None = "dev@example.com",
        token: str = "fake-token",
        token_error: str | None = None,
    ) -> None:
        self.available = available
        self.user = user
        self.token = token
        self.token_error = token_error
        self.calls: list[str] = []
        self.resources: list[str] = []

    async def is_available(self) -> bool:
        self.calls.append("is_available")
        return self.available

    async def is_authenticated(self) -> CliAccount | None:
        self.calls.append("is_authenticated")
        if self.user is None:
            return None
        return CliAccount(user=CliUser(name=self.user))

    async def acquire_token(self, resource: str) -> str:
        self.calls.append("acquire_token")
        self.resources.append(resource)
        if self.token_error:
            raise TokenAcquisitionError(self.token_error)
        return self.token
