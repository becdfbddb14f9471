import asyncio
import json

import pytest

from adapters.azure_cli import AzureCliProvider, CommandResult
from core.domain.errors import TokenAcquisitionError

ACCOUNT_JSON = json.dumps(
    {
        "name": "Visual Studio Enterprise",
        "tenantId": "72f988bf-0000-0000-0000-2d7cd011db47",
        "user": {"name": "dev@contoso.com", "type": "user"},
    }
)
TOKEN_JSON = json.dumps(
    {"accessToken": "eyJ0eXAiOiJKV1Qi", "expiresOn": "2026-10-18 14:00:00.000000", "tokenType": "Bearer"}
)


class FakeRunner:
    def __init__(self, responses):
        self.responses = responses
        self.calls: list[tuple[list[str], float]] = []

    async def __call__(self, args, timeout):
        self.calls.append((list(args), timeout))
        outcome = self.responses[tuple(args[1:3])]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def _provider(settings, responses):
    runner = FakeRunner(responses)
    return AzureCliProvider(settings, runner=runner), runner


def test_is_available_true_on_zero_exit(settings):
    provider, runner = _provider(settings, {("--version",): CommandResult(0, "azure-cli 2.64.0", "")})

    assert asyncio.run(provider.is_available()) is True
    args, timeout = runner.calls[0]
    assert args[1:] == ["--version"]
    assert timeout == settings.cli_timeout_seconds


def test_is_available_false_when_binary_missing(settings):
    provider, _ = _provider(settings, {("--version",): FileNotFoundError("az")})

    assert asyncio.run(provider.is_available()) is False


def test_is_available_false_on_timeout(settings):
    provider, _ = _provider(settings, {("--version",): asyncio.TimeoutError()})

    assert asyncio.run(provider.is_available()) is False


def test_is_authenticated_parses_signed_in_user(settings):
    provider, _ = _provider(settings, {("account", "show"): CommandResult(0, ACCOUNT_JSON, "")})

    account = asyncio.run(provider.is_authenticated())

    assert account is not None
    assert account.user.name == "dev@contoso.com"
    assert account.tenant_id == "72f988bf-0000-0000-0000-2d7cd011db47"


def test_is_authenticated_none_when_not_logged_in(settings):
    result = CommandResult(1, "", "ERROR: Please run 'az login' to setup account.")
    provider, _ = _provider(settings, {("account", "show"): result})

    assert asyncio.run(provider.is_authenticated()) is None


def test_acquire_token_requests_devops_resource(settings):
    provider, runner = _provider(settings, {("account", "get-access-token"): CommandResult(0, TOKEN_JSON, "")})

    token = asyncio.run(provider.acquire_token(settings.devops_resource_id))

    assert token == "eyJ0eXAiOiJKV1Qi"
    args, _ = runner.calls[0]
    assert args[1:] == [
        "account",
        "get-access-token",
        "--resource",
        "499b84ac-1321-427f-aa17-267ca6975798",
        "--output",
        "json",
    ]


def test_acquire_token_surfaces_cli_error(settings):
    result = CommandResult(1, "", "ERROR: AADSTS70043: The refresh token has expired\n")
    provider, _ = _provider(settings, {("account", "get-access-token"): result})

    with pytest.raises(TokenAcquisitionError, match="AADSTS70043"):
        asyncio.run(provider.acquire_token("resource"))


def test_acquire_token_rejects_unexpected_output(settings):
    provider, _ = _provider(settings, {("account", "get-access-token"): CommandResult(0, "not json", "")})

    with pytest.raises(TokenAcquisitionError, match="unexpected az output"):
        asyncio.run(provider.acquire_token("resource"))


def test_acquire_token_timeout(settings):
    provider, _ = _provider(settings, {("account", "get-access-token"): asyncio.TimeoutError()})

    with pytest.raises(TokenAcquisitionError, match="timed out"):
        asyncio.run(provider.acquire_token("resource"))
