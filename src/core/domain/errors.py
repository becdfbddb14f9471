"""Error kinds raised across the diagnostic flow.

Credential errors end the run; API errors are caught by the component
that raised them and only logged.
"""

from __future__ import annotations

from typing import Any


class EndpointTesterError(Exception):
    """Base error for the endpoint tester."""


class CredentialError(EndpointTesterError):
    """The authorization header could not be produced."""


class MissingCredentialError(CredentialError):
    def __init__(self, message: str = "PAT is required") -> None:
        super().__init__(message)


class InvalidChoiceError(CredentialError):
    def __init__(self, choice: str) -> None:
        super().__init__("Invalid choice")
        self.choice = choice


class ToolNotInstalledError(CredentialError):
    def __init__(self, tool: str) -> None:
        super().__init__(f"{tool} not installed or not in PATH")
        self.tool = tool


class NotLoggedInError(CredentialError):
    def __init__(self, tool: str, login_hint: str) -> None:
        super().__init__(f"Not logged in to {tool}. Please run \"{login_hint}\" first.")
        self.tool = tool


class TokenAcquisitionError(CredentialError):
    """The credential provider failed to issue an access token."""


class DevOpsApiError(EndpointTesterError):
    """An Azure DevOps endpoint call did not produce a usable result."""


class TransportFailureError(DevOpsApiError):
    """No response was received (DNS, connection, timeout)."""


class ApiError(DevOpsApiError):
    def __init__(self, status_code: int, body: Any = None, message: str = "") -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body
