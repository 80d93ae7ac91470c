"""Exception taxonomy shared by every part of the Dizzyjam client."""

from typing import Any


class DizzyjamError(Exception):
    """Base class for all errors raised by the client.

    Attributes:
        message: Human readable error message.
        code: Numeric error code (HTTP-style, or the remote's own code).
        details: Arbitrary structured data describing the failure.
    """

    def __init__(self, message: str, code: int = 0, details: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def __str__(self) -> str:
        return f"{self.message} (code {self.code})"


class UnauthenticatedError(DizzyjamError):
    """A signed request was attempted without API credentials."""


class UnsupportedGroupError(DizzyjamError):
    """An unknown API method group was requested."""


class InvalidFileError(DizzyjamError):
    """A file reference points to a missing, non-regular or unreadable file."""


class TransportError(DizzyjamError):
    """The HTTP request produced no response body."""


class UnparsableResponseError(DizzyjamError):
    """The response body is not a well-formed JSON object."""


class RemoteApiError(DizzyjamError):
    """The API answered with ``success`` unset; carries the remote's error."""
