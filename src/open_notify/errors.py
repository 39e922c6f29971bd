"""Error types raised by the open-notify client.

Every public fetch operation either returns a validated value or raises
exactly one of the errors defined here. The three kinds are mutually
exclusive and map onto the stage of the fetch that failed.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Stage of a fetch that produced an error."""

    NETWORK = "network"
    PARSING = "parsing"
    DATA = "data"


class OpenNotifyError(Exception):
    """Base exception for all open-notify client errors.

    Attributes:
        kind: Which stage of the fetch failed.
        detail: Human-readable explanation or upstream payload.
    """

    kind: ErrorKind

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}"


class NetworkError(OpenNotifyError):
    """The HTTP round trip did not complete."""

    kind = ErrorKind.NETWORK


class ParsingError(OpenNotifyError):
    """The response body was not valid JSON or had an unexpected shape."""

    kind = ErrorKind.PARSING


class DataError(OpenNotifyError):
    """The payload parsed but failed semantic validation."""

    kind = ErrorKind.DATA
