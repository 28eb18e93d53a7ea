"""Failure taxonomy of the remote content source.

Errors are plain values carried inside a ``Failure`` result, never raised.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class NetworkError:
    cause: Optional[BaseException] = field(default=None, compare=False)

    kind = "network_error"

    @property
    def message(self) -> str:
        return "Network connection failed. Please check your internet connection."


@dataclass(frozen=True)
class Timeout:
    cause: Optional[BaseException] = field(default=None, compare=False)

    kind = "timeout"

    @property
    def message(self) -> str:
        return "Request timed out. Please try again."


@dataclass(frozen=True)
class ServerError:
    code: int
    cause: Optional[BaseException] = field(default=None, compare=False)

    kind = "server_error"

    @property
    def message(self) -> str:
        return f"Server error ({self.code}). Please try again later."


@dataclass(frozen=True)
class BackendError:
    error_code: str
    error_title: str
    error_message: str

    kind = "backend_error"

    @property
    def message(self) -> str:
        return f"{self.error_title}: {self.error_message}"


@dataclass(frozen=True)
class ParseError:
    cause: Optional[BaseException] = field(default=None, compare=False)

    kind = "parse_error"

    @property
    def message(self) -> str:
        return "Failed to parse response. Please try again."


@dataclass(frozen=True)
class Unknown:
    cause: Optional[BaseException] = field(default=None, compare=False)

    kind = "unknown"

    @property
    def message(self) -> str:
        if self.cause is not None and str(self.cause):
            return str(self.cause)
        return "An unknown error occurred."


DataError = Union[NetworkError, Timeout, ServerError, BackendError, ParseError, Unknown]
