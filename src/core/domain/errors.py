"""Errors raised while obtaining and interpreting client data.

Both kinds are terminal for the operation that raised them: the caller decides
whether to try again. A client without a detail record is not an error.
"""

from __future__ import annotations

from typing import Sequence


class ClientDataError(Exception):
    """Base class for every failure surfaced by the client data core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TransportError(ClientDataError):
    """The endpoint could not be reached or answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ParseError(ClientDataError):
    """The response body does not have the expected structure."""

    def __init__(self, message: str, *, locations: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.locations = list(locations)
