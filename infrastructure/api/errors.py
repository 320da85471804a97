"""Errors raised by the Riot API client.

Nothing here is retried or downgraded; each error reaches the caller of
the operation that hit it.
"""
from typing import Optional


class RiotAPIError(Exception):
    """Base class for every client-side failure."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(RiotAPIError):
    """DNS, connect, timeout or any other failure before a response arrived."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"transport error for {url}: {cause}", url)
        self.cause = cause


class HttpStatusError(RiotAPIError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} for {url}", url)
        self.status_code = status_code


class DecodeError(RiotAPIError):
    """A 2xx body that is not JSON, or JSON of an unexpected shape."""

    def __init__(self, url: str, reason: str = "response body is not valid JSON") -> None:
        super().__init__(f"{reason} ({url})", url)
        self.reason = reason


class NotFoundError(RiotAPIError):
    """A lookup against already-fetched data found nothing."""
