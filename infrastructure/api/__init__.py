"""Infrastructure API module."""
from . import endpoints
from .riot_client import RiotAPIClient, AUTH_HEADER
from .errors import (
    RiotAPIError,
    TransportError,
    HttpStatusError,
    DecodeError,
    NotFoundError,
)

__all__ = [
    'endpoints',
    'RiotAPIClient',
    'AUTH_HEADER',
    'RiotAPIError',
    'TransportError',
    'HttpStatusError',
    'DecodeError',
    'NotFoundError',
]
