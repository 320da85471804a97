"""Infrastructure layer - Riot API access."""
from .api import (
    RiotAPIClient,
    RiotAPIError,
    TransportError,
    HttpStatusError,
    DecodeError,
    NotFoundError,
)

__all__ = [
    'RiotAPIClient',
    'RiotAPIError',
    'TransportError',
    'HttpStatusError',
    'DecodeError',
    'NotFoundError',
]
