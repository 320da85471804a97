"""Champion metadata from Data Dragon."""
from dataclasses import dataclass
from typing import Any, Mapping, Tuple


@dataclass(frozen=True)
class Champion:
    """One entry of champion.json's ``data`` object.

    ``id`` is the string identifier used in asset paths ("MonkeyKing"),
    ``key`` the numeric champion id as a string ("62").
    """

    id: str
    key: str
    name: str
    title: str = ''
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'Champion':
        return cls(
            id=payload['id'],
            key=str(payload['key']),
            name=payload.get('name', payload['id']),
            title=payload.get('title', ''),
            tags=tuple(payload.get('tags', [])),
        )
