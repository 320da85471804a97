from __future__ import annotations

import contextvars
from typing import Any, Dict, Optional

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    return current


class context(object):
    """Temporarily attach fields (region, platform, ...) to every log record.

    Works as ``with`` and ``async with``; the previous context is restored on exit.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> Dict[str, Any]:
        current = _merged(self._values)
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False

    async def __aenter__(self) -> Dict[str, Any]:
        return self.__enter__()

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return self.__exit__(exc_type, exc, tb)
