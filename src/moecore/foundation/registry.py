"""
Named lookup tables for pluggable components (optimizers, evaluators).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from .exceptions import InvalidConfigurationError

T = TypeVar("T")

_MISSING = object()


class Registry(Generic[T]):
    """
    Name -> component table, filled at import time.

    ``register`` works as a call or as a decorator. Not synchronized.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: dict[str, T] = {}

    def register(self, name: str, component: T | None = None, *, override: bool = False) -> Callable[[T], T] | T:
        def _add(obj: T) -> T:
            if name in self._entries and not override:
                raise InvalidConfigurationError(
                    f"'{name}' is already registered in {self.kind}.",
                    "Pass override=True to replace it.",
                    name=name,
                )
            self._entries[name] = obj
            return obj

        if component is None:
            return _add
        return _add(component)

    def get(self, name: str, default: Any = _MISSING) -> T:
        """Look up ``name``; KeyError when it is unknown and no default is given."""
        if name in self._entries:
            return self._entries[name]
        if default is _MISSING:
            raise KeyError(f"'{name}' is not registered in {self.kind}")
        return default

    def unregister(self, name: str) -> None:
        self._entries.pop(name, None)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries


__all__ = ["Registry"]
