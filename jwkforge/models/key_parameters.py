# jwkforge/models/key_parameters.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple


@dataclass(frozen=True)
class KeyParameter:
    name: str
    value: str      # base64url, or a plain name such as "P-256" for crv
    private: bool


class KeyParameters(Mapping):
    """
    Ordered, read-only mapping of JWK member name -> encoded value.

    Every entry is tagged public or private when it is created; this is the
    only place that knows which members are sensitive.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[KeyParameter]) -> None:
        ordered: Dict[str, KeyParameter] = {}
        for entry in entries:
            if entry.name in ordered:
                raise ValueError(f"Duplicate key parameter {entry.name!r}")
            ordered[entry.name] = entry
        self._entries: Tuple[KeyParameter, ...] = tuple(ordered.values())

    @classmethod
    def of(cls, *items: Tuple[str, str, bool]) -> "KeyParameters":
        return cls(KeyParameter(name, value, private) for name, value, private in items)

    def __getitem__(self, name: str) -> str:
        return self.entry(name).value

    def __iter__(self) -> Iterator[str]:
        return (e.name for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        # values stay out of repr so secrets do not end up in logs or tracebacks
        names = ", ".join(f"{e.name}{'*' if e.private else ''}" for e in self._entries)
        return f"KeyParameters({names})"

    def entry(self, name: str) -> KeyParameter:
        for e in self._entries:
            if e.name == name:
                return e
        raise KeyError(name)

    def is_private(self, name: str) -> bool:
        return self.entry(name).private

    @property
    def has_private(self) -> bool:
        return any(e.private for e in self._entries)

    def project(self, include_private: bool) -> Dict[str, str]:
        return {e.name: e.value for e in self._entries if include_private or not e.private}
