"""Paths of items inside a product's collateral tree."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Iterator, Tuple


@functools.total_ordering
class ItemPath:
    """A '/'-separated path to an item stored in the collateral tree."""

    __slots__ = ("_parts",)

    def __init__(self, *parts: str) -> None:
        self._parts: Tuple[str, ...] = tuple(parts)

    @classmethod
    def parse(cls, text: str) -> "ItemPath":
        """Build a path from its '/'-separated text form."""
        return cls(*text.split("/"))

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._parts

    def push(self, element: str) -> None:
        """Append a component to the path."""
        self._parts = self._parts + (element,)

    def to_path(self) -> Path:
        """Return the path as a relative filesystem path."""
        return Path(*self._parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parts)

    def __str__(self) -> str:
        return "/".join(self._parts)

    def __repr__(self) -> str:
        return f"ItemPath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemPath):
            return NotImplemented
        return self._parts == other._parts

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ItemPath):
            return NotImplemented
        return self._parts < other._parts

    def __hash__(self) -> int:
        return hash(self._parts)