"""Relation value type: one "source precedes target" constraint."""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Relation(Generic[T]):
    """Ordered pair declaring that ``source`` must precede ``target``.

    Relations compare and hash by value, so duplicates collapse in sets.
    """

    source: T
    target: T

    def __iter__(self):
        yield self.source
        yield self.target

    def __str__(self) -> str:
        return f"{self.source},{self.target}"
