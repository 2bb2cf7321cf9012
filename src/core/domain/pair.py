"""
Pair — unordered pair of two values

Pair(a, b) == Pair(b, a); hashing is symmetric as well.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Pair(Generic[T]):
    """Immutable unordered pair."""

    a: T
    b: T

    @classmethod
    def of(cls, a: T, b: T) -> "Pair[T]":
        return cls(a, b)

    def contains(self, obj: object) -> bool:
        return self.a == obj or self.b == obj

    def other(self, obj: T) -> T:
        """
        Get the member that is not obj.

        Raises:
            ValueError: If obj is not a member of this pair
        """
        if self.a == obj:
            return self.b
        if self.b == obj:
            return self.a

        raise ValueError("Given object is not a member of this pair.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (
            self.a == other.b and self.b == other.a
        )

    def __hash__(self) -> int:
        return hash(self.a) ^ hash(self.b)
