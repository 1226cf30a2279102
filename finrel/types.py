"""Core types for finrel — the domain, the tuples drawn from it, and errors.

A relation R over a domain D is a finite set of ordered pairs:

  R ⊆ D × D

  D = finite, immutable universe of elements
  (key, val) ∈ R = a Tuple whose components are both members of D
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FinrelError(Exception):
    """Base class for errors raised by finrel."""


class InvalidElement(FinrelError, ValueError):
    """A tuple component is not a member of the relation's domain."""

    def __init__(self, element: Any, message: str = "") -> None:
        self.element = element
        super().__init__(message or f"Element not in domain: {element!r}")


class IllegalKeyKind(FinrelError, TypeError):
    """A tuple key is neither numeric nor textual."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"Only string and number keys are accepted, got {type(key).__name__}: {key!r}"
        )


# ---------------------------------------------------------------------------
# Domain — the fixed universe D
# ---------------------------------------------------------------------------

@dataclass(frozen=True, init=False)
class Domain:
    """An immutable, finite, ordered collection of hashable elements.

    Duplicates are collapsed keeping the first occurrence. Every relation
    derived from another shares the same Domain instance.
    """
    elements: tuple
    _members: frozenset = field(repr=False, compare=False)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        ordered = tuple(dict.fromkeys(elements))
        object.__setattr__(self, "elements", ordered)
        object.__setattr__(self, "_members", frozenset(ordered))

    @classmethod
    def of(cls, *elements: Any) -> Domain:
        return cls(elements)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._members
        except TypeError:
            # unhashable values can never be members
            return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"Domain({', '.join(repr(e) for e in self.elements)})"


# ---------------------------------------------------------------------------
# Tuple — an element of D × D
# ---------------------------------------------------------------------------

def is_legal_key(key: object) -> bool:
    """Keys must be numeric or textual; a single character is a str."""
    if isinstance(key, bool):
        return False
    return isinstance(key, (numbers.Number, str))


@dataclass(frozen=True)
class Tuple:
    """An ordered pair (key, val).

    Only the key's kind is checked, and only here on construction.
    """
    key: Any
    val: Any

    def __post_init__(self) -> None:
        if not is_legal_key(self.key):
            raise IllegalKeyKind(self.key)

    def swapped(self) -> Tuple:
        return Tuple(self.val, self.key)

    def as_pair(self) -> tuple:
        return (self.key, self.val)

    def __str__(self) -> str:
        return f"({self.key},{self.val})"

    def __repr__(self) -> str:
        return f"Tuple({self.key!r}, {self.val!r})"
