"""Relation — the tuple store and the algebra over it.

A Relation is bound to exactly one Domain D and holds R ⊆ D × D together
with two occurrence counters:

  out[e] = |{(e, v) ∈ R}|   (e as key)
  in[e]  = |{(k, e) ∈ R}|   (e as val)

The counters are kept in step with every add and remove so that the
classification predicates (see classification.py) run without rescanning
the tuples.

Algebra:
  compose(S)          R ∘ S = {(a, c) | ∃b. (a, b) ∈ R ∧ (b, c) ∈ S}
  power(n)            R⁰ = id_D, R¹ = R, Rⁿ = R ∘ Rⁿ⁻¹
  reflexive_closure   R ∪ id_D
  symmetric_closure   R ∪ R⁻¹
  transitive_closure  R⁺, fixpoint of R ← R ∪ (R ∘ R)
  kleene              R* = R⁺ ∪ id_D
  op                  R⁻¹ = {(v, k) | (k, v) ∈ R}
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from . import classification
from .types import Domain, InvalidElement, Tuple

logger = logging.getLogger(__name__)


class Relation:
    """A finite binary relation over a fixed Domain.

    Construct from a Domain (shared by reference) or from any iterable of
    elements (wrapped in a new Domain):

        r = Relation.of(1, 2, 3)
        r.update((1, 2), (2, 3))
        r.kleene().sort()
    """

    def __init__(self, domain: Domain | Iterable[Any] = ()) -> None:
        self.domain: Domain = domain if isinstance(domain, Domain) else Domain(domain)
        self._tuples: list[Tuple] = []
        self._index: set[tuple] = set()
        self._out: dict[Any, int] = {}
        self._in: dict[Any, int] = {}

    @classmethod
    def of(cls, *elements: Any) -> Relation:
        return cls(Domain(elements))

    @classmethod
    def identity(cls, domain: Domain | Iterable[Any]) -> Relation:
        """Return id_D = {(e, e) | e ∈ D}."""
        return cls(domain).reflexive_closure()

    def _derive(self) -> Relation:
        """An empty relation sharing this relation's Domain."""
        return Relation(self.domain)

    # -----------------------------------------------------------------------
    # Store
    # -----------------------------------------------------------------------

    def add(self, key: Any, val: Any) -> bool:
        """Insert (key, val). Returns False if it was already present."""
        if key not in self.domain:
            raise InvalidElement(key)
        if val not in self.domain:
            raise InvalidElement(val)

        if (key, val) in self._index:
            return False

        self._tuples.append(Tuple(key, val))
        self._index.add((key, val))
        self._out[key] = self._out.get(key, 0) + 1
        self._in[val] = self._in.get(val, 0) + 1
        return True

    def update(self, *pairs: tuple) -> Relation:
        """Add every (key, val) pair and return self for chaining."""
        for key, val in pairs:
            self.add(key, val)
        return self

    def remove(self, key: Any, val: Any) -> bool:
        """Remove (key, val) if present. Absent tuples are a no-op."""
        if not self.contains(key, val):
            return False

        self._index.discard((key, val))
        self._tuples = [t for t in self._tuples if not (t.key == key and t.val == val)]
        _decrement(self._out, key)
        _decrement(self._in, val)
        return True

    def contains(self, key: Any, val: Any) -> bool:
        try:
            return (key, val) in self._index
        except TypeError:
            return False

    def __contains__(self, pair: object) -> bool:
        if isinstance(pair, Tuple):
            return self.contains(pair.key, pair.val)
        if isinstance(pair, tuple) and len(pair) == 2:
            return self.contains(*pair)
        return False

    def __iter__(self) -> Iterator[Tuple]:
        return iter(list(self._tuples))

    def __len__(self) -> int:
        return len(self._tuples)

    def __bool__(self) -> bool:
        return bool(self._tuples)

    def sort(self) -> Relation:
        """Order tuples by (str(key), str(val)) in place."""
        self._tuples.sort(key=lambda t: (str(t.key), str(t.val)))
        return self

    def out_count(self, element: Any) -> int:
        """Number of tuples with `element` as key."""
        return self._out.get(element, 0)

    def in_count(self, element: Any) -> int:
        """Number of tuples with `element` as val."""
        return self._in.get(element, 0)

    def in_counts(self) -> dict[Any, int]:
        """Copy of the in-count map; elements absent from every val are omitted."""
        return dict(self._in)

    def pairs(self) -> set[tuple]:
        return set(self._index)

    def copy(self) -> Relation:
        r = self._derive()
        for t in self._tuples:
            r.add(t.key, t.val)
        return r

    def _merge(self, other: Relation) -> int:
        """Add every tuple of `other`; return the number that were new."""
        added = 0
        for t in other._tuples:
            if self.add(t.key, t.val):
                added += 1
        return added

    # -----------------------------------------------------------------------
    # Algebra
    # -----------------------------------------------------------------------

    def compose(self, other: Relation) -> Relation:
        """Return self ∘ other as a new relation over this Domain."""
        r = self._derive()
        for t1 in self._tuples:
            for t2 in other._tuples:
                if t1.val == t2.key:
                    r.add(t1.key, t2.val)
        return r

    def power(self, times: int) -> Relation:
        """Return self composed with itself `times` times.

        power(0) is the identity relation on the Domain.
        """
        if times < 0:
            raise ValueError(f"Composition count must be non-negative, got {times}")
        if times == 0:
            return Relation.identity(self.domain)
        if times == 1:
            return self.copy()

        r = self
        for i in range(times - 1):
            r = self.compose(r)
            logger.debug("power step %d/%d: %d tuples", i + 2, times, len(r))
        return r

    def composition(self, arg: Relation | int) -> Relation:
        """Dispatch to compose() for a Relation and power() for an int."""
        if isinstance(arg, Relation):
            return self.compose(arg)
        if isinstance(arg, int) and not isinstance(arg, bool):
            return self.power(arg)
        raise TypeError(
            f"composition() expects a Relation or int, got {type(arg).__name__}"
        )

    def symmetric_closure(self) -> Relation:
        """Add (v, k) for every (k, v). Mutates and returns self."""
        snapshot = list(self._tuples)
        for t in snapshot:
            self.add(*t.swapped().as_pair())
        return self

    def reflexive_closure(self) -> Relation:
        """Add (e, e) for every e in the Domain. Mutates and returns self."""
        for e in self.domain:
            self.add(e, e)
        return self

    def transitive_closure(self) -> Relation:
        """Close under composition. Mutates and returns self.

        Each round merges self ∘ self into self; the loop stops once a round
        contributes nothing new or the composition is empty.
        """
        iteration = 0
        while True:
            iteration += 1
            step = self.compose(self)
            if not step:
                logger.debug("transitive closure: empty composition at round %d", iteration)
                break
            added = self._merge(step)
            logger.debug(
                "transitive closure round %d: %d new tuples, %d total",
                iteration, added, len(self),
            )
            if added == 0:
                break
        return self

    def kleene(self) -> Relation:
        """Reflexive-transitive closure R*. Mutates and returns self."""
        self.transitive_closure()
        self.reflexive_closure()
        return self

    def equivalence_closure(self) -> Relation:
        """Smallest equivalence relation containing self. Mutates and returns self."""
        self.symmetric_closure()
        self.kleene()
        return self

    def op(self) -> Relation:
        """Return the converse relation R⁻¹."""
        r = self._derive()
        for t in self._tuples:
            r.add(*t.swapped().as_pair())
        return r

    converse = op

    # -----------------------------------------------------------------------
    # Classification (see classification.py)
    # -----------------------------------------------------------------------

    def is_total(self) -> bool:
        return classification.is_total(self)

    def is_function(self) -> bool:
        return classification.is_function(self)

    def is_univalent(self) -> bool:
        return classification.is_univalent(self)

    def is_injective(self) -> bool:
        return classification.is_injective(self)

    def is_surjective(self) -> bool:
        return classification.is_surjective(self)

    def is_bijection(self) -> bool:
        return classification.is_bijection(self)

    def is_reflexive(self) -> bool:
        return classification.is_reflexive(self)

    def is_symmetric(self) -> bool:
        return classification.is_symmetric(self)

    def is_transitive(self) -> bool:
        return classification.is_transitive(self)

    def classify(self) -> classification.Classification:
        return classification.classify(self)

    # -----------------------------------------------------------------------
    # Comparison and display
    # -----------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.domain == other.domain and self._index == other._index

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return format_tuples(self)

    def __repr__(self) -> str:
        return f"Relation({len(self.domain)} elements, {len(self._tuples)} tuples)"


def _decrement(counter: dict[Any, int], element: Any) -> None:
    remaining = counter.get(element, 0) - 1
    if remaining > 0:
        counter[element] = remaining
    else:
        counter.pop(element, None)


def format_tuples(relation: Relation, sep: str = ",") -> str:
    """Render tuples in iteration order as `(k,v),(k,v),`."""
    return "".join(f"{t}{sep}" for t in relation)
