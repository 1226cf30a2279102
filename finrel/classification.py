"""Classification — structural predicates over a relation.

Every predicate reads the relation's Domain and occurrence counters and
never mutates state:

  total       ∀e ∈ D. out[e] ≥ 1
  univalent   ∀e ∈ D. out[e] ≤ 1
  function    ∀e ∈ D. out[e] = 1        (total ∧ univalent)
  injective   ∀e ∈ D. in[e] ≤ 1
  surjective  ∀e ∈ D. in[e] ≥ 1
  bijection   total ∧ univalent ∧ surjective ∧ injective

The order properties (reflexive, symmetric, transitive) look at the tuples
themselves and are used to check the closures.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .relation import Relation


# ---------------------------------------------------------------------------
# Counter predicates
# ---------------------------------------------------------------------------

def is_total(relation: Relation) -> bool:
    return all(relation.out_count(e) >= 1 for e in relation.domain)


def is_function(relation: Relation) -> bool:
    return all(relation.out_count(e) == 1 for e in relation.domain)


def is_univalent(relation: Relation) -> bool:
    return all(relation.out_count(e) <= 1 for e in relation.domain)


def is_injective(relation: Relation) -> bool:
    return all(relation.in_count(e) <= 1 for e in relation.domain)


def is_surjective(relation: Relation) -> bool:
    """Every element of the Domain occurs as the val of some tuple."""
    return all(relation.in_count(e) >= 1 for e in relation.domain)


def legacy_is_surjective(relation: Relation) -> bool:
    """The historical check, reproduced result for result.

    It looked each element up among the in-count *values* rather than the
    counted elements, so it is false only when some Domain element equals
    one of the counts. Only useful for reproducing old results; use
    is_surjective() everywhere else.
    """
    counts = set(relation.in_counts().values())
    return not any(e in counts for e in relation.domain)


def is_bijection(relation: Relation) -> bool:
    return (
        is_total(relation)
        and is_univalent(relation)
        and is_surjective(relation)
        and is_injective(relation)
    )


# ---------------------------------------------------------------------------
# Order properties
# ---------------------------------------------------------------------------

def is_reflexive(relation: Relation) -> bool:
    return all(relation.contains(e, e) for e in relation.domain)


def is_symmetric(relation: Relation) -> bool:
    return all(relation.contains(t.val, t.key) for t in relation)


def is_transitive(relation: Relation) -> bool:
    """R ∘ R ⊆ R."""
    return relation.compose(relation).pairs() <= relation.pairs()


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Classification:
    """Snapshot of every predicate for one relation."""
    total: bool
    univalent: bool
    function: bool
    injective: bool
    surjective: bool
    bijection: bool
    reflexive: bool
    symmetric: bool
    transitive: bool

    @property
    def is_preorder(self) -> bool:
        return self.reflexive and self.transitive

    @property
    def is_equivalence(self) -> bool:
        return self.reflexive and self.symmetric and self.transitive

    def summary(self) -> str:
        lines = ["Relation classification", "-" * 50]
        for f in fields(self):
            mark = "yes" if getattr(self, f.name) else "no"
            lines.append(f"  {f.name}: {mark}")
        return "\n".join(lines)


def classify(relation: Relation) -> Classification:
    return Classification(
        total=is_total(relation),
        univalent=is_univalent(relation),
        function=is_function(relation),
        injective=is_injective(relation),
        surjective=is_surjective(relation),
        bijection=is_bijection(relation),
        reflexive=is_reflexive(relation),
        symmetric=is_symmetric(relation),
        transitive=is_transitive(relation),
    )
