"""Reachability case study — a small step relation over five states.

States 1..5 with steps:

  1 → 1, 2 → 2, 2 → 3, 3 → 4, 4 → 5

The Kleene closure of the step relation answers "can state a reach
state b in zero or more steps?".
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from finrel.relation import Relation
from finrel.types import Domain


STATES = Domain.of(1, 2, 3, 4, 5)

STEPS = [(2, 2), (1, 1), (2, 3), (3, 4), (4, 5)]


def build_steps() -> Relation:
    """The one-step transition relation."""
    return Relation(STATES).update(*STEPS)


def build_reachability() -> Relation:
    """Reachability in zero or more steps, sorted for display."""
    return build_steps().kleene().sort()


def build_successor() -> Relation:
    """Cyclic successor i → i+1 (5 → 1): a bijection on the states."""
    r = Relation(STATES)
    elements = list(STATES)
    for i, e in enumerate(elements):
        r.add(e, elements[(i + 1) % len(elements)])
    return r
