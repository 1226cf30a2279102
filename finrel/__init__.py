"""finrel — finite binary relations and their algebra.

A relation is a set of ordered pairs drawn from a fixed, finite Domain. This
package implements the core abstractions:

- Domain / Tuple: the universe of elements and the pairs drawn from it
- Relation: the tuple store with per-element occurrence counters
- Algebra: composition, powers, reflexive / symmetric / transitive closure,
  Kleene and equivalence closure, converse
- Classification: total, univalent, function, injective, surjective,
  bijection, plus the order properties used to check closures

The RDF bridge (finrel.rdf_bridge) translates relations to RDF graphs and
classification requirements to SHACL shapes, validated via pySHACL. Requires
optional dependencies: rdflib, pyshacl.
"""

from .classification import Classification, classify, legacy_is_surjective
from .relation import Relation, format_tuples
from .types import Domain, FinrelError, IllegalKeyKind, InvalidElement, Tuple

__all__ = [
    "Classification",
    "Domain",
    "FinrelError",
    "IllegalKeyKind",
    "InvalidElement",
    "Relation",
    "Tuple",
    "classify",
    "format_tuples",
    "legacy_is_surjective",
]
