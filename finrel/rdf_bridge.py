"""RDF bridge — relations as RDF graphs, classification as SHACL shapes.

Translates:
  1. Domain elements → resources typed finrel:Element (value as rdfs:label)
  2. Tuples (k, v) → triples (k, finrel:<name>, v)
  3. Classification requirements → a SHACL NodeShape over finrel:Element:
       total       → sh:path finrel:<name>,                  sh:minCount 1
       univalent   → sh:path finrel:<name>,                  sh:maxCount 1
       surjective  → sh:path [ sh:inversePath finrel:<name> ], sh:minCount 1
       injective   → sh:path [ sh:inversePath finrel:<name> ], sh:maxCount 1

Validating a relation's graph against those shapes with pySHACL gives the
same answers as the counter-based predicates in classification.py; the
bridge exists so relations can be checked and exchanged alongside other RDF
data. Requires optional dependencies: rdflib, pyshacl.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from rdflib import BNode, Graph, Literal, Namespace, RDF, RDFS, URIRef
from rdflib.namespace import SH

from .relation import Relation
from .types import Domain, InvalidElement


# ---------------------------------------------------------------------------
# Namespaces for finrel-generated RDF
# ---------------------------------------------------------------------------

FINREL = Namespace("http://finrel.example.org/")
FINREL_DATA = Namespace("http://finrel.example.org/data/")


def element_uri(element: Any) -> URIRef:
    return FINREL_DATA[quote(str(element), safe="")]


def _element_uris(domain: Domain) -> dict[Any, URIRef]:
    """Map every Domain element to its URI, rejecting collisions like 1 and "1"."""
    uris: dict[Any, URIRef] = {}
    seen: dict[URIRef, Any] = {}
    for e in domain:
        uri = element_uri(e)
        if uri in seen:
            raise ValueError(
                f"Elements {seen[uri]!r} and {e!r} map to the same URI {uri}"
            )
        seen[uri] = e
        uris[e] = uri
    return uris


# ---------------------------------------------------------------------------
# Relation ↔ RDF data graph
# ---------------------------------------------------------------------------

def relation_to_rdf(relation: Relation, name: str = "relates") -> Graph:
    """Translate a Relation into an RDF data graph.

    Every Domain element is emitted, including those that appear in no
    tuple, so SHACL can flag them under sh:minCount.
    """
    dg = Graph()
    dg.bind("finrel", FINREL)
    dg.bind("data", FINREL_DATA)

    uris = _element_uris(relation.domain)
    for e, uri in uris.items():
        dg.add((uri, RDF.type, FINREL.Element))
        dg.add((uri, RDFS.label, Literal(e)))

    predicate = FINREL[name]
    for t in relation:
        dg.add((uris[t.key], predicate, uris[t.val]))

    return dg


def relation_from_rdf(graph: Graph, domain: Domain, name: str = "relates") -> Relation:
    """Rebuild a Relation over `domain` from the finrel:<name> triples of `graph`."""
    by_uri = {uri: e for e, uri in _element_uris(domain).items()}
    relation = Relation(domain)

    # sorted for a deterministic insertion order
    for s, o in sorted(graph.subject_objects(FINREL[name])):
        if s not in by_uri:
            raise InvalidElement(s, f"Subject not in domain: {s}")
        if o not in by_uri:
            raise InvalidElement(o, f"Object not in domain: {o}")
        relation.add(by_uri[s], by_uri[o])

    return relation


# ---------------------------------------------------------------------------
# Classification → SHACL shapes
# ---------------------------------------------------------------------------

def classification_to_shacl(
    name: str = "relates",
    total: bool = False,
    univalent: bool = False,
    surjective: bool = False,
    injective: bool = False,
) -> Graph:
    """Build a SHACL shapes graph requiring the selected properties.

    A function is total + univalent; a bijection is all four.
    """
    sg = Graph()
    sg.bind("sh", SH)
    sg.bind("finrel", FINREL)

    shape_uri = FINREL[f"{name}Shape"]
    sg.add((shape_uri, RDF.type, SH.NodeShape))
    sg.add((shape_uri, SH.targetClass, FINREL.Element))
    sg.add((shape_uri, RDFS.label, Literal(f"Shape for {name}")))

    predicate = FINREL[name]

    if total or univalent:
        prop_shape = BNode()
        sg.add((shape_uri, SH.property, prop_shape))
        sg.add((prop_shape, SH.path, predicate))
        sg.add((prop_shape, SH.name, Literal(f"{name} (out)")))
        if total:
            sg.add((prop_shape, SH.minCount, Literal(1)))
        if univalent:
            sg.add((prop_shape, SH.maxCount, Literal(1)))

    if surjective or injective:
        inverse = BNode()
        sg.add((inverse, SH.inversePath, predicate))
        prop_shape = BNode()
        sg.add((shape_uri, SH.property, prop_shape))
        sg.add((prop_shape, SH.path, inverse))
        sg.add((prop_shape, SH.name, Literal(f"{name} (in)")))
        if surjective:
            sg.add((prop_shape, SH.minCount, Literal(1)))
        if injective:
            sg.add((prop_shape, SH.maxCount, Literal(1)))

    return sg


# ---------------------------------------------------------------------------
# SHACL Validation
# ---------------------------------------------------------------------------

def shacl_validate(
    relation: Relation,
    name: str = "relates",
    total: bool = False,
    univalent: bool = False,
    surjective: bool = False,
    injective: bool = False,
) -> SHACLValidationResult:
    """Run SHACL validation: requirements → shapes, relation → data, then validate."""
    from pyshacl import validate as pyshacl_validate

    shapes_graph = classification_to_shacl(
        name=name,
        total=total,
        univalent=univalent,
        surjective=surjective,
        injective=injective,
    )
    data_graph = relation_to_rdf(relation, name=name)

    conforms, results_graph, results_text = pyshacl_validate(
        data_graph,
        shacl_graph=shapes_graph,
        inference="none",
        abort_on_first=False,
    )

    violations = []
    for result in results_graph.subjects(RDF.type, SH.ValidationResult):
        focus = results_graph.value(result, SH.focusNode)
        component = results_graph.value(result, SH.sourceConstraintComponent)
        message = results_graph.value(result, SH.resultMessage)
        severity = results_graph.value(result, SH.resultSeverity)

        violations.append(SHACLViolation(
            focus_node=str(focus) if focus else "",
            component=str(component) if component else "",
            message=str(message) if message else "",
            severity=str(severity) if severity else "",
        ))

    return SHACLValidationResult(
        conforms=conforms,
        violations=violations,
        results_text=results_text,
        shapes_graph=shapes_graph,
        data_graph=data_graph,
    )


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

def _local_name(uri: str) -> str:
    return uri.rsplit("/", 1)[-1].rsplit("#", 1)[-1]


@dataclass
class SHACLViolation:
    """A single SHACL validation violation."""
    focus_node: str
    component: str
    message: str
    severity: str

    def __repr__(self) -> str:
        return f"SHACLViolation({_local_name(self.focus_node)}: {_local_name(self.component)})"


@dataclass
class SHACLValidationResult:
    """Result of validating a relation through the RDF bridge."""
    conforms: bool
    violations: list[SHACLViolation] = field(default_factory=list)
    results_text: str = ""
    shapes_graph: Graph | None = None
    data_graph: Graph | None = None

    def focus_nodes(self) -> set[str]:
        """Local names of the elements that violated a shape."""
        return {_local_name(v.focus_node) for v in self.violations}

    def summary(self) -> str:
        lines = []
        status = "CONFORMS" if self.conforms else "DOES NOT CONFORM"
        lines.append(f"SHACL Validation: {status}")
        lines.append("-" * 50)
        if self.violations:
            lines.append(f"  Violations ({len(self.violations)}):")
            for v in self.violations:
                lines.append(
                    f"    - {_local_name(v.focus_node)} "
                    f"[{_local_name(v.component)}]: {v.message}"
                )
        else:
            lines.append("  No violations found.")
        return "\n".join(lines)

    def shapes_as_turtle(self) -> str:
        if self.shapes_graph is None:
            return ""
        return self.shapes_graph.serialize(format="turtle")

    def data_as_turtle(self) -> str:
        if self.data_graph is None:
            return ""
        return self.data_graph.serialize(format="turtle")
