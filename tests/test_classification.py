"""Tests for the classification predicates and the Classification report."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from finrel.classification import (
    Classification,
    classify,
    is_bijection,
    is_function,
    is_injective,
    is_surjective,
    is_total,
    is_univalent,
    legacy_is_surjective,
)
from finrel.relation import Relation
from finrel.types import Domain


DOMAINS = [
    Domain.of(1),
    Domain.of(1, 2, 3),
    Domain.of("a", "b", "c", "d"),
    Domain(range(10)),
]


def _successor(domain: Domain) -> Relation:
    """Cyclic successor: a permutation, hence a bijection."""
    elements = list(domain)
    r = Relation(domain)
    for i, e in enumerate(elements):
        r.add(e, elements[(i + 1) % len(elements)])
    return r


class TestIdentity:
    @pytest.mark.parametrize("domain", DOMAINS)
    def test_identity_is_function(self, domain):
        assert Relation.identity(domain).is_function()

    @pytest.mark.parametrize("domain", DOMAINS)
    def test_identity_is_bijection(self, domain):
        assert Relation.identity(domain).is_bijection()

    def test_empty_domain_is_vacuously_everything(self):
        r = Relation(Domain())
        assert r.is_function()
        assert r.is_bijection()


class TestFunction:
    def test_missing_out_edge_is_not_function(self):
        r = Relation.of(1, 2, 3).update((1, 2), (2, 3))
        assert not r.is_function()
        assert not r.is_total()
        assert r.is_univalent()

    def test_two_images_is_not_function(self):
        r = Relation.of(1, 2).update((1, 1), (1, 2), (2, 2))
        assert not r.is_function()
        assert r.is_total()
        assert not r.is_univalent()

    def test_constant_function(self):
        r = Relation.of(1, 2, 3).update((1, 1), (2, 1), (3, 1))
        assert r.is_function()
        assert not r.is_injective()
        assert not r.is_surjective()
        assert not r.is_bijection()

    def test_removal_breaks_function(self):
        r = Relation.identity([1, 2])
        r.remove(2, 2)
        assert not r.is_function()
        assert r.is_univalent()


class TestInjectiveSurjective:
    @pytest.mark.parametrize("domain", DOMAINS)
    def test_permutation_is_bijection(self, domain):
        r = _successor(domain)
        assert r.is_injective()
        assert r.is_surjective()
        assert r.is_bijection()

    def test_partial_injection(self):
        r = Relation.of(1, 2, 3).update((1, 2))
        assert r.is_injective()
        assert not r.is_surjective()

    def test_surjective_without_function(self):
        r = Relation.of(1, 2).update((1, 1), (1, 2))
        assert r.is_surjective()
        assert not r.is_bijection()

    def test_empty_relation(self):
        r = Relation.of(1, 2)
        assert r.is_injective()
        assert r.is_univalent()
        assert not r.is_surjective()
        assert not r.is_total()


class TestLegacySurjective:
    def test_inverted_on_identity(self):
        r = Relation.identity([1, 2])
        assert is_surjective(r)
        assert not legacy_is_surjective(r)

    def test_inverted_on_empty(self):
        r = Relation.of(1, 2)
        assert not is_surjective(r)
        assert legacy_is_surjective(r)

    def test_partial_image(self):
        r = Relation.of(1, 2).update((1, 1))
        assert not is_surjective(r)
        assert not legacy_is_surjective(r)

    def test_text_domain_never_matches_a_count(self):
        r = Relation.of("a", "b").update(("a", "a"))
        assert not is_surjective(r)
        assert legacy_is_surjective(r)

    def test_numbers_that_are_not_counts(self):
        r = Relation.of(5, 6).update((5, 6))
        assert not is_surjective(r)
        assert legacy_is_surjective(r)

    def test_element_equal_to_a_count(self):
        r = Relation.of(1, 2, 3).update((1, 3), (2, 3))
        assert r.in_counts() == {3: 2}
        assert not legacy_is_surjective(r)


class TestModuleFunctions:
    def test_match_methods(self):
        r = Relation.of(1, 2, 3).update((1, 2), (2, 2), (3, 1))
        assert is_total(r) == r.is_total()
        assert is_univalent(r) == r.is_univalent()
        assert is_function(r) == r.is_function()
        assert is_injective(r) == r.is_injective()
        assert is_surjective(r) == r.is_surjective()
        assert is_bijection(r) == r.is_bijection()

    def test_predicates_do_not_mutate(self):
        r = Relation.of(1, 2).update((1, 2))
        classify(r)
        assert r.pairs() == {(1, 2)}


class TestOrderProperties:
    def test_reflexive(self):
        assert Relation.identity([1, 2]).is_reflexive()
        assert not Relation.of(1, 2).update((1, 1)).is_reflexive()

    def test_symmetric(self):
        assert Relation.of(1, 2).update((1, 2), (2, 1)).is_symmetric()
        assert not Relation.of(1, 2).update((1, 2)).is_symmetric()

    def test_transitive(self):
        assert Relation.of(1, 2, 3).update((1, 2), (2, 3), (1, 3)).is_transitive()
        assert not Relation.of(1, 2, 3).update((1, 2), (2, 3)).is_transitive()


class TestClassification:
    def test_identity_report(self):
        c = classify(Relation.identity([1, 2, 3]))
        assert c == Classification(
            total=True, univalent=True, function=True, injective=True,
            surjective=True, bijection=True, reflexive=True, symmetric=True,
            transitive=True,
        )
        assert c.is_equivalence
        assert c.is_preorder

    def test_summary(self):
        c = Relation.of(1, 2).update((1, 2)).classify()
        text = c.summary()
        assert "Relation classification" in text
        assert "total: no" in text
        assert "injective: yes" in text
