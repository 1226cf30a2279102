"""Tests for Domain, Tuple, and the error types."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from decimal import Decimal
from fractions import Fraction

import pytest
from finrel.types import Domain, FinrelError, IllegalKeyKind, InvalidElement, Tuple


class TestDomain:
    def test_membership(self):
        d = Domain.of(1, 2, 3)
        assert 2 in d
        assert 4 not in d

    def test_preserves_order_and_collapses_duplicates(self):
        d = Domain([3, 1, 3, 2, 1])
        assert list(d) == [3, 1, 2]
        assert len(d) == 3

    def test_unhashable_is_never_member(self):
        d = Domain.of(1, 2)
        assert [1] not in d

    def test_is_immutable(self):
        d = Domain.of(1, 2)
        with pytest.raises(AttributeError):
            d.elements = (3,)

    def test_equality_by_elements(self):
        assert Domain.of("a", "b") == Domain(["a", "b"])
        assert Domain.of("a", "b") != Domain.of("b", "a")

    def test_copies_source_collection(self):
        source = [1, 2]
        d = Domain(source)
        source.append(3)
        assert 3 not in d


class TestTuple:
    @pytest.mark.parametrize("key", [1, 2.5, Decimal("1.5"), Fraction(1, 3), 1j, "abc", "x"])
    def test_legal_keys(self, key):
        t = Tuple(key, key)
        assert t.key == key

    @pytest.mark.parametrize("key", [None, (1, 2), True, object()])
    def test_illegal_key_raises(self, key):
        with pytest.raises(IllegalKeyKind, match="Only string and number"):
            Tuple(key, 1)

    def test_val_is_not_checked(self):
        t = Tuple(1, None)
        assert t.val is None

    def test_illegal_key_is_type_error(self):
        with pytest.raises(TypeError):
            Tuple(None, 1)

    def test_equality_by_value(self):
        assert Tuple(1, 2) == Tuple(1, 2)
        assert Tuple(1, 2) != Tuple(2, 1)
        assert len({Tuple(1, 2), Tuple(1, 2)}) == 1

    def test_str(self):
        assert str(Tuple(1, "a")) == "(1,a)"

    def test_swapped(self):
        assert Tuple(1, 2).swapped() == Tuple(2, 1)


class TestErrors:
    def test_invalid_element_carries_element(self):
        err = InvalidElement(7)
        assert err.element == 7
        assert "7" in str(err)
        assert isinstance(err, ValueError)
        assert isinstance(err, FinrelError)

    def test_illegal_key_kind_carries_key(self):
        err = IllegalKeyKind(None)
        assert err.key is None
        assert isinstance(err, FinrelError)
