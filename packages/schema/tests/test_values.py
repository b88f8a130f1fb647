"""Tests for value inspection and comparison helpers."""

import copy
import datetime
import math
import pickle

from dataknobs_schema import UNDEFINED, inspect_value
from dataknobs_schema.values import (
    is_array,
    is_number,
    is_object,
    kind_of,
    render_literal,
    strictly_equals,
)


class TestUndefined:
    """Test the UNDEFINED sentinel."""

    def test_singleton(self):
        """Test that UNDEFINED is a singleton."""
        assert type(UNDEFINED)() is UNDEFINED
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_falsy_and_repr(self):
        """Test truthiness and representation."""
        assert bool(UNDEFINED) is False
        assert repr(UNDEFINED) == "UNDEFINED"
        assert UNDEFINED is not None


class TestInspectValue:
    """Test rendering of values for error messages."""

    def test_non_scalars(self):
        """Test values described by kind only."""
        assert inspect_value(UNDEFINED) == "undefined"
        assert inspect_value(None) == "null"
        assert inspect_value([]) == "array"
        assert inspect_value([1, 2, 3]) == "array"
        assert inspect_value((1, 2)) == "array"
        assert inspect_value({}) == "object"
        assert inspect_value({"a": 1}) == "object"
        assert inspect_value(object()) == "object"
        assert inspect_value(datetime.date(2024, 1, 1)) == "object"

    def test_scalars(self):
        """Test values described by kind and rendering."""
        assert inspect_value("hello") == 'string "hello"'
        assert inspect_value("") == 'string ""'
        assert inspect_value(123) == "number 123"
        assert inspect_value(3.5) == "number 3.5"
        assert inspect_value(2**70) == f"number {2**70}"
        assert inspect_value(True) == "boolean true"
        assert inspect_value(False) == "boolean false"


class TestKinds:
    """Test kind classification."""

    def test_kind_of(self):
        """Test kind names."""
        assert kind_of(UNDEFINED) == "undefined"
        assert kind_of(None) == "null"
        assert kind_of(True) == "boolean"
        assert kind_of(1) == "number"
        assert kind_of(1.5) == "number"
        assert kind_of("x") == "string"
        assert kind_of([]) == "array"
        assert kind_of({}) == "object"

    def test_predicates(self):
        """Test array, object and number predicates."""
        assert is_array([]) and is_array(())
        assert not is_array("abc")
        assert not is_array({})
        assert is_object({}) and not is_object([])
        assert is_number(0) and is_number(0.0)
        assert not is_number(True)
        assert not is_number("1")


class TestStrictEquality:
    """Test kind-aware literal comparison."""

    def test_same_kind(self):
        """Test equal values of the same kind."""
        assert strictly_equals("a", "a")
        assert strictly_equals(1, 1)
        assert strictly_equals(1, 1.0)
        assert strictly_equals(True, True)
        assert strictly_equals(None, None)
        assert strictly_equals(UNDEFINED, UNDEFINED)

    def test_cross_kind(self):
        """Test that values of different kinds never match."""
        assert not strictly_equals(True, 1)
        assert not strictly_equals(1, True)
        assert not strictly_equals(0, False)
        assert not strictly_equals("1", 1)
        assert not strictly_equals(None, UNDEFINED)
        assert not strictly_equals(UNDEFINED, None)
        assert not strictly_equals(None, 0)

    def test_nan(self):
        """Test that NaN equals nothing, not even itself."""
        assert not strictly_equals(math.nan, math.nan)

    def test_render_literal(self):
        """Test literal rendering."""
        assert render_literal("hello") == '"hello"'
        assert render_literal(42) == "42"
        assert render_literal(True) == "true"
        assert render_literal(None) == "null"
        assert render_literal(UNDEFINED) == "undefined"
