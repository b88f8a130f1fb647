"""Tests for object schemas."""

from types import MappingProxyType

import pytest

from dataknobs_schema import (
    ObjectSchema,
    Schema,
    ValidationException,
    boolean,
    nullish,
    number,
    object_,
    strict_object,
    string,
)


class TestObjectSchema:
    """Test permissive object schemas."""

    def test_valid_object(self):
        """Test parsing a valid object."""
        schema = object_({
            "name": string(),
            "age": number(),
            "is_active": boolean(),
        })
        result = schema.parse({"name": "John", "age": 30, "is_active": True})
        assert result == {"name": "John", "age": 30, "is_active": True}

    def test_extra_keys_dropped(self):
        """Test that undeclared keys are ignored and not copied."""
        schema = object_({"name": string()})
        result = schema.parse({"name": "John", "extra": "data"})
        assert result == {"name": "John"}
        assert "extra" not in result

        assert object_({}).parse({"extra": "ignored"}) == {}

    def test_invalid_objects(self):
        """Test type mismatches."""
        schema = object_({"name": string(), "age": number()})
        with pytest.raises(ValidationException, match="Expected number, got string"):
            schema.parse({"name": "John", "age": "30"})
        with pytest.raises(ValidationException, match="Expected object, got null"):
            schema.parse(None)
        with pytest.raises(ValidationException, match="Expected object, got array"):
            schema.parse([])

    def test_root_level_error(self):
        """Test the full report for a non-object input."""
        schema = object_({
            "a": string(),
            "b": number(),
            "c": object_({"d": boolean()}),
        })
        result = schema.safe_parse("not an object")
        assert result.success is False
        assert len(result.errors) == 1
        assert result.errors[0].path == ()
        assert result.errors[0].message == 'Expected object, got string "not an object"'
        assert result.message == (
            'Validation failed: Expected object, got string "not an object" (at path /)'
        )

    def test_missing_required_field(self):
        """Test that a missing field is validated as undefined."""
        schema = object_({"required": string()})
        with pytest.raises(ValidationException, match="Expected string, got undefined"):
            schema.parse({})

    def test_optional_fields(self):
        """Test optional, nullable and nullish fields."""
        schema = object_({
            "required": string(),
            "optional": string().optional(),
            "nullable": string().nullable(),
            "nullish": nullish(string()),
        })

        full = schema.parse({
            "required": "yes",
            "optional": "maybe",
            "nullable": "null-ok",
            "nullish": "both-ok",
        })
        assert full == {
            "required": "yes",
            "optional": "maybe",
            "nullable": "null-ok",
            "nullish": "both-ok",
        }

        minimal = schema.parse({"required": "yes", "nullable": None})
        assert minimal == {"required": "yes", "nullable": None}
        assert "optional" not in minimal
        assert "nullish" not in minimal

        with pytest.raises(ValidationException, match="Expected string, got undefined"):
            schema.parse({"optional": "maybe", "nullable": None, "nullish": None})

        result = schema.safe_parse({"required": "yes"})
        assert [error.path for error in result.errors] == [("nullable",), ("nullable",)]

    def test_multiple_errors_in_declaration_order(self):
        """Test that every field error is reported, in declaration order."""
        schema = object_({
            "name": string(),
            "age": number(),
            "email": string(),
            "is_active": boolean(),
        })
        result = schema.safe_parse({
            "name": 123,
            "age": "thirty",
            "email": True,
            "is_active": "yes",
        })
        assert result.success is False
        assert [error.path for error in result.errors] == [
            ("name",), ("age",), ("email",), ("is_active",),
        ]

    def test_deeply_nested_path(self):
        """Test error paths through nested objects."""
        schema = object_({"a": object_({"b": object_({"c": number()})})})
        result = schema.safe_parse({"a": {"b": {"c": "x"}}})
        assert len(result.errors) == 1
        assert result.errors[0].path == ("a", "b", "c")
        assert result.errors[0].message == 'Expected number, got string "x"'

    def test_parse_creates_new_objects(self):
        """Test that parsing never returns input containers."""
        schema = object_({"nested": object_({"value": number()})})
        data = {"nested": {"value": 42}}
        result = schema.parse(data)
        assert result == data
        assert result is not data
        assert result["nested"] is not data["nested"]

    def test_accepts_any_mapping(self):
        """Test that read-only mappings are objects."""
        schema = object_({"name": string()})
        assert schema.parse(MappingProxyType({"name": "a"})) == {"name": "a"}


class TestStrictObjectSchema:
    """Test strict object schemas."""

    def test_valid_strict_object(self):
        """Test parsing an object with only declared keys."""
        schema = strict_object({"name": string(), "age": number()})
        assert schema.parse({"name": "John", "age": 30}) == {"name": "John", "age": 30}
        assert schema.is_strict

    def test_unrecognized_keys(self):
        """Test that undeclared keys are reported in one error."""
        schema = strict_object({"name": string()})
        with pytest.raises(ValidationException, match="Unrecognized keys: extra"):
            schema.parse({"name": "a", "extra": 1})

        result = schema.safe_parse({"name": "a", "extra": 1, "other": 2})
        assert len(result.errors) == 1
        assert result.errors[0].path == ()
        assert result.errors[0].message == "Unrecognized keys: extra, other"

        assert object_({"name": string()}).safe_parse({"name": "a", "extra": 1}).data == {"name": "a"}

    def test_field_errors_and_unrecognized_keys(self):
        """Test that the diagnostic pass reports both kinds of failure."""
        schema = strict_object({"name": string()})
        result = schema.safe_parse({"name": 1, "x": True})
        assert [(error.path, error.message) for error in result.errors] == [
            (("name",), "Expected string, got number 1"),
            ((), "Unrecognized keys: x"),
        ]

    def test_nested_strict_path(self):
        """Test unrecognized keys reported at a nested object's path."""
        schema = object_({"inner": strict_object({"a": number()})})
        result = schema.safe_parse({"inner": {"a": 1, "b": 2}})
        assert result.errors[0].path == ("inner",)
        assert result.errors[0].message == "Unrecognized keys: b"


class TestObjectShape:
    """Test shape introspection and derived object schemas."""

    def test_shape(self):
        """Test the shape mapping."""
        schema = ObjectSchema({"name": string(), "age": number()})
        shape = schema.shape
        assert list(shape) == ["name", "age"]
        assert isinstance(shape["name"], Schema)
        assert isinstance(shape["age"], Schema)
        assert shape["name"].parse("test") == "test"
        assert shape["age"].parse(25) == 25

    def test_shape_is_read_only(self):
        """Test that the shape cannot be modified."""
        fields = {"name": string()}
        schema = object_(fields)
        with pytest.raises(TypeError):
            schema.shape["age"] = number()  # type: ignore[index]

        fields["age"] = number()
        assert "age" not in schema.shape

    def test_extend(self):
        """Test adding and replacing fields."""
        base = strict_object({"id": number(), "name": string()})
        extended = base.extend({"name": number(), "email": string()})

        assert list(extended.shape) == ["id", "name", "email"]
        assert extended.is_strict
        assert extended.parse({"id": 1, "name": 2, "email": "a@b"}) == {
            "id": 1, "name": 2, "email": "a@b",
        }
        assert list(base.shape) == ["id", "name"]

    def test_strict_and_strip(self):
        """Test switching strictness."""
        loose = object_({"id": number()})
        strict = loose.strict()
        assert strict.is_strict and not loose.is_strict
        assert not strict.safe_parse({"id": 1, "x": 2})
        assert strict.strip().parse({"id": 1, "x": 2}) == {"id": 1}

    def test_partial(self):
        """Test making every field optional."""
        schema = object_({"id": number(), "name": string()}).partial()
        assert schema.parse({}) == {}
        assert schema.parse({"name": "a"}) == {"name": "a"}
        with pytest.raises(ValidationException, match="Validation failed"):
            schema.parse({"id": "1"})

    def test_input_type(self):
        """Test object description."""
        schema = object_({"a": string(), "b": number().optional()})
        assert schema.input_type == '{ "a": string, "b": undefined | number }'
