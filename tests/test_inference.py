"""Tests for schema inference from JSON samples."""
import json
from typegen.generators.inference import (
    UNKNOWN,
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    collect_object_types,
    infer_type,
    nesting_depth,
)


class TestInferType:
    """Test structural inference of descriptors."""

    def test_primitives(self):
        """Test that scalars map to primitive kinds."""
        assert infer_type("x", "Root") == Primitive("string")
        assert infer_type(1, "Root") == Primitive("number")
        assert infer_type(1.5, "Root") == Primitive("number")
        assert infer_type(True, "Root") == Primitive("boolean")
        assert infer_type(False, "Root") == Primitive("boolean")

    def test_null_is_nullable_unknown(self):
        """Test that null becomes Nullable(UNKNOWN)."""
        assert infer_type(None, "Root") == Nullable(UNKNOWN)

    def test_empty_array_is_unknown_placeholder(self):
        """Test that [] infers the unknown placeholder instead of failing."""
        assert infer_type([], "Root") == ArrayOf(UNKNOWN)

    def test_array_uses_first_element_only(self):
        """Test that heterogeneous arrays are not merged."""
        result = infer_type([1, "two", None], "Root")
        assert result == ArrayOf(Primitive("number"))

    def test_object_fields_keep_key_order(self):
        """Test that field order equals the input key order."""
        data = json.loads('{"zeta": 1, "alpha": "x", "mid": true, "beta": null}')
        result = infer_type(data, "Root")

        assert isinstance(result, ObjectOf)
        assert result.name == "Root"
        assert [f.name for f in result.fields] == ["zeta", "alpha", "mid", "beta"]

    def test_spec_sample(self):
        """Test the a/b/c sample field types."""
        result = infer_type({"a": 1, "b": "x", "c": None}, "Root")
        assert result.fields == (
            Field("a", Primitive("number")),
            Field("b", Primitive("string")),
            Field("c", Nullable(UNKNOWN)),
        )
        assert all(f.optional is False for f in result.fields)

    def test_nested_names(self):
        """Test that nested objects are named from their keys and array items get an Item suffix."""
        data = {"user_profile": {"age": 3}, "line-items": [{"sku": "a"}]}
        result = infer_type(data, "Order")

        profile = result.fields[0].type
        assert isinstance(profile, ObjectOf)
        assert profile.name == "UserProfile"

        items = result.fields[1].type
        assert isinstance(items, ArrayOf)
        assert items.item.name == "LineItemsItem"

    def test_inference_is_repeatable(self):
        """Test that inferring the same value twice yields equal descriptors."""
        data = {"a": [{"b": [1]}], "c": {"d": None}}
        assert infer_type(data, "Root") == infer_type(data, "Root")


class TestCollectObjectTypes:
    """Test ordering and de-duplication of nested declarations."""

    def test_children_before_parents(self):
        """Test depth-first order with the root last."""
        data = {"id": 1, "profile": {"address": {"city": "x"}}, "items": [{"sku": "a"}]}
        names = [obj.name for obj in collect_object_types(infer_type(data, "Root"))]
        assert names == ["Address", "Profile", "ItemsItem", "Root"]

    def test_duplicate_names_keep_first(self):
        """Test that a type name is emitted once, first occurrence wins."""
        data = {"a": {"data": {"x": 1}}, "b": {"data": {"y": "z"}}}
        objects = collect_object_types(infer_type(data, "Root"))
        data_types = [obj for obj in objects if obj.name == "Data"]

        assert len(data_types) == 1
        assert data_types[0].fields[0].name == "x"

    def test_root_array_yields_element_types(self):
        """Test that a root array contributes the types of its element."""
        objects = collect_object_types(infer_type([{"id": 1}], "Root"))
        assert [obj.name for obj in objects] == ["RootItem"]

    def test_root_primitive_yields_nothing(self):
        """Test that scalars and empty arrays have no declarations."""
        assert collect_object_types(infer_type(42, "Root")) == []
        assert collect_object_types(infer_type([], "Root")) == []

    def test_nested_arrays_are_unwrapped(self):
        """Test that objects inside arrays of arrays are still collected."""
        objects = collect_object_types(infer_type({"grid": [[{"v": 1}]]}, "Root"))
        assert [obj.name for obj in objects] == ["GridItemItem", "Root"]


def test_nesting_depth():
    """Test container depth measurement."""
    assert nesting_depth(1) == 0
    assert nesting_depth({}) == 1
    assert nesting_depth({"a": [1], "b": {"c": {"d": None}}}) == 3
    assert nesting_depth([[[]]]) == 3
