"""
Tests for type-name normalization and nullability inference.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Sequence

import pytest

from config_schema_generator.schema.type_names import (
    RESERVED_TYPE_NAMES,
    bare_type_name,
    element_type,
    is_nullable,
    is_optional,
    normalize_type_name,
    unwrap_optional,
)


@dataclass
class Widget:
    size: int = 0


class Color(Enum):
    RED = "red"


class Number:
    """A user type whose name happens to be reserved."""


class TestNormalizeTypeName:
    """Test cases for normalize_type_name"""

    @pytest.mark.parametrize(
        "tp, expected",
        [
            (str, "string"),
            (bool, "boolean"),
            (int, "number"),
            (float, "number"),
            (Decimal, "number"),
            (type(None), "null"),
            (list[str], "array"),
            (List[int], "array"),
            (tuple[Widget, ...], "array"),
            (Sequence[str], "array"),
            (set[str], "array"),
            (list, "array"),
            (dict[str, Any], "object"),
            (Any, "object"),
            (Widget, "object"),
            (Color, "object"),
        ],
    )
    def test_canonical_names(self, tp, expected):
        assert normalize_type_name(tp) == expected

    def test_nullable_integral_is_number(self):
        assert normalize_type_name(Optional[int]) == "number"
        assert normalize_type_name(int | None) == "number"

    def test_array_of_user_type_is_array(self):
        assert normalize_type_name(list[Widget]) == "array"
        assert normalize_type_name(list[Widget] | None) == "array"

    def test_user_type_is_object(self):
        assert normalize_type_name(Widget) == "object"

    def test_reserved_user_type_name_survives(self):
        assert normalize_type_name(Number) == "number"

    def test_union_of_several_types_is_object(self):
        assert normalize_type_name(str | int) == "object"

    @pytest.mark.parametrize("tp", [str, int, list[Widget], Widget, dict[str, str], Optional[bool], str | int])
    def test_result_is_always_reserved(self, tp):
        assert normalize_type_name(tp) in RESERVED_TYPE_NAMES


class TestBareTypeName:
    def test_generic_parameters_are_dropped(self):
        assert bare_type_name(list[Widget]) == "list"
        assert bare_type_name(dict[str, int]) == "dict"

    def test_plain_class(self):
        assert bare_type_name(Widget) == "Widget"


class TestOptional:
    def test_is_optional(self):
        assert is_optional(Optional[str])
        assert is_optional(str | None)
        assert not is_optional(str)
        assert not is_optional(str | int)
        assert not is_optional(str | int | None)

    def test_unwrap_optional(self):
        assert unwrap_optional(Optional[Widget]) is Widget
        assert unwrap_optional(Widget | None) is Widget
        assert unwrap_optional(Widget) is Widget


class TestElementType:
    def test_list_element(self):
        assert element_type(list[Widget]) is Widget
        assert element_type(List[str]) is str

    def test_optional_list_element(self):
        assert element_type(Optional[list[Widget]]) is Widget

    def test_homogeneous_tuple_element(self):
        assert element_type(tuple[Widget, ...]) is Widget

    def test_not_list_shaped(self):
        assert element_type(Widget) is None
        assert element_type(dict[str, Widget]) is None
        assert element_type(tuple[str, int]) is None
        assert element_type(list) is None
        assert element_type(str) is None


class TestIsNullable:
    @pytest.mark.parametrize("tp", [int, float, bool, Decimal, Color])
    def test_value_types_are_not_nullable(self, tp):
        assert not is_nullable(tp)

    @pytest.mark.parametrize("tp", [Optional[int], bool | None, Optional[Color]])
    def test_optional_value_types_are_nullable(self, tp):
        assert is_nullable(tp)

    @pytest.mark.parametrize("tp", [str, Widget, list[int], dict[str, str], Any])
    def test_reference_types_are_nullable(self, tp):
        assert is_nullable(tp)
