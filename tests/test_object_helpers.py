from __future__ import annotations

from collections import OrderedDict, defaultdict
from dataclasses import dataclass

import pytest

from mappersmith_utils import (
    is_plain_object,
    lower_case_object_keys,
    null_safe_object,
    to_js_string,
)


def test_lower_case_object_keys_returns_new_dict():
    obj = {"ABC": 1, "DeF": 2, "ghI": 3}
    assert lower_case_object_keys(obj) == {"abc": 1, "def": 2, "ghi": 3}
    assert obj == {"ABC": 1, "DeF": 2, "ghI": 3}
    assert lower_case_object_keys(obj) is not obj


def test_lower_case_object_keys_leaves_values_and_non_string_keys():
    nested = {"Inner": 1}
    result = lower_case_object_keys({"Outer": nested, 7: "seven"})
    assert result == {"outer": {"Inner": 1}, 7: "seven"}
    assert result["outer"] is nested


def test_null_safe_object_keeps_non_null_values():
    obj = {"ABC": 1, "DeF": 2, "ghI": 3}
    assert null_safe_object(obj) == obj
    assert null_safe_object(obj) is not obj


def test_null_safe_object_drops_none_values():
    obj = {"ABC": 1, "DeF": 2, "ghI": None}
    assert null_safe_object(obj) == {"ABC": 1, "DeF": 2}
    assert obj["ghI"] is None


def test_null_safe_object_keeps_falsy_values():
    assert null_safe_object({"a": 0, "b": "", "c": False}) == {"a": 0, "b": "", "c": False}


def test_null_safe_object_none_argument():
    assert null_safe_object(None) == {}


def test_is_plain_object():
    class Custom:
        pass

    @dataclass
    class Record:
        plain: bool

    assert is_plain_object({"plain": True}) is True
    assert is_plain_object({}) is True
    assert is_plain_object(Custom()) is False
    assert is_plain_object(Record(plain=True)) is False
    assert is_plain_object(OrderedDict(plain=True)) is False
    assert is_plain_object(defaultdict(int)) is False
    assert is_plain_object([1, 2]) is False
    assert is_plain_object("plain") is False
    assert is_plain_object(None) is False


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (1.0, "1"),
        (1.5, "1.5"),
        (-0.0, "0"),
        (0.1, "0.1"),
        (123.456, "123.456"),
        (1e21, "1e+21"),
        (1e16, "10000000000000000"),
        (1.5e-7, "1.5e-7"),
        (0.000001, "0.000001"),
        (2.5e25, "2.5e+25"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        ("text", "text"),
        (b"\xe9t\xe9", "été"),
        ([1, [2, 3], None, "x"], "1,2,3,,x"),
        ((), ""),
        ({"x": 1}, "[object Object]"),
    ],
)
def test_to_js_string(value, expected):
    assert to_js_string(value) == expected


def test_to_js_string_objects():
    class Bare:
        pass

    class Named:
        def __str__(self) -> str:
            return "named!"

    assert to_js_string(Bare()) == "[object Object]"
    assert to_js_string(Named()) == "named!"
