from __future__ import annotations

import pytest

from tclobj_parser import ParserConfig, ShapeDescriptorError, parse_tcl

COUNT_BRACKETS = ParserConfig(count_bracket_tokens=True)


def test_list_of_dicts():
    out = parse_tcl("{x 1 y 2} {x 3 y {}}", ["list", "dict", "string"])
    assert out == [{"x": 1, "y": 2}, {"x": 3, "y": None}]


def test_dict_of_lists():
    out = parse_tcl("tags {red green} empty {} ids {1 2 03}", ["dict", "list", "string"])
    assert out == {"tags": ["red", "green"], "empty": [], "ids": [1, 2, "03"]}


def test_three_levels():
    text = "alice {age 30 langs {tcl python}} bob {age 41 langs {}}"
    out = parse_tcl(text, ["dict", "dict", "string"])
    assert out == {
        "alice": {"age": 30, "langs": "tcl python"},
        "bob": {"age": 41, "langs": None},
    }


def test_bare_word_recursed_as_nested_list():
    assert parse_tcl("a {b c}", ["list", "list", "string"]) == [["a"], ["b", "c"]]


def test_quoted_values_in_nested_dict():
    out = parse_tcl('p {name "John Smith" role {}}', ["dict", "dict", "string"])
    assert out == {"p": {"name": "John Smith", "role": None}}


def test_bracket_group_in_list_is_parsed_at_next_level():
    assert parse_tcl("a [b c] d", ["list", "string"]) == ["a", "c", "d"]
    assert parse_tcl("[b c] {d}", ["list", "list", "string"]) == [["b", "c"], ["d"]]


def test_bracket_group_does_not_advance_dict_alternation():
    # [x y] fills the value slot of k, then "v" overwrites it and "1" is a dangling key
    assert parse_tcl("k [x y] v 1", ["dict", "string"]) == {"k": "v"}
    assert parse_tcl("[x y] k v", ["dict", "string"]) == {"k": "v"}


def test_bracket_group_counted_when_configured():
    assert parse_tcl("k [x y] v 1", ["dict", "string"], COUNT_BRACKETS) == {"k": "y", "v": 1}
    assert parse_tcl("[x y] k v", ["dict", "string"], COUNT_BRACKETS) == {"x y": "k"}


def test_bracket_group_at_string_level_keeps_raw_text():
    assert parse_tcl("a [b c]", ["string", "string"]) == "b c"


def test_bracket_group_needs_next_level():
    with pytest.raises(ShapeDescriptorError, match="missing type at level 1"):
        parse_tcl("[a b]", ["list"])
    with pytest.raises(ShapeDescriptorError):
        parse_tcl("[a b]", ["string"])


def test_truncation_only_affects_its_own_level():
    out = parse_tcl("a {x {1 2} y 3} b {z {4", ["dict", "dict", "string"])
    assert out == {"a": {"x": "1 2", "y": 3}}


def test_escaped_brace_inside_nested_group():
    # the escaped brace neither opens a group nor unbalances the outer one
    out = parse_tcl(r"a {x \{1} b 2", ["dict", "dict", "string"])
    assert out == {"a": {"x": r"\{1"}, "b": {}}
