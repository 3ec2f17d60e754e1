from __future__ import annotations

from typing import Optional

import pytest
from langchain_core.exceptions import OutputParserException
from langchain_core.runnables import RunnableLambda
from pydantic import BaseModel

from tclobj_parser import (
    ParserConfig,
    ShapeDescriptorError,
    TclOutputParser,
    build_tcl_example,
    build_tcl_format_prompt,
    parse_tcl,
)


class Route(BaseModel):
    route: str
    confidence: int
    reason: Optional[str] = None


def test_parse_without_model_returns_value():
    parser = TclOutputParser(shape=["dict", "string"])
    assert parser.parse("a 1 b xyz") == {"a": 1, "b": "xyz"}


def test_parse_dict_to_model():
    parser = TclOutputParser(shape=["dict", "string"], model=Route)
    out = parser.parse("route search confidence 9 reason {}")
    assert out == Route(route="search", confidence=9, reason=None)


def test_extract_from_code_fence():
    parser = TclOutputParser(shape=["dict", "string"], model=Route)
    out = parser.parse("```tcl\nroute faq confidence 5\n```")
    assert out.route == "faq"
    assert out.confidence == 5


def test_schema_mismatch_raises():
    parser = TclOutputParser(shape=["dict", "string"], model=Route)
    with pytest.raises(OutputParserException):
        parser.parse("route search confidence high")


def test_descriptor_error_raises_output_parser_exception():
    parser = TclOutputParser(shape=["list"])
    with pytest.raises(OutputParserException, match="missing type at level 1"):
        parser.parse("{a b}")


def test_strict_truncation_raises():
    parser = TclOutputParser(shape=["list", "string"], cfg=ParserConfig(strict=True))
    with pytest.raises(OutputParserException, match="incomplete input"):
        parser.parse("a {b")


def test_decode_skips_model_validation():
    parser = TclOutputParser(shape=["dict", "string"], model=Route)
    assert parser.decode("route search confidence high") == {"route": "search", "confidence": "high"}


def test_runs_in_a_chain():
    parser = TclOutputParser(shape=["list", "string"])
    chain = RunnableLambda(lambda _: "a 42 {b c}") | parser
    assert chain.invoke({}) == ["a", 42, "b c"]


def test_format_instructions():
    parser = TclOutputParser(shape=["dict", "string"])
    instructions = parser.get_format_instructions()
    assert "top level: a Tcl dict" in instructions
    assert "level 1: a single word" in instructions
    assert build_tcl_example(["dict", "string"]) in instructions
    assert parser._type == "tcl"


def test_example_matches_shape():
    example = build_tcl_example(["list", "dict", "string"])
    body = example.strip().strip("`")[len("tcl\n"):]
    value = parse_tcl(body, ["list", "dict", "string"])
    assert value == [{"key1": "some text", "key2": "some text"}] * 2


def test_format_prompt_rejects_bad_shape():
    with pytest.raises(ShapeDescriptorError):
        build_tcl_format_prompt([])
    with pytest.raises(ShapeDescriptorError):
        build_tcl_format_prompt(["dict", "nope"])
