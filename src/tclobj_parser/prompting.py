# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Any, List, Sequence

from .simple_tcl import to_tclstring
from .tcl_parser import Shape, ShapeLike, TclParser

_LEVEL_DESCRIPTIONS = {
    Shape.LIST: "a Tcl list: elements separated by spaces",
    Shape.DICT: "a Tcl dict: alternating `key value` pairs separated by spaces",
    Shape.STRING: "a single word, or one {braced} group if it contains spaces",
}


def _resolve_shape(shape: Sequence[ShapeLike]) -> List[Shape]:
    parser = TclParser(shape)
    return [parser.shape_at(level) for level in range(max(1, len(parser.shape)))]


def _dummy_from_shape(shape: List[Shape], level: int = 0) -> Any:
    if level >= len(shape):
        return "text"
    tag = shape[level]
    if tag is Shape.STRING:
        return "text" if level == 0 else "some text"
    if tag is Shape.LIST:
        return [_dummy_from_shape(shape, level + 1), _dummy_from_shape(shape, level + 1)]
    return {
        "key1": _dummy_from_shape(shape, level + 1),
        "key2": _dummy_from_shape(shape, level + 1),
    }


def build_tcl_example(shape: Sequence[ShapeLike]) -> str:
    """Small fenced example matching `shape`."""
    return "```tcl\n" + to_tclstring(_dummy_from_shape(_resolve_shape(shape))) + "\n```\n"


def build_tcl_format_prompt(shape: Sequence[ShapeLike]) -> str:
    """Describe the expected Tcl list layout level by level."""
    out: List[str] = []
    out.append("### TCL LIST FORMAT (MUST FOLLOW EXACTLY)")
    out.append("")
    out.append("Output ONLY Tcl list syntax, no JSON and no surrounding prose.")
    out.append("")
    out.append("#### STRUCTURE BY NESTING LEVEL:")
    for level, tag in enumerate(_resolve_shape(shape)):
        prefix = "top level" if level == 0 else f"level {level}"
        out.append(f"- {prefix}: {_LEVEL_DESCRIPTIONS[tag]}")
    out.append("")
    out.append("#### QUOTING RULES:")
    out.append("- Wrap any element containing spaces, or any nested list/dict, in {braces}")
    out.append("- Write an empty value as {}")
    out.append("- Never write [brackets] or $variables; they are not evaluated")
    out.append("- Numbers are plain digits without leading zeros or separators: 4711")
    out.append("")
    out.append("#### EXAMPLE:")
    out.append(build_tcl_example(shape))
    return "\n".join(out)
