# -*- coding: utf-8 -*-
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List

from .tcl_parser import ParserConfig, ShapeLike, TclParser, Value

_NEEDS_BRACES_RE = re.compile(r'[\s{}\[\]";\\]')


def to_tclstring(value: Any) -> str:
    """Render nested lists/dicts/scalars as Tcl list text.

    Elements that would not survive tokenizing as one bare word are wrapped in
    braces. Nested lists and dicts are always wrapped. Strings ending in a
    backslash or with unbalanced braces raise ValueError.

    Decoding coerces leaves, so digit strings like "42" come back as int and
    ints such as 0 or -1 come back as str.
    """
    if isinstance(value, dict):
        items: List[str] = []
        for k, v in value.items():
            items.append(_element_to_str(str(k)))
            items.append(_element_to_str(v))
        return " ".join(items)
    if isinstance(value, (list, tuple)):
        return " ".join(_element_to_str(x) for x in value)
    return _quote(_scalar_to_str(value))


def _element_to_str(v: Any) -> str:
    if isinstance(v, (dict, list, tuple)):
        return "{" + to_tclstring(v) + "}"
    return _quote(_scalar_to_str(v))


def _scalar_to_str(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, bool):
        return "1" if v else "0"
    return str(v)


def _braces_balance(s: str) -> bool:
    depth = 0
    last = ""
    for c in s:
        if last != "\\":
            if c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth < 0:
                    return False
        last = c
    return depth == 0


def _quote(s: str) -> str:
    if s == "" or not _NEEDS_BRACES_RE.search(s):
        return s or "{}"
    # the tokenizer keeps backslashes, so nothing can protect a closing brace
    # from a trailing one or rebalance stray braces
    if s.endswith("\\"):
        raise ValueError(f"Cannot encode string ending in a backslash: {s!r}")
    if not _braces_balance(s):
        raise ValueError(f"Cannot encode string with unbalanced braces: {s!r}")
    return "{" + s + "}"


@dataclass
class SimpleTcl:
    """Encoder/decoder pair bound to one shape descriptor."""

    shape: List[ShapeLike]
    cfg: ParserConfig = field(default_factory=ParserConfig)

    def encode(self, value: Any) -> str:
        return to_tclstring(value)

    def decode(self, text: str) -> Value:
        return TclParser(self.shape, self.cfg).parse(text)
