# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from .tokenizer import Cursor, TokenKind, TokenStatus, next_token

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[1-9][0-9]*")

Value = Union[None, int, str, List[Any], Dict[str, Any]]


# ============================================================
# Errors
# ============================================================
class TclParserError(ValueError):
    pass


class ShapeDescriptorError(TclParserError):
    """The shape descriptor has no usable tag for a level being parsed."""

    def __init__(self, message: str, level: int):
        self.level = level
        super().__init__(message)


class IncompleteInputError(TclParserError):
    """Input ended inside an open brace, bracket or quote group (strict mode)."""

    def __init__(self, kind: TokenKind, offset: int, level: int):
        self.kind = kind
        self.offset = offset
        self.level = level
        super().__init__(
            f"incomplete input at level {level}: still inside {kind.value} group at offset {offset}"
        )


# ============================================================
# Config
# ============================================================
class Shape(str, Enum):
    LIST = "list"
    DICT = "dict"
    STRING = "string"


ShapeLike = Union[Shape, str]


@dataclass(frozen=True)
class ParserConfig:
    # raise IncompleteInputError instead of returning the partial value
    strict: bool = False
    # let [bracket] groups advance the key/value alternation of dict levels
    count_bracket_tokens: bool = False


# ============================================================
# Coercion
# ============================================================
def coerce_value(token: str) -> Union[None, int, str]:
    """Empty -> None, `[1-9][0-9]*` -> int, anything else unchanged."""
    if len(token) == 0:
        return None
    if _NUMBER_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError:
            # past sys.get_int_max_str_digits()
            return token
    return token


# ============================================================
# Structural parser
# ============================================================
class TclParser:
    """Builds nested lists, dicts and strings from Tcl list text.

    `shape` names the structure of every nesting level, outermost first, e.g.
    ``["dict", "list", "string"]`` for a dict whose values are lists of
    scalars. Tags are checked lazily, when their level is first entered.

    >>> TclParser(["dict", "string"]).parse("a 4711 b xyz c {This is a Test.} d {}")
    {'a': 4711, 'b': 'xyz', 'c': 'This is a Test.', 'd': None}
    """

    def __init__(self, shape: Sequence[ShapeLike], cfg: ParserConfig = ParserConfig()):
        self.shape = list(shape)
        self.cfg = cfg

    def parse(self, text: str) -> Value:
        return self._parse_level(text, 0)

    def shape_at(self, level: int) -> Shape:
        if level >= len(self.shape) or not self.shape[level]:
            raise ShapeDescriptorError(f"missing type at level {level}", level)
        tag = self.shape[level]
        try:
            return Shape(tag)
        except ValueError:
            raise ShapeDescriptorError(f"unknown type {tag!r} at level {level}", level) from None

    def _is_leaf_level(self, level: int) -> bool:
        # peek only; a missing tag surfaces when the nested level is entered
        if level >= len(self.shape):
            return False
        return self.shape[level] == Shape.STRING

    def _element(self, token: str, level: int) -> Value:
        if self._is_leaf_level(level + 1):
            return coerce_value(token)
        return self._parse_level(token, level + 1)

    def _parse_level(self, text: str, level: int) -> Value:
        shape = self.shape_at(level)
        out: Value
        if shape is Shape.LIST:
            out = []
        elif shape is Shape.DICT:
            out = {}
        else:
            out = ""

        cursor = Cursor()
        count = 0
        key: Optional[str] = None

        while True:
            status = next_token(text, cursor)
            if status is TokenStatus.INCOMPLETE:
                if self.cfg.strict:
                    raise IncompleteInputError(cursor.kind, cursor.pos, level)
                logger.debug("level %d: truncated %s group absorbed, returning partial value", level, cursor.kind.value)
                break
            if status is TokenStatus.END:
                break

            kind, token = cursor.kind, cursor.token
            if kind is TokenKind.END:
                continue

            if kind is TokenKind.BRACKET:
                # parsed at every shape so a missing next-level tag always raises
                nested = self._parse_level(token, level + 1)
                if shape is Shape.LIST:
                    out.append(nested)
                elif shape is Shape.DICT:
                    if count % 2 == 1:
                        out[key] = nested
                    elif self.cfg.count_bracket_tokens:
                        key = token
                else:
                    out = token
                if self.cfg.count_bracket_tokens:
                    count += 1
                continue

            if shape is Shape.LIST:
                out.append(self._element(token, level))
            elif shape is Shape.DICT:
                if count % 2 == 0:
                    key = token
                else:
                    out[key] = self._element(token, level)
            else:
                out = token
            count += 1

        if shape is Shape.DICT and count % 2 == 1:
            logger.debug("level %d: dropping key %r without value", level, key)
        return out


def parse_tcl(text: str, shape: Sequence[ShapeLike], cfg: Optional[ParserConfig] = None) -> Value:
    """Parse `text` into nested values following the per-level `shape` tags."""
    return TclParser(shape, cfg or ParserConfig()).parse(text)
