# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

from .security import safe_raw_preview

logger = logging.getLogger(__name__)

_SEPARATORS = " \t"
_TERMINATORS = "\n\r;"
_GROUP_CLOSERS = {"{": "}", "[": "]"}


class TokenKind(str, Enum):
    PLAIN = "plain"
    BRACE = "brace"
    BRACKET = "bracket"
    QUOTE = "quote"
    END = "end"
    NONE = "none"


class TokenStatus(Enum):
    """Outcome of one tokenizer step."""

    MORE = "more"
    END = "end"
    INCOMPLETE = "incomplete"


@dataclass
class Cursor:
    pos: int = 0
    token: str = ""
    kind: TokenKind = TokenKind.PLAIN


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


def next_token(text: str, cursor: Cursor) -> TokenStatus:
    """Advance `cursor` past exactly one token of `text`.

    Group delimiters are stripped from the token but everything between them
    is kept verbatim, backslashes included. A backslash only stops the next
    character from opening or closing a group.
    """
    cursor.token = ""
    cursor.kind = TokenKind.PLAIN
    depth = 0
    opener = ""
    in_quote = False
    last = ""

    while cursor.pos < len(text):
        c = text[cursor.pos]
        escaped = last == "\\"

        if depth > 0:
            if c == opener and not escaped:
                depth += 1
            elif c == _GROUP_CLOSERS[opener] and not escaped:
                depth -= 1
            if depth == 0:
                cursor.pos += 1
                return TokenStatus.MORE
            cursor.token += c
        elif in_quote:
            if c == '"' and not escaped:
                cursor.pos += 1
                return TokenStatus.MORE
            cursor.token += c
        elif c in _GROUP_CLOSERS and not escaped:
            cursor.kind = TokenKind.BRACE if c == "{" else TokenKind.BRACKET
            opener = c
            depth = 1
        elif c == '"' and not escaped:
            cursor.kind = TokenKind.QUOTE
            in_quote = True
        elif c in _SEPARATORS:
            if cursor.token:
                return TokenStatus.MORE
        elif c in _TERMINATORS:
            if cursor.token:
                return TokenStatus.MORE
            cursor.kind = TokenKind.END
            cursor.token = c
            cursor.pos += 1
            return TokenStatus.MORE
        else:
            cursor.token += c

        last = c
        cursor.pos += 1

    if cursor.kind is not TokenKind.PLAIN:
        logger.warning(
            "incomplete input: still inside %s group at offset %d (text=%s)",
            cursor.kind.value,
            cursor.pos,
            safe_raw_preview(text),
        )
        return TokenStatus.INCOMPLETE

    if cursor.token:
        return TokenStatus.MORE
    cursor.kind = TokenKind.NONE
    return TokenStatus.END


class Tokenizer:
    """Token stream over one substring, with its own cursor."""

    def __init__(self, text: str):
        self.text = text
        self.cursor = Cursor()
        self.incomplete = False

    def next(self) -> TokenStatus:
        status = next_token(self.text, self.cursor)
        if status is TokenStatus.INCOMPLETE:
            self.incomplete = True
        return status

    def tokens(self) -> Iterator[Token]:
        while self.next() is TokenStatus.MORE:
            yield Token(self.cursor.kind, self.cursor.token)


def tokenize(text: str) -> List[Token]:
    return list(Tokenizer(text).tokens())
