from .output_parser import TclOutputParser
from .prompting import build_tcl_example, build_tcl_format_prompt
from .simple_tcl import SimpleTcl, to_tclstring
from .tcl_parser import (
    IncompleteInputError,
    ParserConfig,
    Shape,
    ShapeDescriptorError,
    TclParser,
    TclParserError,
    coerce_value,
    parse_tcl,
)
from .tokenizer import Cursor, Token, TokenKind, Tokenizer, TokenStatus, next_token, tokenize

__all__ = [
    "TclOutputParser",
    "build_tcl_example",
    "build_tcl_format_prompt",
    "SimpleTcl",
    "to_tclstring",
    "IncompleteInputError",
    "ParserConfig",
    "Shape",
    "ShapeDescriptorError",
    "TclParser",
    "TclParserError",
    "coerce_value",
    "parse_tcl",
    "Cursor",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TokenStatus",
    "next_token",
    "tokenize",
]
