# -*- coding: utf-8 -*-
from __future__ import annotations

import re
from typing import Any, List, Optional, Type

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser
from pydantic import BaseModel, Field

from .prompting import build_tcl_format_prompt
from .tcl_parser import ParserConfig, ShapeLike, TclParser, Value

_CODE_FENCE_RE = re.compile(r"^\s*```[A-Za-z]*[ \t]*\r?\n(?P<body>.*?)\r?\n?```\s*$", re.DOTALL)

DEFAULT_PARSER_CONFIG = ParserConfig(
    strict=False,
    count_bracket_tokens=False,
)


def strip_code_fence(text: str) -> str:
    m = _CODE_FENCE_RE.match(text)
    if not m:
        return text
    return m.group("body")


class TclOutputParser(BaseOutputParser[Any]):
    """LangChain output parser for Tcl list/dict text."""

    shape: List[ShapeLike] = Field(default_factory=list)
    pydantic_model: Optional[Type[BaseModel]] = Field(default=None)
    cfg: ParserConfig = Field(default_factory=lambda: DEFAULT_PARSER_CONFIG)
    _parser: Any = None

    def __init__(
        self,
        shape: List[ShapeLike],
        model: Optional[Type[BaseModel]] = None,
        cfg: Optional[ParserConfig] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        object.__setattr__(self, 'shape', list(shape))
        object.__setattr__(self, 'pydantic_model', model)
        object.__setattr__(self, 'cfg', cfg or DEFAULT_PARSER_CONFIG)
        object.__setattr__(self, '_parser', TclParser(self.shape, self.cfg))

    def get_format_instructions(self) -> str:
        return build_tcl_format_prompt(self.shape)

    def parse(self, text: str) -> Any:
        try:
            data = self._parser.parse(strip_code_fence(text))
            if self.pydantic_model is None:
                return data
            return self.pydantic_model.model_validate(data)
        except Exception as e:
            raise OutputParserException(str(e)) from e

    def decode(self, text: str) -> Value:
        """Structural parse only, without pydantic validation.

        Args:
            text: Tcl list text, optionally inside a Markdown code fence

        Returns:
            The nested list/dict/string value
        """
        return self._parser.parse(strip_code_fence(text))

    @property
    def _type(self) -> str:
        return "tcl"
