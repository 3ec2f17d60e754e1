# -*- coding: utf-8 -*-
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional

# `-password {x y}`, `token=abc`, `secret "x"` as written by Tcl option lists and dicts
_SECRET_RE = re.compile(
    r'(?i)(?<![\w-])(-?(?:password|passwd|token|secret|api_?key))(\s+|=)(\{[^}]*\}|"[^"]*"|\S+)'
)
_HOME_RE = re.compile(r"(/home/|/Users/|[A-Za-z]:\\Users\\)[^/\\\s{}\"]+")

@dataclass(frozen=True)
class RawLogPolicy:
    """Policy for putting raw input text into log records.

    Off by default; tool output can carry hostnames, paths or credentials.
    """
    enabled: bool
    preview_chars: int = 200

    @staticmethod
    def from_env() -> "RawLogPolicy":
        enabled = os.getenv("TCLOBJ_PARSER_LOG_RAW", "false").lower() == "true"
        try:
            preview_chars = int(os.getenv("TCLOBJ_PARSER_LOG_PREVIEW_CHARS", "200"))
        except ValueError:
            preview_chars = 200
        return RawLogPolicy(enabled=enabled, preview_chars=max(0, preview_chars))

def mask_sensitive_text(text: str) -> str:
    """Redact credential values and the user name in home directory paths."""
    text = _SECRET_RE.sub(r"\1\2[REDACTED]", text)
    text = _HOME_RE.sub(r"\1[USER]", text)
    return text

def safe_raw_preview(text: str, policy: Optional[RawLogPolicy] = None) -> str:
    if policy is None:
        policy = RawLogPolicy.from_env()
    if not policy.enabled:
        return "REDACTED"
    preview = text[: policy.preview_chars]
    return repr(mask_sensitive_text(preview))
