# tildeshell/parser.py
#
# Line tokenizer. Whitespace split only: no quoting, globbing or $VAR expansion.

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Parsed:
    tokens: Tuple[str, ...]


@dataclass(frozen=True)
class Blank:
    pass


ParseResult = Union[Parsed, Blank]


def parse_line(raw: str) -> ParseResult:
    """Split one input line into tokens; blank input is a no-op."""
    line = (raw or "").strip()
    if not line:
        return Blank()
    tokens = tuple(line.split())
    if not tokens:
        return Blank()
    return Parsed(tokens)
