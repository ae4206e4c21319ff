# tildeshell/aliases.py
#
# Alias table + definition parser.
# Expansion is token0 replacement, applied once (never recursive).

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union

QUOTE_CHARS = "'\""

USAGE = "Usage: alias name='command'"
INVALID_FORMAT = "Invalid alias format. Use: alias name='command'"
EMPTY_FIELD = "Alias name or command cannot be empty"


@dataclass(frozen=True)
class AliasDefinition:
    name: str
    command: str


@dataclass(frozen=True)
class AliasSyntaxError:
    message: str


AliasParseResult = Union[AliasDefinition, AliasSyntaxError]


def parse_alias_definition(text: str) -> AliasParseResult:
    """
    Parse the text after the `alias` keyword, e.g. "ll='ls -la'".

    Wrapping quotes around the command are stripped, not interpreted.
    Never raises: malformed input comes back as AliasSyntaxError.
    """
    body = (text or "").strip()
    if not body:
        return AliasSyntaxError(USAGE)
    if "=" not in body:
        return AliasSyntaxError(INVALID_FORMAT)

    name, command = body.split("=", 1)
    name = name.strip()
    command = command.strip().strip(QUOTE_CHARS).strip()
    if not name or not command:
        return AliasSyntaxError(EMPTY_FIELD)
    return AliasDefinition(name=name, command=command)


class AliasManager:
    def __init__(self, aliases=None):
        self.aliases: Dict[str, str] = dict(aliases or {})

    def define(self, definition: AliasDefinition) -> None:
        # last write wins
        self.aliases[definition.name] = definition.command

    def expand(self, parts: Sequence[str]) -> Tuple[str, ...]:
        if not parts:
            return tuple(parts)
        head, rest = parts[0], list(parts[1:])
        exp = self.aliases.get(head)
        if exp is None:
            return tuple(parts)
        line = " ".join([exp] + rest)
        return tuple(line.split())
