# tildeshell/topics/builtins.py
#
# Commands the shell runs itself instead of spawning a process.
#
#   alias name='command'   define/overwrite an alias (session lifetime)
#   cd [path]              change directory; no path -> $HOME
#   exit                   terminate with status 0
#
# `alias` is matched on the literal first token, before alias expansion.
# `cd` and `exit` are matched after expansion.

from __future__ import annotations

import enum
import logging
import os

from tildeshell.aliases import AliasDefinition, parse_alias_definition
from tildeshell.errors import CommandError

log = logging.getLogger(__name__)


class Builtin(enum.Enum):
    ALIAS = "alias"
    CD = "cd"
    EXIT = "exit"

    @classmethod
    def lookup(cls, name: str):
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def after_expansion(self) -> bool:
        return self is not Builtin.ALIAS


def alias_cmd(core, text=""):
    res = parse_alias_definition(text)
    if not isinstance(res, AliasDefinition):
        print(res.message, file=core.stderr)
        return None
    core.alias_mgr.define(res)
    log.info("alias %s=%r", res.name, res.command)
    return f"Alias '{res.name}' set to '{res.command}'"


def cd_cmd(core, target=None, *_ignored):
    if target is None:
        target = os.environ.get("HOME")
        if not target:
            raise CommandError("failed to get home directory: $HOME is not defined")
    try:
        os.chdir(target)
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL byte in the path
        raise CommandError(f"chdir {target}: {getattr(e, 'strerror', None) or e}") from e
    log.info("cwd -> %s", target)
    return None


def exit_cmd(core, *_ignored):
    log.info("exit requested")
    raise SystemExit(0)


COMMANDS = {
    Builtin.ALIAS: alias_cmd,
    Builtin.CD:    cd_cmd,
    Builtin.EXIT:  exit_cmd,
}
