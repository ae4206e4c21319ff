"""tildeshell/core.py

Core session + init_core() wiring.

The Core owns everything that used to be process-wide state: the alias
table, the built-in registry and the streams built-ins write to.
Dispatch order for one line:

  1. literal `alias` token          -> alias definition (never expanded)
  2. alias expansion, once
  3. `cd` / `exit`                  -> built-in handler
  4. anything else                  -> external process
"""

from __future__ import annotations

import logging
import sys

from tildeshell.aliases import AliasManager
from tildeshell.config import ShellConfig
from tildeshell.errors import CommandError, ShellError
from tildeshell.parser import Blank, parse_line
from tildeshell.topics import ALL_COMMANDS
from tildeshell.topics.builtins import Builtin
from tildeshell.topics.external import run_external

__all__ = ["Core", "CommandError", "ShellError", "init_core"]

log = logging.getLogger(__name__)


class Core:
    def __init__(self, config: ShellConfig | None = None, stdout=None, stderr=None):
        self.config = config or ShellConfig()
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

        self.commands = {}      # Builtin -> handler(core, *args)
        self.alias_mgr = None   # set in init_core()
        self.external = None    # fallback: handler(core, name, *args)

    def register(self, builtin: Builtin, handler):
        self.commands[builtin] = handler

    def dispatch_internal(self, builtin: Builtin, *args):
        """Run a registered built-in without any alias expansion."""
        handler = self.commands.get(builtin)
        if handler is None:
            raise ShellError(f"Built-in not registered: {builtin.value}")
        return handler(self, *args)

    def execute(self, raw):
        """
        Dispatch one input line.

        Returns text for stdout (or None). Raises CommandError for failed
        commands and SystemExit for `exit`.
        """
        parsed = parse_line(raw)
        if isinstance(parsed, Blank):
            return None

        parts = parsed.tokens
        log.debug("line %r", parts)

        # `alias` keyword wins over any alias named "alias".
        if parts[0] == Builtin.ALIAS.value:
            rest = raw.strip().split(None, 1)
            return self.dispatch_internal(Builtin.ALIAS, rest[1] if len(rest) > 1 else "")

        if self.alias_mgr is not None:
            expanded = self.alias_mgr.expand(parts)
            if expanded != parts:
                log.debug("alias %s -> %r", parts[0], expanded)
                parts = expanded
            if not parts:
                return None

        cmd, *args = parts
        builtin = Builtin.lookup(cmd)
        if builtin is not None and builtin.after_expansion:
            return self.dispatch_internal(builtin, *args)

        if self.external is None:
            raise CommandError(f"failed to execute '{cmd}': no process executor")
        return self.external(self, cmd, *args)


def init_core(config: ShellConfig | None = None, stdout=None, stderr=None, aliases=None) -> Core:
    core = Core(config, stdout=stdout, stderr=stderr)

    for builtin, handler in ALL_COMMANDS.items():
        core.register(builtin, handler)

    core.alias_mgr = AliasManager(aliases)
    core.external = run_external
    return core
