# tildeshell/errors.py

from __future__ import annotations


class ShellError(RuntimeError):
    pass


class CommandError(ShellError):
    """A built-in or external command failed; the REPL reports it and keeps going."""
