# tildeshell/prompt.py
#
# Prompt renderer.
#
#   ESC[36m<cwd with home shown as ~>
#   ESC[35m❯ESC[0m <input>

from __future__ import annotations

import logging
import os
import re
import sys
from pathlib import Path
from typing import Optional, TextIO

from tildeshell.config import ShellConfig

CYAN = "\033[36m"
MAGENTA = "\033[35m"
RESET = "\033[0m"
MARKER = "❯"
ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")

log = logging.getLogger(__name__)


def display_path(cwd: str, home: Optional[str]) -> str:
    """Replace a leading `home` in `cwd` with `~`; anything else is returned as-is."""
    if not home:
        return cwd
    if cwd == home:
        return "~"
    base = home.rstrip(os.sep)
    if cwd.startswith(base + os.sep):
        return "~" + cwd[len(base):]
    return cwd


def home_dir() -> str:
    # Raises RuntimeError/KeyError when the current user cannot be resolved.
    return str(Path.home())


def current_dir(placeholder: str) -> str:
    try:
        return os.getcwd()
    except OSError as e:
        log.debug("getcwd failed: %s", e)
        return placeholder


def format_prompt(path: str, color: bool = True) -> str:
    if not color:
        return f"{path}\n{MARKER} "
    return f"{CYAN}{path}\n{MAGENTA}{MARKER}{RESET} "


def render_prompt(config: ShellConfig, stderr: TextIO = None) -> str:
    """
    Build the prompt for the current directory.

    The reader writes it, so readline knows its width when editing.

    Lookup failures degrade: the placeholder path for an unknown cwd,
    no `~` abbreviation for an unknown home directory.
    """
    stderr = stderr or sys.stderr

    cwd = current_dir(config.placeholder_cwd)
    try:
        home = home_dir()
    except (RuntimeError, KeyError) as e:
        print(f"Error getting current user: {e}", file=stderr)
        home = None

    return format_prompt(display_path(cwd, home), color=config.color)


def readline_prompt(prompt: str) -> str:
    # \001 .. \002 mark zero-width escapes so readline measures the prompt right.
    return ANSI_ESCAPE.sub(lambda m: f"\001{m.group(0)}\002", prompt)
