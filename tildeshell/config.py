# tildeshell/config.py
#
# Session tunables. In-code defaults only: the shell reads no config files,
# flags or environment overrides. Tests and callers build their own instance.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ShellConfig:
    # Shown when the working directory cannot be determined.
    placeholder_cwd: str = "/unknown"

    # ANSI colors in the prompt.
    color: bool = True

    # False: report the read error and keep looping at end of input.
    exit_on_eof: bool = False

    # File handler target; None means no log output at all.
    log_file: Optional[str] = None
    log_level: str = "WARNING"
