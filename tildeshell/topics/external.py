# tildeshell/topics/external.py
#
# Process executor for everything that is not a built-in.
#
# The child shares the shell's stdout/stderr file descriptors (no capture),
# reads stdin from the null device, and is waited on with no timeout.
# Only pass/fail is reported; the exit status is named in the error text.

from __future__ import annotations

import logging
import signal
import subprocess

from tildeshell.errors import CommandError

log = logging.getLogger(__name__)


def _describe_status(returncode: int) -> str:
    if returncode < 0:
        try:
            return f"signal: {signal.Signals(-returncode).name}"
        except ValueError:
            return f"signal: {-returncode}"
    return f"exit status {returncode}"


def run_external(core, name, *args):
    argv = [name, *args]

    # Anything we printed must land before the child's output.
    core.stdout.flush()
    core.stderr.flush()

    log.debug("spawn %r", argv)
    try:
        completed = subprocess.run(argv, stdin=subprocess.DEVNULL)
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL byte in argv
        raise CommandError(f"failed to execute '{name}': {getattr(e, 'strerror', None) or e}") from e

    log.debug("%s exited with %s", name, completed.returncode)
    if completed.returncode != 0:
        raise CommandError(f"failed to execute '{name}': {_describe_status(completed.returncode)}")
    return None
