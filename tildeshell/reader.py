# tildeshell/reader.py
#
# Line reader. One call == write the prompt, then one newline-terminated
# line, or EOFError.

from __future__ import annotations

import sys
from typing import Optional, TextIO

from tildeshell.prompt import readline_prompt


class LineReader:
    def __init__(self, stream: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        # stream None -> terminal via input(), so readline owns prompt + editing.
        self.stream = stream
        self.stdout = stdout

    def read(self, prompt: str = "") -> str:
        if self.stream is None:
            return input(readline_prompt(prompt)) + "\n"

        out = self.stdout or sys.stdout
        out.write(prompt)
        out.flush()

        line = self.stream.readline()
        # A fragment without "\n" only happens at end of input; it is dropped.
        if not line.endswith("\n"):
            raise EOFError("EOF")
        return line
