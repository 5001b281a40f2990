"""Line-based console used by the storefront.

Each read consumes one fresh line and returns its first whitespace-delimited
token; the rest of the line is dropped. Blank lines are skipped.
"""

import sys
from typing import Optional, TextIO


class Console:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def writeln(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_token(self) -> Optional[str]:
        """Next token, or None at end of input."""
        while True:
            line = self.stdin.readline()
            if not line:
                return None
            parts = line.split()
            if parts:
                return parts[0]
