"""
console.py - Terminal input and output for the game session

The session only talks to the terminal through this narrow interface, so it
can be driven by a scripted console in tests.
"""

import sys
from typing import Optional, TextIO

CLEAR_SCREEN = "\033[H\033[2J\033[3J"


class Console:
    """Line-based terminal I/O."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 clear: bool = True):
        """
        Initialize the console.

        Args:
            stdin: Input stream (sys.stdin if None)
            stdout: Output stream (sys.stdout if None)
            clear: Whether clear_screen() emits the ANSI clear sequence
        """
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.clear = clear

    def prompt_line(self, message: str) -> str:
        """
        Write a prompt and read one line.

        Raises:
            EOFError: When the input stream is exhausted
        """
        self.stdout.write(message)
        self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            raise EOFError("Input closed")
        return line.rstrip("\r\n")

    def render(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def clear_screen(self) -> None:
        if self.clear:
            self.render(CLEAR_SCREEN)
