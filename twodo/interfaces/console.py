"""
Console adapters for the input provider and output sink.
"""

import getpass
import sys
from typing import Sequence, TextIO

MASK_CHAR = "*"
BACKSPACES = ("\b", "\x7f")
LINE_ENDS = ("\r", "\n")


def _read_char() -> str:
    if sys.platform == "win32":
        import msvcrt

        return msvcrt.getwch()

    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


class ConsoleInput:
    """Reads lines from stdin; secrets are echoed as a mask."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def read_secret(self, prompt: str = "") -> str:
        if not sys.stdin.isatty():
            return getpass.getpass(prompt)

        self.stream.write(prompt)
        self.stream.flush()

        secret: list[str] = []
        while True:
            ch = _read_char()
            if ch in LINE_ENDS:
                break
            if ch == "\x03":
                raise KeyboardInterrupt
            if ch in BACKSPACES:
                if secret:
                    secret.pop()
                    self.stream.write("\b \b")
            else:
                secret.append(ch)
                self.stream.write(MASK_CHAR)
            self.stream.flush()

        self.stream.write("\n")
        return "".join(secret)


class ConsolePrinter:
    """Prints messages to stdout and errors to stderr."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, message: str) -> None:
        print(message, file=self.out)

    def print_error(self, message: str) -> None:
        print(message, file=self.err)

    def print_menu(self, title: str, options: Sequence[str]) -> None:
        print(f"\n{title}", file=self.out)
        print("-" * len(title), file=self.out)
        for number, option in enumerate(options, start=1):
            print(f"{number}. {option}", file=self.out)
