"""
Capabilities the flows consume from the embedding application.
"""

from typing import Protocol, Sequence


class InputProvider(Protocol):
    """Source of user input."""

    def read_line(self, prompt: str = "") -> str:
        """Read one line of text."""
        ...

    def read_secret(self, prompt: str = "") -> str:
        """Read one line without echoing it."""
        ...


class OutputSink(Protocol):
    """Destination for messages shown to the user."""

    def print(self, message: str) -> None:
        ...

    def print_error(self, message: str) -> None:
        ...

    def print_menu(self, title: str, options: Sequence[str]) -> None:
        ...
