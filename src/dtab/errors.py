"""dtab exception hierarchy.

Shared across the path grammar and the dtab layer so every module
raises and catches the same types. Exceptions are plain (not frozen)
dataclasses: the interpreter and ``contextlib`` assign ``__traceback__``
on them while they propagate.
"""

from dataclasses import dataclass


class DtabError(Exception):
    """Base for all dtab-specific errors."""


class LabelError(DtabError):
    """A path segment does not match the label grammar.

    Raised by label validation and propagated unchanged by the prefix and
    path parsers. The first offending character always wins.
    """


@dataclass(slots=True, eq=False)
class NonAscii(LabelError):  # noqa: N818
    """A character outside the ASCII range was found in a segment."""

    char: str
    position: int

    def __str__(self) -> str:
        return f"Non-ASCII character {self.char!r} at position {self.position}."


@dataclass(slots=True, eq=False)
class InvalidCharacter(LabelError):  # noqa: N818
    """An ASCII character outside the label character set was found.

    Only reported once the segment is known to be pure ASCII.
    """

    char: str
    position: int
    segment: str

    def __str__(self) -> str:
        return f"Invalid character {self.char!r} at position {self.position} in {self.segment!r}."
