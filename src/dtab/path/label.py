"""Label grammar for path segments.

A label is the text between two ``/`` delimiters. Allowed characters are
``[0-9A-Za-z:.#$%_-]``; any other byte must be written as a lowercase
``\\xHH`` escape. Labels are validated once, when constructed, and
stored verbatim (no case folding, escapes are not decoded).
"""

import re
from dataclasses import dataclass

from dtab.errors import InvalidCharacter, NonAscii

LABEL_CHARS = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz:.#$%_-")

# One grammar unit: an escaped byte or a single allowed character
_LABEL_UNIT = re.compile(r"\\x[0-9a-f]{2}|[0-9A-Za-z:.#$%_-]")
_LABEL = re.compile(r"(?:\\x[0-9a-f]{2}|[0-9A-Za-z:.#$%_-])+")


def check_label(segment: str) -> None:
    """Raise a ``LabelError`` if *segment* is not a valid label.

    Raises ``NonAscii`` for the first non-ASCII character, then (only for
    pure ASCII input) ``InvalidCharacter`` for the first character that
    does not start a grammar unit. Positions are character indexes into
    *segment*. Raises ``ValueError`` for the empty string.
    """
    if not segment:
        msg = "Label must not be empty."
        raise ValueError(msg)
    if _LABEL.fullmatch(segment):
        return

    for i, ch in enumerate(segment):
        if not ch.isascii():
            raise NonAscii(char=ch, position=i)

    pos = 0
    while pos < len(segment):
        unit = _LABEL_UNIT.match(segment, pos)
        if unit is None:
            raise InvalidCharacter(char=segment[pos], position=pos, segment=segment)
        pos = unit.end()


@dataclass(frozen=True, slots=True)
class Label:
    """A validated path segment.

    Constructing a ``Label`` runs the grammar check, so an invalid label
    cannot exist::

        Label("iceCreamStore")   # ok
        Label("ice cream")       # raises InvalidCharacter at position 3
    """

    text: str

    def __post_init__(self) -> None:
        check_label(self.text)

    def __str__(self) -> str:
        return self.text

    @classmethod
    def validate(cls, segment: str) -> "Label":
        """Validate *segment* and wrap it unchanged."""
        return cls(segment)


def validate_label(segment: str) -> Label:
    """Return a ``Label`` for *segment* or raise a ``LabelError``."""
    return Label(segment)
