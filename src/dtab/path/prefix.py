"""Dentry prefixes: the left-hand match pattern of a delegation rule.

A prefix is a sequence of elements, each either a label or the ``*``
wildcard. Prefixes are parsed from text once and only combined into new
prefixes afterwards.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias, overload

from dtab.errors import LabelError
from dtab.path.label import Label

if TYPE_CHECKING:
    from dtab.table import Dentry

logger = logging.getLogger("dtab.path")


@dataclass(frozen=True, slots=True)
class AnyElem:
    """The wildcard element ``*``. Matches any single label."""

    def __str__(self) -> str:
        return "*"


ANY = AnyElem()

Elem: TypeAlias = Label | AnyElem


def split_path(text: str) -> list[str]:
    """Split path text on ``/`` and drop empty segments.

    Examples::

        "/foo/bar"  -> ["foo", "bar"]
        "//foo//"   -> ["foo"]
        "/"         -> []
    """
    return [part for part in text.split("/") if part]


def parse_elem(text: str) -> Elem:
    """Parse one segment: exactly ``*`` is the wildcard, anything else a label."""
    if text == "*":
        return ANY
    return Label(text)


@dataclass(frozen=True, slots=True)
class Prefix:
    """An ordered, possibly empty sequence of prefix elements.

    Usage::

        prefix = Prefix.parse("/http/1.1/*/web")
        str(prefix)                  # "/http/1.1/*/web"
        str(prefix / "v2")           # "/http/1.1/*/web/v2"
        str(Prefix.parse("/"))       # ""

    The empty prefix renders as the empty string, not ``"/"``.
    """

    elems: tuple[Elem, ...] = ()

    def __post_init__(self) -> None:
        elems = tuple(self.elems)
        for elem in elems:
            if not isinstance(elem, (Label, AnyElem)):
                msg = f"Prefix elements must be Label or AnyElem, got {type(elem).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "elems", elems)

    @classmethod
    def parse(cls, text: str) -> "Prefix":
        """Parse prefix text, failing on the first invalid segment.

        Raises ``NonAscii`` or ``InvalidCharacter``; no partial prefix is
        ever returned.
        """
        try:
            elems = tuple(parse_elem(part) for part in split_path(text))
        except LabelError as exc:
            logger.debug("Rejected prefix %r: %s", text, exc)
            raise
        return cls(elems)

    def __str__(self) -> str:
        return "".join(f"/{elem}" for elem in self.elems)

    def render(self) -> str:
        """Return the canonical text form."""
        return str(self)

    def __len__(self) -> int:
        return len(self.elems)

    def __iter__(self) -> Iterator[Elem]:
        return iter(self.elems)

    @overload
    def __getitem__(self, index: int) -> Elem: ...

    @overload
    def __getitem__(self, index: slice) -> "Prefix": ...

    def __getitem__(self, index: int | slice) -> "Elem | Prefix":
        if isinstance(index, slice):
            return Prefix(self.elems[index])
        return self.elems[index]

    @property
    def is_empty(self) -> bool:
        return not self.elems

    @property
    def has_wildcard(self) -> bool:
        return any(isinstance(elem, AnyElem) for elem in self.elems)

    def __truediv__(self, other: object) -> "Prefix":
        """Append a segment, an element, or another prefix.

        Text is parsed as prefix text, so ``prefix / "a/b"`` appends two
        elements and ``prefix / "*"`` appends the wildcard.
        """
        if isinstance(other, Prefix):
            return Prefix(self.elems + other.elems)
        if isinstance(other, (Label, AnyElem)):
            return Prefix((*self.elems, other))
        if isinstance(other, str):
            return Prefix(self.elems + Prefix.parse(other).elems)
        return NotImplemented

    def __rshift__(self, dst: Any) -> "Dentry":
        """Build a dentry: ``prefix >> tree``."""
        from dtab.table import make_dentry

        return make_dentry(self, dst)


def parse_prefix(text: str) -> Prefix:
    """Parse *text* into a ``Prefix`` (see ``Prefix.parse``)."""
    return Prefix.parse(text)
