"""Delegation rules and delegation tables.

A ``Dentry`` pairs a prefix with the name tree it delegates to; a ``Dtab``
is an ordered sequence of dentries. Order is kept exactly as given:
duplicate and overlapping prefixes are legal here, and which rule wins is
up to the resolver.

Usage::

    dtab = Dtab.from_pairs([
        ("/smitten", "/USA/CA/SF/Harrison/2790"),
        ("/iceCreamStore", leaf("/humphrys") | "/smitten"),
    ])
    print(dtab)
    # /smitten => /USA/CA/SF/Harrison/2790;
    # /iceCreamStore => /humphrys | /smitten;
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from dtab.config import DEFAULT_CONFIG, DtabConfig
from dtab.nametree import NameTree
from dtab.path.prefix import Prefix

logger = logging.getLogger("dtab.table")


@dataclass(frozen=True, slots=True)
class Dentry:
    """One delegation rule: ``prefix => dst;``."""

    prefix: Prefix
    dst: NameTree[str]

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, Prefix):
            msg = f"Dentry prefix must be a Prefix, got {type(self.prefix).__name__}"
            raise TypeError(msg)
        if not isinstance(self.dst, NameTree):
            msg = f"Dentry destination must be a NameTree, got {type(self.dst).__name__}"
            raise TypeError(msg)

    def __str__(self) -> str:
        return f"{self.prefix} => {self.dst};"

    def render(self) -> str:
        """Return the canonical text form."""
        return str(self)


def make_dentry(prefix: Prefix | str, dst: NameTree[str] | str) -> Dentry:
    """Pair *prefix* with *dst*.

    Text prefixes are parsed (and may raise a ``LabelError``); text
    destinations go through ``NameTree.from_text``.
    """
    if isinstance(prefix, str):
        prefix = Prefix.parse(prefix)
    if isinstance(dst, str):
        dst = NameTree.from_text(dst)
    return Dentry(prefix, dst)


def dentry(src: str, dst: NameTree[str] | str) -> Dentry:
    """Shorthand for ``make_dentry`` reading like the dtab syntax::

        dentry("/iceCreamStore", leaf("/smitten") | "/humphrys")
    """
    return make_dentry(src, dst)


@dataclass(frozen=True, slots=True)
class Dtab:
    """An ordered sequence of delegation rules.

    Immutable: ``+`` returns a new table with the other dentries appended.
    """

    dentries: tuple[Dentry, ...] = ()

    def __post_init__(self) -> None:
        dentries = tuple(self.dentries)
        for entry in dentries:
            if not isinstance(entry, Dentry):
                msg = f"Dtab entries must be Dentry, got {type(entry).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "dentries", dentries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Prefix | str, NameTree[str] | str]]) -> "Dtab":
        """Build a table from ``(prefix, dst)`` pairs.

        The first invalid prefix aborts the whole table.
        """
        return cls(tuple(make_dentry(prefix, dst) for prefix, dst in pairs))

    def render(self, config: DtabConfig = DEFAULT_CONFIG) -> str:
        """Return every dentry followed by ``config.line_terminator``."""
        return "".join(f"{entry}{config.line_terminator}" for entry in self.dentries)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.dentries)

    def __iter__(self) -> Iterator[Dentry]:
        return iter(self.dentries)

    @overload
    def __getitem__(self, index: int) -> Dentry: ...

    @overload
    def __getitem__(self, index: slice) -> "Dtab": ...

    def __getitem__(self, index: int | slice) -> "Dentry | Dtab":
        if isinstance(index, slice):
            return Dtab(self.dentries[index])
        return self.dentries[index]

    def __add__(self, other: object) -> "Dtab":
        if isinstance(other, Dtab):
            return Dtab(self.dentries + other.dentries)
        if isinstance(other, Dentry):
            return Dtab((*self.dentries, other))
        return NotImplemented


def make_dtab(dentries: Iterable[Dentry]) -> Dtab:
    """Collect *dentries* into a ``Dtab``, keeping their order."""
    table = Dtab(tuple(dentries))
    logger.debug("Built dtab with %d dentries", len(table))
    return table
