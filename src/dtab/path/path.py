"""Concrete paths.

A ``Path`` is a name: a sequence of labels with no wildcards. Paths are
the natural leaf type for name trees that should carry validated names
instead of raw text.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from dtab.errors import LabelError
from dtab.path.label import Label
from dtab.path.prefix import Prefix, split_path

logger = logging.getLogger("dtab.path")


@dataclass(frozen=True, slots=True)
class Path:
    """An ordered sequence of labels.

    Usage::

        path = Path.parse("/usa/ca/sf")
        str(path / "harrison" / "2790")   # "/usa/ca/sf/harrison/2790"
        Path.of("a", "b") == Path.parse("/a/b")
    """

    labels: tuple[Label, ...] = ()

    def __post_init__(self) -> None:
        labels = tuple(self.labels)
        for label in labels:
            if not isinstance(label, Label):
                msg = f"Path elements must be Label, got {type(label).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "labels", labels)

    @classmethod
    def parse(cls, text: str) -> "Path":
        """Parse path text; every non-empty segment must be a label.

        The wildcard is not a label, so ``"/a/*"`` raises
        ``InvalidCharacter``.
        """
        try:
            labels = tuple(Label(part) for part in split_path(text))
        except LabelError as exc:
            logger.debug("Rejected path %r: %s", text, exc)
            raise
        return cls(labels)

    @classmethod
    def of(cls, *segments: str | Label) -> "Path":
        """Build a path from individual segments, validating each one."""
        return cls(tuple(seg if isinstance(seg, Label) else Label(seg) for seg in segments))

    def __str__(self) -> str:
        return "".join(f"/{label}" for label in self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[Label]:
        return iter(self.labels)

    def __truediv__(self, other: object) -> "Path":
        if isinstance(other, Path):
            return Path(self.labels + other.labels)
        if isinstance(other, Label):
            return Path((*self.labels, other))
        if isinstance(other, str):
            return Path((*self.labels, Label(other)))
        return NotImplemented

    def to_prefix(self) -> Prefix:
        """Return the prefix that matches exactly this path."""
        return Prefix(self.labels)
