"""Name trees: composite destination expressions.

A name tree describes where a name delegates to. Leaves are destinations;
``Alt`` tries its left side and falls through to the right; ``Union``
combines two weighted sides; ``Neg``, ``Fail`` and ``Empty`` are the
terminal outcomes ``~``, ``!`` and ``$``.

Trees are built by composition, either with the named builders::

    tree = alt(alt(leaf("/smitten"), "/humphrys"), "/birite")
    str(tree)   # "/smitten | /humphrys | /birite"

or with operators::

    tree = leaf("/smitten") | "/humphrys" | "/birite"
    split = 0.7 * leaf("/smitten") & weighted_mul(0.3, "/humphrys")
    str(split)  # "0.7 * /smitten & 0.3 * /humphrys"

Un-weighted union operands get ``DEFAULT_WEIGHT`` (0.5)::

    str(leaf("/smitten") & "/humphrys")  # "0.5 * /smitten & 0.5 * /humphrys"

Text is converted with ``NameTree.from_text``: ``"~"``, ``"!"`` and ``"$"``
become sentinels, anything else a ``Leaf``. Non-text leaf values are
always wrapped as-is.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Generic, TypeVar

from dtab.config import DEFAULT_CONFIG, DEFAULT_WEIGHT, DtabConfig

T = TypeVar("T")

__all__ = [
    "DEFAULT_WEIGHT",
    "EMPTY",
    "FAIL",
    "NEG",
    "Alt",
    "Empty",
    "Fail",
    "Leaf",
    "NameTree",
    "Neg",
    "Union",
    "Weighted",
    "alt",
    "format_weight",
    "leaf",
    "union",
    "weighted",
    "weighted_mul",
]


def format_weight(weight: float) -> str:
    """Format a weight in plain decimal notation.

    ``0.5`` -> ``"0.5"``, ``1.0`` -> ``"1"``, ``1e-07`` -> ``"0.0000001"``.
    Non-finite weights print as ``NaN``, ``inf`` and ``-inf``.
    """
    if math.isnan(weight):
        return "NaN"
    if math.isinf(weight):
        return "inf" if weight > 0 else "-inf"
    text = format(Decimal(repr(weight)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class NameTree(Generic[T]):
    """Base class for all name tree nodes.

    Nodes are frozen dataclasses; every child has exactly one parent and
    combining trees always builds new nodes.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "NameTree[T]":
        if cls is NameTree:
            msg = "NameTree is abstract; build Leaf, Alt, Union or a sentinel instead"
            raise TypeError(msg)
        return object.__new__(cls)

    @staticmethod
    def from_text(text: str) -> "NameTree[str]":
        """Convert text to a tree, mapping ``~``, ``!`` and ``$`` to sentinels."""
        sentinel = _SENTINELS.get(text)
        if sentinel is not None:
            return sentinel
        return Leaf(text)

    def render(self) -> str:
        """Return the canonical text form."""
        return _render(self)

    def __str__(self) -> str:
        return self.render()

    # -- builders ---------------------------------------------------------

    def weighted(self, weight: float) -> "Weighted[T]":
        return Weighted(weight, self)

    def alt(self, other: "NameTree[T] | str") -> "Alt[T]":
        return alt(self, other)

    def union(self, other: "NameTree[T] | Weighted[T] | str") -> "Union[T]":
        return union(self, other)

    # -- operators --------------------------------------------------------

    def __or__(self, other: object) -> "Alt[T]":
        if not isinstance(other, (NameTree, str)):
            return NotImplemented
        return alt(self, other)

    def __ror__(self, other: object) -> "Alt[T]":
        if not isinstance(other, str):
            return NotImplemented
        return alt(other, self)

    def __and__(self, other: object) -> "Union[T]":
        if not isinstance(other, (NameTree, Weighted, str)):
            return NotImplemented
        return union(self, other)

    def __rand__(self, other: object) -> "Union[T]":
        if not isinstance(other, str):
            return NotImplemented
        return union(other, self)

    def __rmul__(self, weight: object) -> "Weighted[T]":
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            return NotImplemented
        return Weighted(weight, self)


@dataclass(frozen=True, slots=True)
class Leaf(NameTree[T]):
    """A named destination. The only node that carries caller data."""

    value: T


@dataclass(frozen=True, slots=True, eq=False)
class Alt(NameTree[T]):
    """Ordered alternation: use ``left`` unless it yields nothing, then ``right``.

    Chains associate to the left: ``a | b | c`` is ``Alt(Alt(a, b), c)``.
    """

    left: NameTree[T]
    right: NameTree[T]

    def __post_init__(self) -> None:
        _require_tree(self.left)
        _require_tree(self.right)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _tree_equal(self, other)

    def __hash__(self) -> int:
        return _tree_hash(self)


@dataclass(frozen=True, slots=True, eq=False)
class Union(NameTree[T]):
    """Weighted combination of exactly two sub-trees.

    Wider unions are nested unions; resolvers flatten them if needed.
    """

    left: "Weighted[T]"
    right: "Weighted[T]"

    def __post_init__(self) -> None:
        for side in (self.left, self.right):
            if not isinstance(side, Weighted):
                msg = f"Union operands must be Weighted, got {type(side).__name__}"
                raise TypeError(msg)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _tree_equal(self, other)

    def __hash__(self) -> int:
        return _tree_hash(self)


@dataclass(frozen=True, slots=True)
class Neg(NameTree[Any]):
    """Negative result: the name is known not to exist here."""

    token = "~"


@dataclass(frozen=True, slots=True)
class Fail(NameTree[Any]):
    """Failure result: resolution stops and fails."""

    token = "!"


@dataclass(frozen=True, slots=True)
class Empty(NameTree[Any]):
    """Empty result: the name resolves to no destinations."""

    token = "$"


NEG = Neg()
FAIL = Fail()
EMPTY = Empty()

_SENTINELS: dict[str, NameTree[Any]] = {"~": NEG, "!": FAIL, "$": EMPTY}


@dataclass(frozen=True, slots=True, eq=False)
class Weighted(Generic[T]):
    """A tree paired with its weight in a union.

    The weight is not range-checked; zero, negative and values above one
    are kept and rendered verbatim.
    """

    weight: float
    tree: NameTree[T]

    def __post_init__(self) -> None:
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            msg = f"Weight must be a number, got {type(self.weight).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "weight", float(self.weight))
        _require_tree(self.tree)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _tree_equal(self, other)

    def __hash__(self) -> int:
        return _tree_hash(self)

    def __str__(self) -> str:
        return _render(self)

    def __and__(self, other: object) -> Union[T]:
        if not isinstance(other, (NameTree, Weighted, str)):
            return NotImplemented
        return union(self, other)

    def __rand__(self, other: object) -> Union[T]:
        if not isinstance(other, str):
            return NotImplemented
        return union(other, self)


def _render(root: "NameTree[Any] | Weighted[Any]") -> str:
    # Iterative: left-nested chains can be arbitrarily deep
    out: list[str] = []
    stack: list[Any] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            out.append(node)
        elif isinstance(node, Alt):
            stack.extend((node.right, " | ", node.left))
        elif isinstance(node, Union):
            stack.extend((node.right, " & ", node.left))
        elif isinstance(node, Weighted):
            stack.extend((node.tree, f"{format_weight(node.weight)} * "))
        elif isinstance(node, Leaf):
            out.append(str(node.value))
        elif isinstance(node, (Neg, Fail, Empty)):
            out.append(node.token)
        else:
            msg = f"Cannot render {type(node).__name__}"
            raise TypeError(msg)
    return "".join(out)


def _tree_equal(a: Any, b: Any) -> bool:
    # Iterative, like _render: dataclass equality would recurse per level
    stack: list[tuple[Any, Any]] = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is y:
            continue
        if type(x) is not type(y):
            return False
        if isinstance(x, (Alt, Union)):
            stack.append((x.right, y.right))
            stack.append((x.left, y.left))
        elif isinstance(x, Weighted):
            if x.weight != y.weight:
                return False
            stack.append((x.tree, y.tree))
        elif x != y:
            return False
    return True


def _tree_hash(root: Any) -> int:
    # Hash of the pre-order node sequence; agrees with _tree_equal
    parts: list[Any] = []
    stack: list[Any] = [root]
    while stack:
        node = stack.pop()
        parts.append(type(node))
        if isinstance(node, (Alt, Union)):
            stack.extend((node.right, node.left))
        elif isinstance(node, Weighted):
            parts.append(node.weight)
            stack.append(node.tree)
        else:
            parts.append(hash(node))
    return hash(tuple(parts))


def _require_tree(value: object) -> None:
    if not isinstance(value, NameTree):
        msg = f"Expected a NameTree, got {type(value).__name__}"
        raise TypeError(msg)


def _coerce(value: "NameTree[T] | str") -> NameTree[Any]:
    if isinstance(value, NameTree):
        return value
    if isinstance(value, str):
        return NameTree.from_text(value)
    msg = f"Expected a NameTree or text, got {type(value).__name__}"
    raise TypeError(msg)


def leaf(value: T) -> NameTree[T]:
    """Wrap *value* as a tree; text goes through ``NameTree.from_text``."""
    if isinstance(value, str):
        return NameTree.from_text(value)  # type: ignore[return-value]
    return Leaf(value)


def weighted(tree: NameTree[T] | str, weight: float) -> Weighted[T]:
    """Pair *tree* with an explicit *weight*."""
    return Weighted(weight, _coerce(tree))


def weighted_mul(weight: float, tree: NameTree[T] | str) -> Weighted[T]:
    """Weight-first form of ``weighted``: ``weighted_mul(0.7, "/smitten")``."""
    return Weighted(weight, _coerce(tree))


def alt(left: NameTree[T] | str, right: NameTree[T] | str) -> Alt[T]:
    """Build ``Alt(left, right)``."""
    return Alt(_coerce(left), _coerce(right))


def union(
    left: NameTree[T] | Weighted[T] | str,
    right: NameTree[T] | Weighted[T] | str,
    config: DtabConfig = DEFAULT_CONFIG,
) -> Union[T]:
    """Build ``Union(left, right)``.

    ``Weighted`` operands keep their weight; anything else is weighted
    with ``config.default_weight``.
    """
    return Union(_weigh(left, config.default_weight), _weigh(right, config.default_weight))


def _weigh(value: "NameTree[T] | Weighted[T] | str", default: float) -> Weighted[Any]:
    if isinstance(value, Weighted):
        return value
    return Weighted(default, _coerce(value))
