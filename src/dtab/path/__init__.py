"""Path grammar: labels, prefixes and concrete paths.

Every text segment goes through the label grammar exactly once, at
construction time. Nothing in this package can hold an invalid segment.
"""

from dtab.path.label import LABEL_CHARS, Label, check_label, validate_label
from dtab.path.path import Path
from dtab.path.prefix import ANY, AnyElem, Elem, Prefix, parse_elem, parse_prefix, split_path

__all__ = [
    "ANY",
    "LABEL_CHARS",
    "AnyElem",
    "Elem",
    "Label",
    "Path",
    "Prefix",
    "check_label",
    "parse_elem",
    "parse_prefix",
    "split_path",
    "validate_label",
]
