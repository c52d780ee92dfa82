"""dtab: delegation tables as validated, immutable values.

Build prefixes from text, compose name trees, pair them into dentries and
render the table in canonical dtab syntax. Invalid labels are rejected at
construction time, so a built dtab always renders to valid text.

Basic usage::

    from dtab import Dtab, Prefix, dentry, leaf, weighted_mul

    rule = Prefix.parse("/iceCreamStore") >> (leaf("/smitten") | "/humphrys")
    str(rule)  # "/iceCreamStore => /smitten | /humphrys;"

    split = 0.7 * leaf("/smitten") & weighted_mul(0.3, "/humphrys")
    table = Dtab((rule,)) + dentry("/split", split)
"""

__version__ = "0.1.0"
__all__ = [
    "ANY",
    "DEFAULT_CONFIG",
    "DEFAULT_WEIGHT",
    "EMPTY",
    "FAIL",
    "NEG",
    "Alt",
    "AnyElem",
    "Dentry",
    "Dtab",
    "DtabConfig",
    "DtabError",
    "Empty",
    "Fail",
    "InvalidCharacter",
    "Label",
    "LabelError",
    "Leaf",
    "NameTree",
    "Neg",
    "NonAscii",
    "Path",
    "Prefix",
    "Union",
    "Weighted",
    "alt",
    "dentry",
    "leaf",
    "make_dentry",
    "make_dtab",
    "parse_prefix",
    "union",
    "validate_label",
    "weighted",
    "weighted_mul",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ANY": "dtab.path.prefix",
    "AnyElem": "dtab.path.prefix",
    "Prefix": "dtab.path.prefix",
    "parse_prefix": "dtab.path.prefix",
    "Label": "dtab.path.label",
    "validate_label": "dtab.path.label",
    "Path": "dtab.path.path",
    "DEFAULT_CONFIG": "dtab.config",
    "DEFAULT_WEIGHT": "dtab.config",
    "DtabConfig": "dtab.config",
    "DtabError": "dtab.errors",
    "InvalidCharacter": "dtab.errors",
    "LabelError": "dtab.errors",
    "NonAscii": "dtab.errors",
    "EMPTY": "dtab.nametree",
    "FAIL": "dtab.nametree",
    "NEG": "dtab.nametree",
    "Alt": "dtab.nametree",
    "Empty": "dtab.nametree",
    "Fail": "dtab.nametree",
    "Leaf": "dtab.nametree",
    "NameTree": "dtab.nametree",
    "Neg": "dtab.nametree",
    "Union": "dtab.nametree",
    "Weighted": "dtab.nametree",
    "alt": "dtab.nametree",
    "leaf": "dtab.nametree",
    "union": "dtab.nametree",
    "weighted": "dtab.nametree",
    "weighted_mul": "dtab.nametree",
    "Dentry": "dtab.table",
    "Dtab": "dtab.table",
    "dentry": "dtab.table",
    "make_dentry": "dtab.table",
    "make_dtab": "dtab.table",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import dtab`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
