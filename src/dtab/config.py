"""Rendering and construction defaults.

DtabConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass

DEFAULT_WEIGHT = 0.5


@dataclass(frozen=True, slots=True)
class DtabConfig:
    """Defaults used when building unions and rendering dtabs.

    The defaults produce the canonical text form. Override what you need::

        config = DtabConfig(line_terminator="\\r\\n")
        text = dtab.render(config)
    """

    # Weight given to each side of a union built from un-weighted operands
    default_weight: float = DEFAULT_WEIGHT

    # Written after every dentry when a dtab is rendered
    line_terminator: str = "\n"


DEFAULT_CONFIG = DtabConfig()
