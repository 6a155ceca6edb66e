"""
Sentinels for the optional arguments of the facade and of Accumulate.

They only ever flow outward, as defaults handed back to a caller
(``Iter.first``, ``Iter.last``, ``Iter.peek_next_value``) or as the
"argument omitted" marker of ``initial``/``default`` parameters. The
combinators never compare source values against them: a source may yield
``Default`` members like any other value.
"""

import enum
from typing import Literal


class Default(enum.Enum):
    """Sentinel values used as defaults."""

    #: returned by the facade's consumers when nothing is left
    Exhausted = enum.auto()
    #: an omitted ``default`` or ``initial`` argument
    NoDefault = enum.auto()


# TODO: Replace with enum.global_enum if ever supported in pyright
Exhausted: Literal[Default.Exhausted] = Default.Exhausted
NoDefault: Literal[Default.NoDefault] = Default.NoDefault
