## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import ValueType, Spelling, ValuePresence, OptFlags, OptDef, Opt, UnknownOpt, MissingValue
from .errors import *
from .specs import OptSpecs, LongMatch
from .args import Args
from .getopt import getopt
from .notation import parse_notation, format_notation


def specs(notation: str = "", flags: OptFlags = OptFlags(0), arg_limit: int | None = None) -> OptSpecs:
    """Shorthand for building a table, from notation or empty for fluent `.option()` calls."""
    return parse_notation(notation, flags=flags, arg_limit=arg_limit)
