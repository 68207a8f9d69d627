## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# longopt — The parser: a single left-to-right pass over the command line.
#

from typing import Iterable

from .args import Args
from .specs import OptSpecs
from .types import Opt, UnknownOpt, MissingValue, OptFlags, Spelling, ValuePresence, ValueType


OPTION_TERMINATOR = '--'
LONG_PREFIX = '--'
SHORT_PREFIX = '-'


def _next_value(args: list[str], index: int) -> tuple[str | None, int]:
    """Take `args[index]` as a detached value unless it is missing or looks like an option."""
    if index < len(args) and not args[index].startswith(SHORT_PREFIX):
        return args[index], index + 1
    return None, index


def getopt(specs: OptSpecs, args: Iterable[str]) -> Args:
    """Parse `args` (without the program name) against `specs` and return the organized result.

    Malformed input never raises: unknown options, ambiguous long prefixes and
    missing values are all recorded in the returned `Args` for the caller to
    inspect. The function is pure, the same inputs always give an equal result.
    """
    if isinstance(args, str):
        raise TypeError("Expected a sequence of arguments, not a single string.")
    args = [str(a) for a in args]
    limit_exceeded = specs.arg_limit is not None and len(args) > specs.arg_limit
    if limit_exceeded:
        args = args[:specs.arg_limit]

    options: list[Opt] = []
    unknown: list[UnknownOpt] = []
    missing: list[MissingValue] = []
    other: list[str] = []

    def _record(defn, name, spelling, value, value_type):
        if value is None and value_type is ValueType.REQUIRED:
            missing.append(MissingValue(defn.id, name, spelling))
        elif value is None:
            options.append(Opt(defn.id, name, spelling))
        else:
            presence = ValuePresence.EXTRANEOUS if value_type is ValueType.NONE else ValuePresence.PRESENT
            options.append(Opt(defn.id, name, spelling, value, presence))

    index = 0
    while index < len(args):
        token = args[index]
        index += 1

        if token == OPTION_TERMINATOR:
            other.extend(args[index:])
            break

        if token.startswith(LONG_PREFIX):
            name, equals, value = token[len(LONG_PREFIX):].partition('=')
            defn, candidates = specs.match_long(name)
            if defn is None:
                unknown.append(UnknownOpt(name, Spelling.LONG, candidates))
                continue
            if not equals:
                value = None
                if defn.value is ValueType.REQUIRED:
                    value, index = _next_value(args, index)
            _record(defn, defn.long, Spelling.LONG, value, defn.value)
            continue

        if token.startswith(SHORT_PREFIX) and token != SHORT_PREFIX:
            cluster = token[len(SHORT_PREFIX):]
            for pos, char in enumerate(cluster):
                if (defn := specs.match_short(char)) is None:
                    unknown.append(UnknownOpt(char, Spelling.SHORT))
                    continue
                if defn.value is ValueType.NONE:
                    _record(defn, char, Spelling.SHORT, None, defn.value)
                    continue
                # The first value-taking option swallows the rest of the cluster.
                value = cluster[pos + 1:] or None
                if value is None and defn.value is ValueType.REQUIRED:
                    value, index = _next_value(args, index)
                _record(defn, char, Spelling.SHORT, value, defn.value)
                break
            continue

        other.append(token)
        if specs.is_flag(OptFlags.STOP_AT_OPERAND):
            other.extend(args[index:])
            break

    return Args(tuple(options), tuple(unknown), tuple(missing), tuple(other), limit_exceeded)
