## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable, NamedTuple

from .types import OptDef, OptFlags, ValueType
from .errors import OptSpecError


INVALID_SHORT_NAMES = ' -'
INVALID_LONG_CHARS = ' ='


class LongMatch(NamedTuple):
    defn: OptDef | None
    candidates: tuple[str, ...] = ()


def _validate(defn: OptDef) -> None:
    def fail(message, name=None): raise OptSpecError(message, opt_id=defn.id, opt_name=name)

    if not isinstance(defn, OptDef):
        raise OptSpecError(f"Expected an `OptDef`, got {type(defn).__name__}.")
    if not defn.id:
        fail("Option's `id` must be at least one character long.")
    if defn.short is None and defn.long is None:
        fail(f"Option `{defn.id}` needs a short or a long spelling.")
    if not isinstance(defn.value, ValueType):
        fail(f"Option `{defn.id}` has invalid value type {defn.value!r}.")
    if (s := defn.short) is not None:
        if len(s) != 1 or s in INVALID_SHORT_NAMES:
            fail(f"Not a valid short option name `{s}` for `{defn.id}`.", s)
    if (l := defn.long) is not None:
        if len(l) < 2 or l.startswith('-') or any(c in l for c in INVALID_LONG_CHARS):
            fail(f"Not a valid long option name `{l}` for `{defn.id}`.", l)


class OptSpecs:
    """Ordered, read-only table of option definitions handed to the parser.

    Tables never change after construction: `option`, `flag` and `limit` each
    return a new table with the change applied, so one table can be shared by
    any number of parses.
    """

    __slots__ = ('_defs', '_flags', '_arg_limit')

    def __init__(self, defs: Iterable[OptDef] = (), flags: OptFlags = OptFlags(0), arg_limit: int | None = None):
        defs = tuple(defs)
        for d in defs:
            _validate(d)
        if arg_limit is not None and arg_limit < 0:
            raise OptSpecError(f"Argument limit must not be negative, got {arg_limit}.")
        self._defs = defs
        self._flags = OptFlags(flags)
        self._arg_limit = arg_limit

    @property
    def defs(self) -> tuple[OptDef, ...]:
        return self._defs

    @property
    def flags(self) -> OptFlags:
        return self._flags

    @property
    def arg_limit(self) -> int | None:
        return self._arg_limit

    def __len__(self):
        return len(self._defs)

    def __iter__(self):
        return iter(self._defs)

    def __eq__(self, other):
        return isinstance(other, OptSpecs) and (self._defs, self._flags, self._arg_limit) == (other._defs, other._flags, other._arg_limit)

    def __hash__(self):
        return hash((self._defs, self._flags, self._arg_limit))

    def __repr__(self):
        return f"OptSpecs({list(self._defs)!r}, flags={self._flags!r}, arg_limit={self._arg_limit!r})"

    # Building ────────────────────────────────────────────────────────────────────────────────
    def option(self, id: str, name: str, value: ValueType = ValueType.NONE) -> "OptSpecs":
        """Return a new table with `name` added; one character is a short spelling, more is long."""
        defn = OptDef(id, short=name, value=value) if len(name) == 1 else OptDef(id, long=name or None, value=value)
        return OptSpecs((*self._defs, defn), self._flags, self._arg_limit)

    def flag(self, flag: OptFlags) -> "OptSpecs":
        return OptSpecs(self._defs, self._flags | flag, self._arg_limit)

    def limit(self, arg_limit: int | None) -> "OptSpecs":
        return OptSpecs(self._defs, self._flags, arg_limit)

    def is_flag(self, flag: OptFlags) -> bool:
        return flag in self._flags

    # Lookup ──────────────────────────────────────────────────────────────────────────────────
    def match_short(self, char: str) -> OptDef | None:
        return next((d for d in self._defs if d.short == char), None)

    def match_long(self, name: str) -> LongMatch:
        if (exact := next((d for d in self._defs if d.long == name), None)) is not None:
            return LongMatch(exact)
        if not name or self.is_flag(OptFlags.EXACT_LONG_NAMES):
            return LongMatch(None)

        # Duplicated spellings count once, the first definition in table order wins.
        names = list(dict.fromkeys(d.long for d in self._defs if d.long is not None and d.long.startswith(name)))
        if len(names) == 1:
            return LongMatch(next(d for d in self._defs if d.long == names[0]))
        return LongMatch(None, tuple(names))

    def ids(self) -> list[str]:
        return list(dict.fromkeys(d.id for d in self._defs))

    # Parsing ─────────────────────────────────────────────────────────────────────────────────
    def getopt(self, args: Iterable[str]):
        from .getopt import getopt
        return getopt(self, args)
