## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterator
from dataclasses import dataclass

from .types import Opt, UnknownOpt, MissingValue, ValuePresence


@dataclass(frozen=True)
class Args:
    """Parsed command line in organized form, created once by `getopt()`.

    Every sequence keeps the order in which its entries appeared on the
    command line. `options` holds recognized options, `unknown` the option-like
    text that matched nothing, `missing` the options whose required value was
    not available, and `other` the positional (non-option) arguments.
    """

    options: tuple[Opt, ...] = ()
    unknown: tuple[UnknownOpt, ...] = ()
    missing: tuple[MissingValue, ...] = ()
    other: tuple[str, ...] = ()
    arg_limit_exceeded: bool = False

    def iter_options(self, id: str | None = None, reverse: bool = False) -> Iterator[Opt]:
        items = reversed(self.options) if reverse else self.options
        return (opt for opt in items if id is None or opt.id == id)

    def options_all(self, id: str | None = None) -> list[Opt]:
        return list(self.iter_options(id))

    def options_first(self, id: str) -> Opt | None:
        return next(self.iter_options(id), None)

    def options_last(self, id: str) -> Opt | None:
        return next(self.iter_options(id, reverse=True), None)

    def has(self, id: str) -> bool:
        """True if `id` occurred at all, including options whose required value was missing."""
        return self.options_first(id) is not None or any(m.id == id for m in self.missing)

    def __contains__(self, id: str) -> bool:
        return self.has(id)

    # Values ──────────────────────────────────────────────────────────────────────────────────
    def options_value_all(self, id: str) -> list[str]:
        return [opt.value for opt in self.iter_options(id) if opt.value is not None]

    def options_value_first(self, id: str) -> str | None:
        return next((opt.value for opt in self.iter_options(id) if opt.value is not None), None)

    def options_value_last(self, id: str) -> str | None:
        return next((opt.value for opt in self.iter_options(id, reverse=True) if opt.value is not None), None)

    # Problems ────────────────────────────────────────────────────────────────────────────────
    def extraneous(self) -> list[Opt]:
        return [opt for opt in self.options if opt.presence is ValuePresence.EXTRANEOUS]

    @property
    def ok(self) -> bool:
        return not self.unknown and not self.missing and not self.extraneous()

    def to_dict(self) -> dict:
        return {
            'options': [{'id': o.id, 'name': o.name, 'spelling': o.spelling.value,
                         'value': o.value, 'presence': o.presence.value} for o in self.options],
            'unknown': [{'name': u.name, 'spelling': u.spelling.value,
                         'candidates': list(u.candidates)} for u in self.unknown],
            'missing': [{'id': m.id, 'name': m.name, 'spelling': m.spelling.value} for m in self.missing],
            'other': list(self.other),
            'arg_limit_exceeded': self.arg_limit_exceeded,
        }
