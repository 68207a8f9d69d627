## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from enum import Enum, Flag, auto
from dataclasses import dataclass


class ValueType(Enum):
    NONE = 'none'
    OPTIONAL = 'optional'
    REQUIRED = 'required'


class Spelling(Enum):
    SHORT = 'short'
    LONG = 'long'

    @property
    def prefix(self) -> str:
        return '-' if self is Spelling.SHORT else '--'


class ValuePresence(Enum):
    ABSENT = 'absent'           # No value given, or optional value omitted.
    PRESENT = 'present'         # Value given to an option that accepts one.
    EXTRANEOUS = 'extraneous'   # `--name=value` for an option that takes none.


class OptFlags(Flag):
    """Switches that change how the parser treats the command line."""
    STOP_AT_OPERAND = auto()
    EXACT_LONG_NAMES = auto()


@dataclass(frozen=True)
class OptDef:
    id: str
    short: str | None = None
    long: str | None = None
    value: ValueType = ValueType.NONE


@dataclass(frozen=True)
class Opt:
    """One recognized option occurrence, in command-line order."""
    id: str
    name: str
    spelling: Spelling
    value: str | None = None
    presence: ValuePresence = ValuePresence.ABSENT

    @property
    def text(self) -> str:
        return self.spelling.prefix + self.name

    @property
    def extraneous(self) -> bool:
        return self.presence is ValuePresence.EXTRANEOUS


@dataclass(frozen=True)
class UnknownOpt:
    """Option-like text that matched nothing; `candidates` lists the long names an ambiguous prefix hit."""
    name: str
    spelling: Spelling
    candidates: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return self.spelling.prefix + self.name

    @property
    def ambiguous(self) -> bool:
        return len(self.candidates) > 1

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class MissingValue:
    id: str
    name: str
    spelling: Spelling

    @property
    def text(self) -> str:
        return self.spelling.prefix + self.name
