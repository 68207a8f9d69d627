## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from itertools import zip_longest

import lark
from .types import OptDef, OptFlags, ValueType
from .specs import OptSpecs
from .errors import OptNotationError, OptIncompleteNotation, OptSpecError


GRAMMAR = r"""?start: entry*
entry: label? names arity?
label: NAME EQUALS
names: NAME (COMMA NAME)*
arity: OPTIONAL | REQUIRED

// COMMENTS
COMMENT.11: /#[^\r\n]*/

// TOKENS
OPTIONAL.2: "::"
REQUIRED.1: ":"
EQUALS: "="
COMMA: ","
NAME: /[^\s=,:#]+/

// WHITESPACE
%import common.WS
%ignore WS
%ignore COMMENT
"""

ARITY_MAP: dict[str, ValueType] = {':': ValueType.REQUIRED, '::': ValueType.OPTIONAL}

_NAME_RE = re.compile(r"[^\s=,:#]+")

_PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual", propagate_positions=True)


def _entry_to_defs(entry: lark.Tree) -> list[OptDef]:
    label, names, value = None, [], ValueType.NONE
    for ch in entry.children:
        if ch.data == 'label': label = ch.children[0]
        elif ch.data == 'names': names = [t for t in ch.children if t.type == 'NAME']
        elif ch.data == 'arity': value = ARITY_MAP[ch.children[0].value]

    shorts = [str(t) for t in names if len(t) == 1]
    longs = [str(t) for t in names if len(t) > 1]
    opt_id = str(label) if label is not None else (longs or shorts)[0]
    # Pair short and long spellings in order, extra spellings get their own definition.
    return [OptDef(opt_id, short=s, long=l, value=value) for s, l in zip_longest(shorts, longs)]


def parse_notation(source: str, flags: OptFlags = OptFlags(0), arg_limit: int | None = None) -> OptSpecs:
    """Build an `OptSpecs` table from compact notation such as `help=h,help file=f,file: v::`.

    Each whitespace-separated entry is `[ID=]NAME[,NAME...]` followed by `:` when
    the option requires a value or `::` when the value is optional. Without an
    explicit ID the first long name is used, or the first name if all are short.
    """
    try:
        tree = _PARSER.parse(source)
    except (lark.exceptions.ParseError, lark.exceptions.UnexpectedCharacters) as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        if isinstance(exc, lark.exceptions.UnexpectedCharacters):
            token_val = exc.char
        error_class = OptIncompleteNotation if token_val == '' else OptNotationError
        raise error_class(str(exc), source=source, line=attr('line'), column=attr('column'), token=token_val) from None

    entries = [tree] if tree.data == 'entry' else [ch for ch in tree.children if isinstance(ch, lark.Tree)]
    defs = [d for entry in entries for d in _entry_to_defs(entry)]
    return OptSpecs(defs, flags=flags, arg_limit=arg_limit)


def format_notation(specs: OptSpecs) -> str:
    """Render a table back into notation, one entry per definition.

    Ids and spellings containing whitespace or any of `=,:#` have no notation
    form and raise `OptSpecError`.
    """
    suffix = {v: k for k, v in ARITY_MAP.items()}
    entries = []
    for d in specs:
        for text in (d.id, d.short, d.long):
            if text is not None and not _NAME_RE.fullmatch(text):
                raise OptSpecError(f"Cannot write `{text}` in option notation.", opt_id=d.id, opt_name=text)
        names = ','.join(n for n in (d.short, d.long) if n is not None)
        entries.append(f"{d.id}={names}{suffix.get(d.value, '')}")
    return ' '.join(entries)
