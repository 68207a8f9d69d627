## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from longopt.specs import OptSpecs
from longopt.notation import parse_notation, format_notation
from longopt.types import OptDef, OptFlags, ValueType
from longopt.errors import OptNotationError, OptIncompleteNotation, OptSpecError


def test_entries_with_ids_and_arity():
    specs = parse_notation("help=h,help file=f,file: verbose=v,verbose::")
    assert list(specs) == [
        OptDef('help', 'h', 'help', ValueType.NONE),
        OptDef('file', 'f', 'file', ValueType.REQUIRED),
        OptDef('verbose', 'v', 'verbose', ValueType.OPTIONAL),
    ]


def test_implicit_id_prefers_first_long_name():
    specs = parse_notation("q,quiet x o,output,out:")
    assert [d.id for d in specs] == ['quiet', 'x', 'output', 'output']
    assert specs.defs[2] == OptDef('output', 'o', 'output', ValueType.REQUIRED)
    assert specs.defs[3] == OptDef('output', None, 'out', ValueType.REQUIRED)


def test_comments_and_newlines_are_ignored():
    specs = parse_notation("""
        # Program options.
        help=h,help      # show help
        n:
    """)
    assert [d.id for d in specs] == ['help', 'n']
    assert specs.match_short('n').value is ValueType.REQUIRED


def test_empty_notation_gives_empty_table():
    assert len(parse_notation("")) == 0
    assert len(parse_notation("   # nothing\n")) == 0


def test_flags_and_limit_are_passed_through():
    specs = parse_notation("a", flags=OptFlags.STOP_AT_OPERAND, arg_limit=5)
    assert specs.is_flag(OptFlags.STOP_AT_OPERAND) and specs.arg_limit == 5


def test_syntax_error_reports_position():
    with pytest.raises(OptNotationError) as info:
        parse_notation("help=h\nfile=,f")
    assert info.value.line == 2
    assert info.value.token == ','


def test_unfinished_notation_is_incomplete():
    with pytest.raises(OptIncompleteNotation):
        parse_notation("file=")


def test_invalid_spelling_is_spec_error():
    with pytest.raises(OptSpecError):
        parse_notation("dash=-")


def test_format_roundtrips_through_parser():
    source = "help=h,help file=f,file: verbose=v,verbose:: x=xx"
    specs = parse_notation(source)
    assert format_notation(specs) == source
    assert parse_notation(format_notation(specs)) == specs


@pytest.mark.parametrize('defn', [
    OptDef('my id', 'a'),
    OptDef('a=b', 'a'),
    OptDef('a,b', 'a'),
    OptDef('a:b', 'a'),
    OptDef('a#b', 'a'),
    OptDef('ok', ':'),
    OptDef('ok', long='x#y'),
])
def test_format_rejects_text_without_notation_form(defn):
    with pytest.raises(OptSpecError):
        format_notation(OptSpecs([defn]))
