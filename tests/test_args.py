## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import dataclasses

import pytest

from longopt.args import Args
from longopt.specs import OptSpecs
from longopt.types import OptDef, ValueType


def _parse(*argv):
    specs = (OptSpecs()
        .option('help', 'h').option('help', 'help')
        .option('file', 'f', ValueType.REQUIRED).option('file', 'file', ValueType.REQUIRED)
        .option('verbose', 'v', ValueType.OPTIONAL).option('verbose', 'verbose', ValueType.OPTIONAL))
    return specs.getopt(argv)


def test_first_and_last_occurrence():
    args = _parse("-h", "--help", "-f123", "-f", "456", "foo", "bar")
    assert args.options_first('help').name == 'h'
    assert args.options_last('help').name == 'help'
    assert args.options_value_first('file') == '123'
    assert args.options_value_last('file') == '456'
    assert args.options_value_all('file') == ['123', '456']
    assert args.other == ('foo', 'bar')


def test_values_skip_options_without_value():
    args = _parse("-v", "--verbose=2", "-v")
    assert [o.value for o in args.options_all('verbose')] == [None, '2', None]
    assert args.options_value_all('verbose') == ['2']
    assert args.options_value_first('verbose') == args.options_value_last('verbose') == '2'


def test_missing_ids_give_empty_answers():
    args = _parse("-h")
    assert args.options_first('file') is None
    assert args.options_last('file') is None
    assert args.options_value_first('file') is None
    assert args.options_all('file') == []
    assert not args.has('file') and 'file' not in args
    assert 'help' in args


def test_iteration_is_repeatable_and_reversible():
    args = _parse("-h", "-fx", "--help")
    forward = [o.name for o in args.iter_options()]
    assert forward == ['h', 'f', 'help']
    assert [o.name for o in args.iter_options(reverse=True)] == list(reversed(forward))
    assert [o.name for o in args.iter_options('help', reverse=True)] == ['help', 'h']
    assert [o.name for o in args.iter_options()] == forward
    assert args.options_all() == list(args.options)


def test_ok_reflects_problems():
    assert _parse("-h", "x").ok
    assert not _parse("-q").ok
    assert not _parse("--file").ok
    assert not _parse("--help=1").ok


def test_result_is_immutable():
    args = _parse("-h")
    with pytest.raises(dataclasses.FrozenInstanceError):
        args.other = ('x',)
    assert isinstance(args.options, tuple)


def test_to_dict_is_plain_data():
    data = _parse("--fi=a", "--he=1", "--x", "-f", "p").to_dict()
    assert data['options'] == [
        {'id': 'file', 'name': 'file', 'spelling': 'long', 'value': 'a', 'presence': 'present'},
        {'id': 'help', 'name': 'help', 'spelling': 'long', 'value': '1', 'presence': 'extraneous'},
        {'id': 'file', 'name': 'f', 'spelling': 'short', 'value': 'p', 'presence': 'present'},
    ]
    assert data['unknown'] == [{'name': 'x', 'spelling': 'long', 'candidates': []}]
    assert data['missing'] == [] and data['other'] == []
    assert data['arg_limit_exceeded'] is False


def test_empty_args_default():
    assert Args() == OptSpecs([OptDef('a', 'a')]).getopt([])


def test_has_counts_options_with_missing_value():
    args = _parse("-h", "--file")
    assert args.options_first('file') is None
    assert args.has('file') and 'file' in args
    assert not args.has('verbose')
