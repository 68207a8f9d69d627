## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# longopt — POSIX getopt / GNU getopt_long style parsing, as a library.  This
#           command-line tool shows how a given table classifies arguments.
#

import os
import sys
from dataclasses import dataclass

import click

from .args import Args
from .specs import OptSpecs
from .types import OptFlags
from .errors import OptNotationError, OptSpecError
from .notation import parse_notation
from .formatting import write_without_ansi, format_args, format_args_json, format_notation_error_context
from .getopt import getopt


@dataclass(frozen=True)
class CliConfig:
    notation: str
    posix: bool
    exact: bool
    limit: int | None
    json: bool
    strict: bool
    plain: bool

    @property
    def flags(self) -> OptFlags:
        flags = OptFlags(0)
        if self.posix: flags |= OptFlags.STOP_AT_OPERAND
        if self.exact: flags |= OptFlags.EXACT_LONG_NAMES
        return flags


class GetoptRunner:
    def __init__(self, config: CliConfig):
        self.config = config

        if config.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

    def _error(self, message: str, detail: str, context: str = '') -> None:
        print(f'\033[30;43m {message} \033[0m {detail}' + (f'\n{context}' if context else ''), file=sys.stderr)

    def build_specs(self) -> OptSpecs | None:
        try:
            return parse_notation(self.config.notation, flags=self.config.flags, arg_limit=self.config.limit)
        except OptNotationError as exc:
            context = format_notation_error_context(exc.source, exc.line, exc.column, exc.token or '')
            self._error("SYNTAX ERROR.", f"Option notation caused a problem! (Exception: \033[33m{type(exc).__name__}\033[0m)", context)
        except OptSpecError as exc:
            self._error("SPEC ERROR.", str(exc))
        return None

    def report_problems(self, args: Args) -> None:
        for u in args.unknown:
            if u.ambiguous:
                names = ', '.join(f'`--{c}`' for c in u.candidates)
                self._error("AMBIGUOUS OPTION.", f"Option `\033[1;97m{u.text}\033[0m` could be any of {names}.")
            else:
                self._error("UNKNOWN OPTION.", f"Option `\033[1;97m{u.text}\033[0m` is not recognized.")
        for m in args.missing:
            self._error("MISSING VALUE.", f"Option `\033[1;97m{m.text}\033[0m` requires a value.")
        for o in args.extraneous():
            self._error("EXTRANEOUS VALUE.", f"Option `\033[1;97m{o.text}\033[0m` does not take a value.")

    def run(self, arguments: list[str]) -> int:
        if (specs := self.build_specs()) is None:
            return 2

        args = getopt(specs, arguments)
        output = format_args_json(args) if self.config.json else format_args(args)
        if output: print(output)

        if self.config.strict and not args.ok:
            self.report_problems(args)
            return 1
        return 0


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--spec', '-s', 'specs', multiple=True, help='Option table in notation form, e.g. "help=h,help file=f,file:".')
@click.option('--posix', is_flag=True, help='Stop parsing options at the first operand; also set by POSIXLY_CORRECT.')
@click.option('--exact', is_flag=True, help='Require long option names to be written in full.')
@click.option('--limit', type=click.IntRange(min=0), default=None, help='Maximum number of arguments to process.')
@click.option('--json', 'as_json', is_flag=True, help='Print the parsed result as JSON.')
@click.option('--strict', is_flag=True, help='Report problems on stderr and exit with status 1.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.argument('arguments', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, specs: tuple[str, ...], posix: bool, exact: bool, limit: int | None,
        as_json: bool, strict: bool, plain: bool, arguments: tuple[str, ...]) -> None:
    """Parse ARGUMENTS (after `--`) against the option table and show the result."""
    notation = '\n'.join(specs) if specs else os.environ.get('LONGOPT_SPEC', '')
    config = CliConfig(notation=notation, posix=posix or 'POSIXLY_CORRECT' in os.environ, exact=exact,
                       limit=limit, json=as_json, strict=strict, plain=plain)
    runner = GetoptRunner(config)
    ctx.exit(runner.run(list(arguments)))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=argv, prog_name='longopt')


if __name__ == "__main__":
    main()
