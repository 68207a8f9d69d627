## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import json

from .args import Args
from .types import Opt, ValuePresence


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_value(value: str | None) -> str:
    if value is None: return '∅'
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'

def _format_option(opt: Opt) -> str:
    line = f"\033[97m{opt.id}\033[0m \033[90m({opt.text})\033[0m"
    if opt.presence is ValuePresence.EXTRANEOUS:
        return line + f" = {format_value(opt.value)} \033[33m(extraneous)\033[0m"
    if opt.presence is ValuePresence.PRESENT:
        return line + f" = {format_value(opt.value)}"
    return line

def format_args(args: Args) -> str:
    """Render the parsed result as aligned, colored lines in command-line order per category."""
    lines = [f"\033[36moption \033[0m  {_format_option(o)}" for o in args.options]
    for u in args.unknown:
        hint = f" \033[90m(ambiguous: {', '.join('--' + c for c in u.candidates)})\033[0m" if u.ambiguous else ''
        lines.append(f"\033[33munknown\033[0m  {u.text}{hint}")
    lines += [f"\033[31mmissing\033[0m  \033[97m{m.id}\033[0m \033[90m({m.text})\033[0m" for m in args.missing]
    lines += [f"\033[90mother  \033[0m  {format_value(o)}" for o in args.other]
    if args.arg_limit_exceeded:
        lines.append("\033[33mlimit  \033[0m  argument limit exceeded, remaining arguments ignored")
    return '\n'.join(lines)

def format_args_json(args: Args, indent: int | None = 2) -> str:
    return json.dumps(args.to_dict(), indent=indent, ensure_ascii=False)


def format_notation_error_context(source: str, line: int | None, column: int | None, token_value: str) -> str:
    lines = source.splitlines() or ['']
    line = line or len(lines)
    result = [f"\033[97m  Notation, line {line}\033[0m"]

    for i in range(max(0, line - 3), min(len(lines), line + 2)):
        line_content = lines[i]
        line_color = '\033[90m'
        if i+1 == line:
            line_color = '\033[97m'
            if column and 0 < column <= len(line_content):
                line_content = (
                    line_content[:column-1] +
                    f"\033[48;5;30m\033[1;97m{line_content[column-1:column+len(token_value)-1]}\033[0m" +
                    line_content[column+len(token_value)-1:]
                )
        result.append(f"{line_color}{i+1:>5} |\033[0m {line_content}")
    return '\n' + '\n'.join(result) + '\n'
