## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from typing import Any

from .parser import NON_OPTION, NOT_HANDLED, IGNORED


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_value(value: Any) -> str:
    if isinstance(value, bool): return str(value).lower()
    if isinstance(value, str): return '"' + value.replace('"', '\\"') + '"'
    if isinstance(value, list): return '[' + ', '.join(format_value(v) for v in value) + ']'
    return str(value)

def format_result(result: dict[str, Any]) -> str:
    lines = [f"\033[97m{key}\033[0m = {format_value(value)}" for key, value in result.items() if key != '_']
    lines.append(f"\033[90m_\033[0m = {format_value(result.get('_', []))}")
    return '\n'.join(lines)


_EVENT_COLORS = {NON_OPTION: '\033[90m', NOT_HANDLED: '\033[33m', IGNORED: '\033[36m'}

def format_event(event: str, value: Any) -> str:
    color = _EVENT_COLORS.get(event, '\033[32m')
    return f"{color}{event:>12}\033[0m {format_value(value)}"


def format_parse_error_context(filename, line, column, token_value, source=None):
    if line is None: return ''
    lines = source.splitlines(keepends=True) if source is not None else open(filename, 'r').readlines()
    start_line, end_line = max(0, line - 3), min(len(lines), line + 2)
    result = [f"\033[97m  File \"{filename}\", line {line}\033[0m"]

    for i in range(start_line, end_line):
        line_content = lines[i].rstrip('\n')
        line_color = '\033[90m'
        if i+1 == line:
            line_color = '\033[97m'
            if column and 0 < column <= len(line_content) and token_value:
                line_content = (
                    line_content[:column-1] +
                    f"\033[48;5;30m\033[1;97m{line_content[column-1:column+len(token_value)-1]}\033[0m" +
                    line_content[column+len(token_value)-1:]
                )
        result.append(f"{line_color}{i+1:>5} |\033[0m {line_content}")
    return '\n' + '\n'.join(result) + '\n'
