## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Mapping

from .option import Option, OptionType, OPTION_TYPES
from .parser import Parser, NON_OPTION, NOT_HANDLED, IGNORED
from .schema import parse_schema, parse_declaration
from .errors import *


def parse(args, options: Mapping[str, Option | dict | str] | str | None = None,
          stop_parsing: bool | str = False) -> dict[str, Any]:
    """One-shot parse; `options` may also be declaration text for `parse_schema`."""
    if isinstance(options, str):
        options = parse_schema(options)
    return Parser.parse_args(args, options, stop_parsing=stop_parsing)
