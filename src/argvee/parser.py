## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argvee — GNU-style command-line argument parsing against a declared option table.
#

import re
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple
from collections import deque

from .option import Option, OptionType
from .events import Emitter


# Dash run, optional `no-` marker, name up to the first `=`, optional `=value`.
ARG_PATTERN = re.compile(r'^(-*)((no-)?([^=]+))(=(.*))?$', re.DOTALL)

DEFAULT_STOP_TOKEN = '--'

NON_OPTION, NOT_HANDLED, IGNORED = 'non-option', 'not-handled', 'ignored'


class ArgToken(NamedTuple):
    dashes: str
    name: str                     # Name segment, including any `no-` prefix.
    negated: bool
    bare_name: str                # Name segment without the `no-` prefix.
    implicit_value: str | None

    @classmethod
    def match(cls, arg: str) -> 'ArgToken | None':
        if (m := ARG_PATTERN.match(arg)) is None: return None
        return cls(m[1], m[2], m[3] is not None, m[4], m[6])

    @property
    def is_option(self) -> bool:
        return self.dashes != ''

    @property
    def is_short(self) -> bool:
        return self.dashes == '-'


class Expectation(NamedTuple):
    arg: str
    id: str
    option: Option


class Parser(Emitter):
    """Single-pass parser for one argument list; create a new one per parse.

    Events are emitted as tokens are resolved: `non-option` for everything that
    lands in `result['_']`, `not-handled` and `ignored` before forwarding into
    `non-option`, and one event named after each option id that gets a value.
    """

    def __init__(self, options: Mapping[str, Option | dict | str] | None = None,
                 stop_parsing: bool | str = False):
        super().__init__()

        opts = {key: Option.from_descriptor(raw) for key, raw in (options or {}).items()}
        aliases = {opt.alias: (key, opt) for key, opt in opts.items() if opt.alias}
        self.options: Mapping[str, Option] = MappingProxyType(opts)
        self.aliases: Mapping[str, tuple[str, Option]] = MappingProxyType(aliases)

        if stop_parsing is True:
            stop_parsing = DEFAULT_STOP_TOKEN
        self.stop_parsing: str | None = stop_parsing or None

        self.stopped = False
        self.expecting: Expectation | None = None
        self.result: dict[str, Any] = {'_': []}

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'Parser':
        stop = config.get('stop_parsing', config.get('stopParsing', False))
        return cls(config.get('options'), stop_parsing=stop)

    # Reporting ───────────────────────────────────────────────────────────────────────────────
    def _add_non_option(self, arg: str) -> None:
        self.emit(NON_OPTION, arg)
        self.result['_'].append(arg)

    def _add_not_handled(self, arg: str) -> None:
        self.emit(NOT_HANDLED, arg)
        self._add_non_option(arg)

    def _add_ignored(self, arg: str) -> None:
        self.emit(IGNORED, arg)
        self._add_non_option(arg)

    def _add_option(self, key: str, value: Any) -> None:
        self.emit(key, value)
        self.result[key] = value

    def _end_expect_value(self) -> None:
        if self.expecting is not None:
            arg, self.expecting = self.expecting.arg, None
            self._add_not_handled(arg)

    # Resolution ──────────────────────────────────────────────────────────────────────────────
    def _resolve(self, tok: ArgToken) -> tuple[str, Option | None]:
        id_, opt = tok.name, None
        if tok.is_short:
            if tok.name in self.aliases:
                id_, opt = self.aliases[tok.name]
            else:
                opt = self.options.get(tok.name)
        else:
            opt = self.options.get(tok.name)

        if opt is None and tok.negated:
            # Negation only makes sense for boolean options.
            if (opt := self.options.get(tok.bare_name)) is not None and opt.type == OptionType.BOOLEAN:
                id_ = tok.bare_name
            else:
                opt = None
        return id_, opt

    def _parse_arg(self, arg: str, queue: deque) -> None:
        if self.stop_parsing is not None and arg == self.stop_parsing:
            self.stopped = True

        if self.stopped:
            self._end_expect_value()
            self._add_ignored(arg)
            return

        tok = ArgToken.match(arg)
        if tok is not None and tok.is_option:
            self._end_expect_value()

            # Combined short options, `-ab` is queued again as `-a` then `-b`.
            if tok.is_short and len(tok.name) > 1:
                queue.extendleft(f'-{ch}' for ch in reversed(tok.name))
                return

            id_, opt = self._resolve(tok)
            if opt is None:
                self._add_not_handled(arg)
            elif not opt.requires_value:
                # Only an option reached through the `no-` fallback is set to False.
                self._add_option(id_, id_ == tok.name or not tok.negated)
            elif tok.implicit_value:
                if (value := opt.parsed_value(tok.implicit_value)) is not None:
                    self._add_option(id_, value)
                else:
                    self._add_not_handled(arg)
            else:
                self.expecting = Expectation(arg, id_, opt)

        elif self.expecting is not None:
            expect, self.expecting = self.expecting, None
            if (value := expect.option.parsed_value(arg)) is not None:
                self._add_option(expect.id, value)
            else:
                self._add_not_handled(expect.arg)
                self._add_not_handled(arg)
        else:
            self._add_non_option(arg)

    # Entry points ────────────────────────────────────────────────────────────────────────────
    def parse(self, args) -> dict[str, Any]:
        queue = deque(a for a in (arg.strip() for arg in args) if a != '')

        while queue:
            self._parse_arg(queue.popleft(), queue)

        self._end_expect_value()
        return self.result

    @classmethod
    def parse_args(cls, args, options: Mapping[str, Option | dict | str] | None = None,
                   stop_parsing: bool | str = False) -> dict[str, Any]:
        return cls(options, stop_parsing=stop_parsing).parse(args)
