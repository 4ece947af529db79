## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argvee — GNU-style command-line argument parsing against a declared option table.
#

import os
import sys
from dataclasses import dataclass

import click

from .option import Option
from .parser import Parser, NON_OPTION, NOT_HANDLED, IGNORED
from .schema import parse_schema, parse_declaration
from .errors import ArgveeError, SchemaParseError, InvalidOptionType
from .formatting import write_without_ansi, format_result, format_event, format_parse_error_context


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    plain: bool
    strict: bool
    stop_parsing: bool | str


class ArgveeRunner:
    def __init__(self, config: CliConfig):
        self.verbose = config.verbose
        self.strict = config.strict
        self.stop_parsing = config.stop_parsing

        if config.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.options: dict[str, Option] = {}
        self.not_handled: list[str] = []

    def _fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '') -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)
        sys.exit(1)

    def _handle_exception(self, exc: ArgveeError, filename: str, source: str) -> None:
        if isinstance(exc, SchemaParseError):
            context = format_parse_error_context(filename, exc.line, exc.column, exc.token, source=source)
            context += f"\n\033[90m{str(exc).replace(chr(10), ' ').replace(chr(9), ' ')}\033[0m\n"
            self._fatal_error("SCHEMA ERROR.", f"Declaring options from `\033[97m{filename}\033[0m` caused a problem!", type(exc).__name__, context)
        elif isinstance(exc, InvalidOptionType):
            detail = f"Type `\033[1;97m{exc.value}\033[0m` from `\033[97m{filename}\033[0m` is not one of boolean, string or number!"
            self._fatal_error("CONFIG ERROR.", detail, type(exc).__name__)
        else:
            self._fatal_error("CONFIG ERROR.", str(exc), type(exc).__name__)

    def _declare(self, name: str, opt: Option, filename: str) -> None:
        if name in self.options:
            self._fatal_error("CONFIG ERROR.", f"Option `\033[1;97m{name}\033[0m` from `\033[97m{filename}\033[0m` was already declared!")
        self.options[name] = opt

    def load_schema(self, source: str, filename: str) -> None:
        try:
            options = parse_schema(source, filename=filename)
        except ArgveeError as exc:
            self._handle_exception(exc, filename, source)
        else:
            for name, opt in options.items():
                self._declare(name, opt, filename)

    def load_declaration(self, text: str) -> None:
        try:
            name, opt = parse_declaration(text)
        except ArgveeError as exc:
            self._handle_exception(exc, '<option>', text)
        else:
            self._declare(name, opt, '<option>')

    def _trace(self, event: str):
        return lambda value: print(format_event(event, value), file=sys.stderr)

    def parse(self, tokens: list[str]) -> dict:
        parser = Parser(self.options, stop_parsing=self.stop_parsing)
        parser.on(NOT_HANDLED, self.not_handled.append)

        if self.verbose > 0:
            for event in (NOT_HANDLED, IGNORED, *self.options):
                parser.on(event, self._trace(event))
        if self.verbose > 1:
            parser.on(NON_OPTION, self._trace(NON_OPTION))

        result = parser.parse(tokens)
        print(format_result(result))
        return result

    def finalize(self) -> int:
        if self.strict and self.not_handled:
            print(f"\033[30;43m NOT HANDLED. \033[0m {len(self.not_handled)} argument(s) were not recognized.", file=sys.stderr)
            return 1
        return 0


@click.command(context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.option('--option', '-o', 'declarations', multiple=True, metavar='DECL', help='Declare an option, e.g. `count:number/n "How many"`.')
@click.option('--schema', '-f', type=click.File('r', encoding='utf-8'), default=None, help='Read option declarations from a file.')
@click.option('--stop', '-s', is_flag=True, help='Stop parsing after a `--` argument.')
@click.option('--stop-at', default=None, metavar='TOKEN', help='Stop parsing after the given argument.')
@click.option('--verbose', '-v', default=0, count=True, help='Print parse events to stderr; twice includes non-options.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--strict', is_flag=True, help='Exit with an error if any argument was not handled.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, declarations: tuple[str, ...], schema, stop: bool, stop_at: str | None,
        verbose: int, plain: bool, strict: bool, tokens: tuple[str, ...]) -> None:
    if os.environ.get('ARGVEE_DEBUG'): verbose = max(verbose, 1)
    config = CliConfig(verbose=verbose, plain=plain, strict=strict, stop_parsing=stop_at or stop)

    runner = ArgveeRunner(config)
    if schema is not None:
        runner.load_schema(schema.read(), schema.name or '<STDIN>')
    for text in declarations:
        runner.load_declaration(text)

    runner.parse([*tokens, *ctx.args])
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='argvee')


if __name__ == "__main__":
    main()
