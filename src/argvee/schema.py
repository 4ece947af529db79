## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Text declarations for option tables, e.g.  `verbose/v "Talk more"; count:number/n`
#

import ast

import lark
from .option import Option
from .errors import SchemaParseError


GRAMMAR = r"""start: (declaration SEPARATOR?)*
declaration: NAME type_clause? alias_clause? description?
type_clause: ":" NAME
alias_clause: "/" NAME
description: STRING

// TOKENS
SEPARATOR: ";"
NAME: /[A-Za-z0-9_][A-Za-z0-9_\-]*/
STRING: /"(?:[^"\\]|\\.)*"/
COMMENT: /#[^\r\n]*/

// WHITESPACE
%import common.WS
%ignore WS
%ignore COMMENT
"""

_PARSER = None

def _get_parser() -> lark.Lark:
    global _PARSER
    if _PARSER is None:
        _PARSER = lark.Lark(GRAMMAR, start='start', parser='lalr', lexer='contextual', propagate_positions=True)
    return _PARSER


def _token(node: lark.Tree, type_: str) -> lark.Token | None:
    return next((ch for ch in node.children if isinstance(ch, lark.Token) and ch.type == type_), None)

def _clause(node: lark.Tree, data_: str) -> lark.Tree | None:
    return next((ch for ch in node.children if isinstance(ch, lark.Tree) and ch.data == data_), None)


def _declaration(node: lark.Tree) -> tuple[str, Option]:
    descriptor = {}
    if (clause := _clause(node, 'type_clause')) is not None:
        descriptor['type'] = _token(clause, 'NAME').value
    if (clause := _clause(node, 'alias_clause')) is not None:
        descriptor['alias'] = _token(clause, 'NAME').value
    if (clause := _clause(node, 'description')) is not None:
        descriptor['description'] = ast.literal_eval(_token(clause, 'STRING').value)
    return _token(node, 'NAME').value, Option.from_descriptor(descriptor)


def parse_schema(source: str, filename=None) -> dict[str, Option]:
    """Parse any number of declarations into an option table, in source order.

    Raises `SchemaParseError` for syntax problems or a name declared twice, and
    `InvalidOptionType` for a type outside boolean/string/number.
    """
    try:
        tree = _get_parser().parse(source)
    except lark.exceptions.UnexpectedInput as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        raise SchemaParseError(str(exc), filename=filename, line=attr('line'), column=attr('column'), token=token_val) from None

    options: dict[str, Option] = {}
    for node in tree.children:
        if not isinstance(node, lark.Tree): continue
        name, opt = _declaration(node)
        if name in options:
            name_tok = _token(node, 'NAME')
            raise SchemaParseError(f"Option `{name}` is declared more than once.",
                                   filename=filename, line=name_tok.line, column=name_tok.column, token=name)
        options[name] = opt
    return options


def parse_declaration(text: str) -> tuple[str, Option]:
    """Parse exactly one declaration, as passed on the command line."""
    options = parse_schema(text, filename='<option>')
    if len(options) != 1:
        raise SchemaParseError(f"Expected a single option declaration, got {len(options)}.", filename='<option>', token=text)
    [(name, opt)] = options.items()
    return name, opt
