## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class ArgveeError(Exception):
    """Base class for all errors raised while configuring a parser."""
    pass

class InvalidOptionType(ArgveeError, ValueError):
    def __init__(self, value):
        super().__init__(f"Invalid type {value}")
        self.value = value

class SchemaParseError(ArgveeError):
    def __init__(self, message, *, filename=None, line=None, column=None, token=None):
        super().__init__(message)
        self.filename = filename
        self.line = line
        self.column = column
        self.token = token
