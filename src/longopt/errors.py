## longopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark


class OptError(Exception):
    def __init__(self, message: str = "", *, opt_id=None, opt_name=None):
        """Base class for all errors raised while building option tables."""
        super().__init__(message)
        self.opt_id: str = opt_id
        self.opt_name: str = opt_name

class OptSpecError(OptError, ValueError):
    """Malformed option definition, reported when the table is built."""
    pass

class OptNotationError(OptSpecError):
    def __init__(self, message, *, source=None, line=None, column=None, token=None):
        super().__init__(message)
        self.source = source
        self.line = line
        self.column = column
        self.token = token

class OptIncompleteNotation(OptNotationError, lark.exceptions.ParseError):
    def __init__(self, message, *, source=None, line=None, column=None, token=None):
        super().__init__(message, source=source, line=line, column=column, token=token)
