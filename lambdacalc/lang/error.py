"""Error handling for lambdacalc. Only GenericExceptions should be encountered during running: if another type of error
is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue (RecursionError and
KeyboardInterrupt excepted).
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a lambdacalc error. msg is a format
    string whose placeholders are filled with exprs; exprs[0] should be the offending expr, and [start, end) the
    offending span within it.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        super().__init__(msg.format(*exprs))
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal


class LexicalError(GenericException):
    """Source text contains something that is not a token."""


class UnexpectedCharacter(LexicalError):

    def __init__(self, char, position, source=""):
        self.char = char
        self.position = position
        super().__init__("'{}' has unexpected character '{}'", (source, char), start=position, end=position + 1)


class ParseError(GenericException):
    """Token sequence does not form a λ-term."""


class UnexpectedEndOfInput(ParseError):

    def __init__(self, source=""):
        super().__init__("'{}' ended unexpectedly", source, start=len(source), end=len(source) + 1)


class UnexpectedToken(ParseError):

    def __init__(self, token, source=""):
        self.token = token
        super().__init__("'{}' has unexpected token '{}'", (source, token), start=token.start, end=token.end)


class ReductionLimitExceeded(GenericException):
    """Raised by Interpreter only when a step limit was configured."""

    def __init__(self, term, max_steps):
        self.term = term
        self.max_steps = max_steps
        super().__init__("'{}' has no normal form within {} β-reductions", (term, max_steps), diagnosis=False)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom lambdacalc errors. Also
    prints reduction steps when trace is set.
    """
    ERROR = "red"
    STEP = "cyan"

    def __init__(self, fatal=True, trace=False):
        self.fatal = fatal
        self.trace = trace
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    def register_step(self, rule, expr):
        """Prints a single reduction step if tracing."""
        if self.trace:
            print(colored(f"{rule}: ", ErrorHandler.STEP, attrs=["bold"]) + str(expr))

    @staticmethod
    def diagnose(error):
        """Returns offending part of error.expr highlighted and bolded."""
        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, 1)
        diagnosis += colored(error.expr[error.start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        for file, (line, line_num) in self.traceback.items():  # dicts are insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # no need if error is fatal

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False

        do_exit = False
        if issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt"))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(GenericException("normal form might exist, but maximum recursion depth exceeded"))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
