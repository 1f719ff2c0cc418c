"""Session control for lambdacalc. Runs λ-terms read from a file, a single command-line expression, or the interactive
shell, and prints each term next to its normal form.

File format: one λ-term per line, ';;' starts a comment, and a line with unbalanced '(' continues on the next line.
"""

from lambdacalc.lang.error import GenericException
from lambdacalc.pure.parser import parse
from lambdacalc.pure.reducer import Interpreter


class Session:
    """Governs a lambdacalc session: parses terms as they are added and reduces them when run is called."""
    SH_FILE = "<in>"      # command-line interpreter filename
    EXPR_FILE = "<expr>"  # filename used for -e expressions
    COMMENT = ";;"

    def __init__(self, error_handler, path, cmd_line, max_steps=None, capture_avoiding=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.interpreter = Interpreter(max_steps, capture_avoiding, self._register_step)

        self.to_exec = {}  # dict of line num: (expr, LambdaTerm) to reduce
        self.results = []  # list of (LambdaTerm, normal form) pairs, in order of reduction

        if self.cmd_line:
            self.error_handler.fatal = False

        if path not in (Session.SH_FILE, Session.EXPR_FILE):
            try:
                with open(path, "r", encoding="utf-8") as file:
                    exprs = Session.read_exprs(file)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for expr, line_num in exprs:
                self.add(expr, line_num)

        elif path == Session.SH_FILE and not cmd_line:
            raise GenericException("'{}' is a reserved filename", path, diagnosis=False)

    @staticmethod
    def preprocess_line(line):
        """Strips comments and trailing whitespace from line. Returns updated line and whether or not it needs to be
        continued on the next line.
        """
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]

        line = line.rstrip()
        return line, line.count("(") > line.count(")")

    @staticmethod
    def read_exprs(lines):
        """Returns (expr, line_num) for every λ-term in lines, joining continued lines. line_num is the line the term
        starts on.
        """
        exprs = []
        prev, start = "", None

        for line_num, line in enumerate(lines, 1):
            line, add_to_prev = Session.preprocess_line(f"{prev} {line}" if prev else line)
            if not line.strip():
                continue

            if start is None:
                start = line_num

            if add_to_prev:
                prev = line
            else:
                exprs.append((line.strip(), start))
                prev, start = "", None

        if prev:
            exprs.append((prev.strip(), start))  # unbalanced to the end: let the parser report it
        return exprs

    def add(self, expr, line_num):
        """Parses expr and queues it. Reduction is delayed until run is called."""
        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised
        self.to_exec[line_num] = (expr, parse(expr))
        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Reduces every queued term, printing it with its normal form. Returns this session's results."""
        for line_num, (expr, term) in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, expr, line_num)

            try:
                normal = self.interpreter.evaluate(term)
            finally:
                del self.to_exec[line_num]

            self.results.append((term, normal))
            print(f"original: {term}")
            print(f"simplified: {normal}")

            self.error_handler.remove_line(self.path)
        return self.results

    def pop(self):
        """Removes and returns the most recent (term, normal form) result."""
        return self.results.pop()

    def _register_step(self, reduct):
        self.error_handler.register_step("β", reduct)
