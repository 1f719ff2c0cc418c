"""β-reduction of pure lambda calculus terms.

Interpreter reduces in applicative order: both sides of an Application are reduced before the Application itself, and
the body of an Abstraction is never reduced. A term without a normal form recurses until Python's recursion limit is
hit, unless max_steps is given.

Substitution is name-based. By default it follows the textbook rule without renaming, so a substituted value can be
captured by an inner binder: (λx.λy.x) y reduces to λy. y. Pass capture_avoiding=True to α-rename such binders
instead, which gives λy0. y.
"""

from abc import ABC, abstractmethod

from lambdacalc.lang.error import ReductionLimitExceeded
from lambdacalc.pure.term import Abstraction, Application, Variable


class Evaluator(ABC):
    """Anything that can simplify a root LambdaTerm."""

    @abstractmethod
    def evaluate(self, term):
        """Returns the simplified version of term. term itself is left untouched."""


class Interpreter(Evaluator):
    """Applicative-order β-reducer.

    :param max_steps: raise ReductionLimitExceeded after this many β-reductions (None for no limit)
    :param capture_avoiding: α-rename binders that would capture a free variable of a substituted value
    :param on_step: called with every β-reduct before it is reduced further
    """

    def __init__(self, max_steps=None, capture_avoiding=False, on_step=None):
        self.max_steps = max_steps
        self.capture_avoiding = capture_avoiding
        self.on_step = on_step
        self.steps = 0
        self._root = None  # term passed to evaluate, for error messages

    def evaluate(self, term):
        self.steps = 0
        self._root = term
        return self._evaluate(term)

    def _evaluate(self, term):
        if not isinstance(term, Application):
            return term  # variables and abstractions are already in normal form

        lhs = self._evaluate(term.lhs)
        rhs = self._evaluate(term.rhs)
        if not isinstance(lhs, Abstraction):
            return Application(lhs, rhs)

        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise ReductionLimitExceeded(self._root, self.max_steps)

        reduct = self.substitute(lhs.body, lhs.param, rhs)
        if self.on_step is not None:
            self.on_step(reduct)
        return self._evaluate(reduct)

    def substitute(self, term, var, value):
        """Returns term with every free occurrence of Variable var replaced by value."""
        if isinstance(term, Variable):
            return value if term.name == var else term

        if isinstance(term, Application):
            return Application(self.substitute(term.lhs, var, value), self.substitute(term.rhs, var, value))

        if term.param == var:
            return term  # var is rebound here, so nothing below is free

        if self.capture_avoiding and term.param in value.free_variables() and var in term.body.free_variables():
            used = value.free_variables() | term.body.variables() | {var}
            new_param = fresh_name(term.param, used)
            term = Abstraction(new_param, substitute(term.body, term.param, Variable(new_param)))

        return Abstraction(term.param, self.substitute(term.body, var, value))


def split(name):
    """Splits name into its alphabetic stem and numeric suffix (-1 if there is none): 'x12' -> ('x', 12)."""
    stem = name.rstrip("0123456789")
    suffix = name[len(stem):]
    return stem, int(suffix) if suffix else -1


def fresh_name(name, used):
    """Returns the next name with the same stem as name that isn't in used: 'y' -> 'y0' if 'y' in used."""
    stem, __ = split(name)
    max_suffix = -1
    for other in used:
        other_stem, suffix = split(other)
        if other_stem == stem and suffix > max_suffix:
            max_suffix = suffix
    return f"{stem}{max_suffix + 1}"


def substitute(term, var, value):
    """Name-based substitution term[var := value], without capture avoidance."""
    return Interpreter().substitute(term, var, value)


def evaluate(term, **kwargs):
    """Reduces term with a fresh Interpreter; kwargs are passed to Interpreter."""
    return Interpreter(**kwargs).evaluate(term)
