"""Pure lambda calculus abstract syntax tree.

Formally, pure lambda calculus can be defined as

```
<λ-term> ::= <name>                     ; "variable"
           | "λ" <name> "." <λ-term>    ; "abstraction"
           | <λ-term> <λ-term>          ; "application"
```

Terms are immutable and compared structurally: Variable("x") == Variable("x"). A reduct may reuse subtrees of the
term it came from, which is safe because nothing mutates them.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         https://opendsa-server.cs.vt.edu/ODSA/Books/PL/html/Syntax.html
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class LambdaTerm(ABC):
    """Superclass of Variable, Abstraction and Application."""

    @property
    @abstractmethod
    def nodes(self):
        """Child terms, in display order. Abstraction parameters are names, not nodes."""

    @abstractmethod
    def free_variables(self):
        """Set of names that occur free in this term."""

    @abstractmethod
    def alpha_equals(self, other, mapping=None, other_mapping=None):
        """Whether or not two LambdaTerms are alpha-equivalent. mapping maps each name bound in self to a stack of the
        names bound at the same positions in other; other_mapping is the same from the perspective of other.
        """

    def variables(self):
        """Set of all names in this term, whether free, bound, or abstraction parameters."""
        names = set()
        for node in self.nodes:
            names |= node.variables()
        return names

    @property
    def tokenizable(self):
        """Whether or not this term needs parentheses when it appears inside an Application."""
        return bool(self.nodes)

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <LambdaTerm>(expr='<expr>', nodes=[
            <LambdaTerm>(expr='<expr>', nodes=[
                ...
                <LambdaTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"


@dataclass(frozen=True, repr=False)
class Variable(LambdaTerm):
    name: str

    @property
    def nodes(self):
        return ()

    def free_variables(self):
        return {self.name}

    def variables(self):
        return {self.name}

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if not isinstance(other, Variable):
            return False

        mapping = mapping or {}
        other_mapping = other_mapping or {}

        bound = mapping.get(self.name)
        other_bound = other_mapping.get(other.name)
        if not bound and not other_bound:
            return self.name == other.name  # both free
        if not bound or not other_bound:
            return False
        return bound[-1] == other.name and other_bound[-1] == self.name

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Variable('{self.name}')"


@dataclass(frozen=True, repr=False)
class Abstraction(LambdaTerm):
    param: str
    body: LambdaTerm

    @property
    def nodes(self):
        return (self.body,)

    def free_variables(self):
        return self.body.free_variables() - {self.param}

    def variables(self):
        return self.body.variables() | {self.param}

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if not isinstance(other, Abstraction):
            return False

        mapping = {} if mapping is None else mapping
        other_mapping = {} if other_mapping is None else other_mapping

        mapping.setdefault(self.param, []).append(other.param)
        other_mapping.setdefault(other.param, []).append(self.param)
        try:
            return self.body.alpha_equals(other.body, mapping, other_mapping)
        finally:
            mapping[self.param].pop()
            other_mapping[other.param].pop()

    def __str__(self):
        return f"λ{self.param}. {self.body}"

    def __repr__(self):
        return f"Abstraction('{self.param}', {self.body!r})"


@dataclass(frozen=True, repr=False)
class Application(LambdaTerm):
    lhs: LambdaTerm
    rhs: LambdaTerm

    @property
    def nodes(self):
        return self.lhs, self.rhs

    def free_variables(self):
        return self.lhs.free_variables() | self.rhs.free_variables()

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if not isinstance(other, Application):
            return False

        mapping = {} if mapping is None else mapping
        other_mapping = {} if other_mapping is None else other_mapping

        for node, other_node in zip(self.nodes, other.nodes):
            if not node.alpha_equals(other_node, mapping, other_mapping):
                return False
        return True

    def __str__(self):
        # parenthesize compound children so that left-associativity survives a re-parse
        return " ".join(f"({node})" if node.tokenizable else str(node) for node in self.nodes)

    def __repr__(self):
        return f"Application({self.lhs!r}, {self.rhs!r})"
