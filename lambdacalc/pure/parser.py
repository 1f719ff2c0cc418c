"""Recursive descent parser for pure lambda calculus. Consumes a Lexer (or any iterator of Tokens) with a single token of
lookahead.

```
term ::= appl
       | LAMBDA BINDING DOT term    ; abstraction bodies are greedy: λx.x y = λx.(x y) != (λx.x) y
appl ::= appl atom                  ; associating by left: a b c d = (((a b) c) d)
       | atom
atom ::= LPAREN term RPAREN
       | BINDING
```

Abstractions are handled by parse_atom, but parse_application only keeps going while the lookahead is a BINDING or
LPAREN, so an unparenthesized abstraction can only appear first in an application chain: 'x λy.y' is rejected.
"""

from lambdacalc.lang.error import UnexpectedEndOfInput, UnexpectedToken
from lambdacalc.pure.lexer import Lexer
from lambdacalc.pure.term import Abstraction, Application, Variable
from lambdacalc.pure.token import TokenKind


class Parser:
    """Parses exactly one LambdaTerm out of tokens. source is only used for error messages."""
    ATOM_STARTS = (TokenKind.BINDING, TokenKind.LPAREN)

    def __init__(self, tokens, source=None):
        if source is None:
            source = getattr(tokens, "source", "")
        self.source = source
        self.tokens = iter(tokens)
        self.current = next(self.tokens, None)

    def parse(self):
        """Parses a whole term and requires the token stream to be exhausted afterwards."""
        term = self.parse_application()
        self.eof()
        return term

    def parse_application(self):
        term = self.parse_atom()
        while self.current is not None and self.current.kind in Parser.ATOM_STARTS:
            term = Application(term, self.parse_atom())
        return term

    def parse_atom(self):
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput(self.source)

        if token.kind is TokenKind.BINDING:
            return Variable(self.eat_binding())
        elif token.kind is TokenKind.LPAREN:
            return self.parse_parenthesized()
        elif token.kind is TokenKind.LAMBDA:
            return self.parse_abstraction()
        raise UnexpectedToken(token, self.source)

    def parse_parenthesized(self):
        self.eat(TokenKind.LPAREN)
        term = self.parse_application()
        self.eat(TokenKind.RPAREN)
        return term

    def parse_abstraction(self):
        self.eat(TokenKind.LAMBDA)
        param = self.eat_binding()
        self.eat(TokenKind.DOT)
        return Abstraction(param, self.parse_application())

    def peek(self):
        return self.current

    def next(self):
        """Consumes and returns the lookahead, raising UnexpectedEndOfInput if there is none."""
        token = self.current
        if token is None:
            raise UnexpectedEndOfInput(self.source)
        self.current = next(self.tokens, None)
        return token

    def eat(self, kind):
        token = self.next()
        if token.kind is not kind:
            raise UnexpectedToken(token, self.source)
        return token

    def eat_binding(self):
        return self.eat(TokenKind.BINDING).text

    def eof(self):
        if self.current is not None:
            raise UnexpectedToken(self.current, self.source)


def parse(source):
    """Parses source into a LambdaTerm. Raises a LexicalError or ParseError if source is not a valid λ-term."""
    return Parser(Lexer(source)).parse()
