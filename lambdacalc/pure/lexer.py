"""Pure lambda calculus lexer. Turns a source string into a lazy sequence of Tokens.

```
"(" -> LParen        ")" -> RParen        "." -> Dot
"λ" | "\\" -> Lambda
[a-z][a-zA-Z0-9]* -> Binding               ; ASCII only, matched greedily
```

Whitespace separates tokens and is otherwise ignored. Any other character is an error: uppercase-led identifiers are
not bindings.
"""

from lambdacalc.lang.error import UnexpectedCharacter
from lambdacalc.pure.token import Token, TokenKind


class Lexer:
    """Iterator over the tokens of source. Raises UnexpectedCharacter from __next__ on the first character that cannot
    start a token; the character is not consumed.
    """
    LAMBDAS = ("λ", "\\")
    SINGLES = {"(": TokenKind.LPAREN, ")": TokenKind.RPAREN, ".": TokenKind.DOT}

    def __init__(self, source):
        self.source = source
        self.pos = 0

    def __iter__(self):
        return self

    def __next__(self):
        self._skip_whitespace()
        if self.pos >= len(self.source):
            raise StopIteration

        start = self.pos
        char = self.source[start]

        if char in Lexer.SINGLES:
            self.pos += 1
            return Token(Lexer.SINGLES[char], start=start)
        elif char in Lexer.LAMBDAS:
            self.pos += 1
            return Token(TokenKind.LAMBDA, start=start)
        elif Lexer.is_binding_start(char):
            return self._read_binding()

        raise UnexpectedCharacter(char, start, self.source)

    @staticmethod
    def is_binding_start(char):
        return "a" <= char <= "z"

    @staticmethod
    def is_binding_char(char):
        return char.isascii() and char.isalnum()

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1

    def _read_binding(self):
        start = self.pos
        while self.pos < len(self.source) and Lexer.is_binding_char(self.source[self.pos]):
            self.pos += 1
        return Token.binding(self.source[start:self.pos], start)


def tokenize(source):
    """Returns every token of source as a list. Mostly useful for debugging/tests; Parser consumes Lexer lazily."""
    return list(Lexer(source))
