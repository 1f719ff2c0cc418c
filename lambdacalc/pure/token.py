"""Lexical atoms of pure lambda calculus: '(', ')', 'λ' (or '\\'), '.', and bindings (lowercase identifiers)."""

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    LAMBDA = "λ"
    DOT = "."
    BINDING = "<binding>"


@dataclass(frozen=True)
class Token:
    """Single token. text is only set for bindings; start is the offset of the token in its source expression and is
    ignored when comparing tokens.
    """
    kind: TokenKind
    text: str = None
    start: int = field(default=0, compare=False)

    @classmethod
    def binding(cls, name, start=0):
        return cls(TokenKind.BINDING, name, start)

    @property
    def end(self):
        return self.start + len(self.text if self.kind is TokenKind.BINDING else self.kind.value)

    def __str__(self):
        if self.kind is TokenKind.BINDING:
            return self.text
        return self.kind.value

    def __repr__(self):
        if self.kind is TokenKind.BINDING:
            return f"Binding('{self.text}')"
        return {
            TokenKind.LPAREN: "LParen",
            TokenKind.RPAREN: "RParen",
            TokenKind.LAMBDA: "Lambda",
            TokenKind.DOT: "Dot",
        }[self.kind]
