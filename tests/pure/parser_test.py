import unittest

from lambdacalc.lang.error import ParseError, UnexpectedCharacter, UnexpectedEndOfInput, UnexpectedToken
from lambdacalc.pure.lexer import Lexer
from lambdacalc.pure.parser import Parser, parse
from lambdacalc.pure.term import Abstraction, Application, Variable
from lambdacalc.pure.token import Token, TokenKind

x, y, z = Variable("x"), Variable("y"), Variable("z")


class ParserTestCase(unittest.TestCase):

    def test_parse(self):
        cases = {
            "x": x,
            "\\x.x": Abstraction("x", x),
            "λx.x": Abstraction("x", x),
            "\\x.\\y.x": Abstraction("x", Abstraction("y", x)),
            "x y": Application(x, y),
            "x y z": Application(Application(x, y), z),
            "(\\x.x) y": Application(Abstraction("x", x), y),
            "(x (y z))": Application(x, Application(y, z)),
            "\\x.(x (\\y.y))": Abstraction("x", Application(x, Abstraction("y", y))),
            "λx. x y": Abstraction("x", Application(x, y)),
            "((x))": x,
            "(x y) z": Application(Application(x, y), z),
            "x (λy. y) z": Application(Application(x, Abstraction("y", y)), z),
            "λx. λy. x y z": Abstraction("x", Abstraction("y", Application(Application(x, y), z))),
            "foo bar1": Application(Variable("foo"), Variable("bar1")),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_unexpected_end_of_input(self):
        should_raise = ["", "   ", "λx.", "λx", "λ", "(x", "((x) y", "x (", "\\x. (y"]
        for case in should_raise:
            with self.assertRaises(UnexpectedEndOfInput, msg=case) as context:
                parse(case)
            self.assertIsInstance(context.exception, ParseError)

    def test_unexpected_token(self):
        should_raise = {
            "x y )": Token(TokenKind.RPAREN),
            ")": Token(TokenKind.RPAREN),
            "()": Token(TokenKind.RPAREN),
            "x λy.y": Token(TokenKind.LAMBDA),
            "(λx. x) λy. y": Token(TokenKind.LAMBDA),
            "λ.x": Token(TokenKind.DOT),
            "λx x": Token.binding("x"),
            "λ(x).x": Token(TokenKind.LPAREN),
            "x . y": Token(TokenKind.DOT),
            "(x y))": Token(TokenKind.RPAREN),
        }
        for case, token in should_raise.items():
            with self.assertRaises(UnexpectedToken, msg=case) as context:
                parse(case)
            self.assertEqual(token, context.exception.token, case)

    def test_error_position(self):
        with self.assertRaises(UnexpectedToken) as context:
            parse("x y )")
        self.assertEqual("x y )", context.exception.expr)
        self.assertEqual((4, 5), (context.exception.start, context.exception.end))

        with self.assertRaises(UnexpectedEndOfInput) as context:
            parse("λx.")
        self.assertEqual(3, context.exception.start)

    def test_lexical_errors_propagate(self):
        should_raise = ["x Y", "Abc", "λx. x + y", "#"]
        for case in should_raise:
            self.assertRaises(UnexpectedCharacter, parse, case)

    def test_token_iterable(self):
        tokens = [Token(TokenKind.LAMBDA), Token.binding("x"), Token(TokenKind.DOT), Token.binding("x")]
        self.assertEqual(Abstraction("x", x), Parser(tokens).parse())
        self.assertEqual(Application(x, y), Parser(Lexer("x y")).parse())

    def test_round_trip(self):
        cases = ["x", "λx. x", "x y z", "x (y z)", "(λx. x) (λy. y)", "λx. λy. x (y x)", "f (λx. x x) (g h)",
                 "λp. λq. p q p", "(λx. x) (λy. y y)", "(x) ((y))"]
        for case in cases:
            term = parse(case)
            self.assertEqual(term, parse(str(term)), case)


if __name__ == '__main__':
    unittest.main()
