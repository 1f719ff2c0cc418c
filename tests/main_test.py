import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

from lambdacalc.main import build_parser, main


class MainTestCase(unittest.TestCase):

    def run_main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue()

    def run_failing(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as context:
                main(list(argv))
        self.assertEqual(1, context.exception.code)
        return out.getvalue()

    def test_expr(self):
        out = self.run_main("-e", "(λx. λy. x) (λy. y) (λx. x)")
        self.assertEqual("original: ((λx. λy. x) (λy. y)) (λx. x)\nsimplified: λy. y\n", out)

    def test_file(self):
        fd, path = tempfile.mkstemp(suffix=".lc")
        with os.fdopen(fd, "w", encoding="utf-8") as file:
            file.write(";; K combinator\n(\\x. \\y. x) a b\n")
        self.addCleanup(os.remove, path)

        self.assertEqual("original: ((λx. λy. x) a) b\nsimplified: a\n", self.run_main(path))

    def test_errors(self):
        self.assertIn("has unexpected token", self.run_failing("-e", "x y )"))
        self.assertIn("ended unexpectedly", self.run_failing("-e", "λx."))
        self.assertIn("has unexpected character", self.run_failing("-e", "Ax"))
        self.assertIn("could not be opened", self.run_failing("does/not/exist.lc"))

    def test_max_steps(self):
        self.assertIn("no normal form within", self.run_failing("--max-steps", "5", "-e", "(λx. x x) (λx. x x)"))

    def test_capture_avoiding(self):
        self.assertIn("simplified: λy0. y", self.run_main("--capture-avoiding", "-e", "(λx. λy. x) y"))
        self.assertIn("simplified: λy. y", self.run_main("-e", "(λx. λy. x) y"))

    def test_trace(self):
        self.assertIn("β: ", self.run_main("--trace", "-e", "(λx. x) y"))
        self.assertNotIn("β: ", self.run_main("-e", "(λx. x) y"))

    def test_recursion_limit(self):
        self.addCleanup(sys.setrecursionlimit, sys.getrecursionlimit())
        self.run_main("--recursion-limit", "5000", "-e", "x")
        self.assertEqual(5000, sys.getrecursionlimit())

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.file)
        self.assertIsNone(args.expr)
        self.assertIsNone(args.max_steps)
        self.assertFalse(args.capture_avoiding)
        self.assertFalse(args.trace)


if __name__ == '__main__':
    unittest.main()
