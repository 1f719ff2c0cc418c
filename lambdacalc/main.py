"""Runs lambdacalc on a file, a single expression, or in command-line mode. Also uses error handling context manager.
Called from the lambdacalc console script.
"""

import argparse
import sys

from lambdacalc.lang.error import ErrorHandler
from lambdacalc.lang.session import Session
from lambdacalc.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="lambdacalc", description="Pure lambda calculus interpreter.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("-e", "--expr", help="reduce a single λ-term and exit")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="give up after this many β-reductions (default: no limit)")
    parser.add_argument("--capture-avoiding", action="store_true",
                        help="α-rename binders instead of capturing substituted free variables")
    parser.add_argument("--trace", action="store_true", help="print every β-reduct")
    parser.add_argument("--recursion-limit", type=int, default=None,
                        help="Python recursion limit, for deeply nested terms")
    return parser


def main(argv=None):
    """Runs lambdacalc interpreter. Called from lambdacalc executable script."""
    args = build_parser().parse_args(argv)

    if args.recursion_limit is not None:
        sys.setrecursionlimit(args.recursion_limit)

    options = {"max_steps": args.max_steps, "capture_avoiding": args.capture_avoiding}

    with ErrorHandler(trace=args.trace) as error_handler:
        if args.expr is not None:
            sess = Session(error_handler, Session.EXPR_FILE, cmd_line=False, **options)
            sess.add(args.expr, 1)
            sess.run()

        elif args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, **options)
            sess.run()

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, **options)).cmdloop()


if __name__ == "__main__":
    main()
