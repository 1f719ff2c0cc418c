"""Handles interactive/command-line mode for lambdacalc. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Reduces an arbitrary λ-term."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = self.sess.preprocess_line(f"{self._tmp_line} {line}" if self._tmp_line else line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            if not line.strip():
                return  # comment-only line

            self.sess.add(line.strip(), self.line_num)
            self.sess.run()
            self.sess.pop()  # already printed

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro. 'help x' is a term, so it is reduced."""
        if arg:
            return self.default(f"help {arg}")

        print("Welcome to the lambdacalc interpreter!\n\n"
              "Lambda calculus is a Turing-complete language created by Alonzo Church. This \n"
              "interpreter supports pure lambda calculus: variables, abstractions (written \n"
              "'λx. M' or '\\x. M') and applications. Terms are reduced in applicative order.\n\n"
              "Try it out by typing '(\\x. x) y'. This will apply the identity function to 'y', \n"
              "giving 'y' as the result.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter. 'exit y' is a term, so it is reduced."""
        if arg:
            return self.default(f"exit {arg}")
        return True
