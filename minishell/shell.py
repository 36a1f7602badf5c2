"""The interactive prompt loop and the command entry point."""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence, TextIO

from .tokenizer import TooManyTokensError, format_tokens, tokenize

PROMPT = "\033[1;34m👯 minishell> \033[0m"
NO_ARGS = "Error. Execution don't allow arguments\n"
EXIT = "exit\n"

Reader = Callable[[str], Optional[str]]


class Shell:
    """Read lines, record history and print the tokens of each line."""

    def __init__(
        self,
        reader: Optional[Reader] = None,
        output: Optional[TextIO] = None,
        errors: Optional[TextIO] = None,
    ) -> None:
        self._reader = reader
        self._output = output
        self._errors = errors
        self.history: List[str] = []

    @property
    def output(self) -> TextIO:
        return sys.stdout if self._output is None else self._output

    @property
    def errors(self) -> TextIO:
        return sys.stderr if self._errors is None else self._errors

    def _read(self) -> Optional[str]:
        reader = input if self._reader is None else self._reader
        try:
            return reader(PROMPT)
        except EOFError:
            return None

    def handle_line(self, line: str) -> List[str]:
        """Record ``line`` in the history if not empty, then print its tokens."""
        if line:
            self.history.append(line)
        tokens = tokenize(line)
        self.output.write(format_tokens(tokens))
        return tokens

    def run(self) -> int:
        """Loop until end of input, then write ``exit`` to the error stream."""
        while True:
            line = self._read()
            if line is None:
                self.errors.write(EXIT)
                break
            try:
                self.handle_line(line)
            except TooManyTokensError as error:
                self.errors.write(f"minishell: {error}\n")
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the shell; any argument is refused with a message."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        try:
            sys.stderr.write(NO_ARGS)
        except OSError:
            return 1
        return 0
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())