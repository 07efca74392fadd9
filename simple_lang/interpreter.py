"""Line-oriented driver around the tokenizer, parser and evaluator.

A `Session` owns one variable environment for the lifetime of a run, so
variables assigned while running a file stay visible in the interactive
prompt that may follow it.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from simple_lang.parser import ParserError, parse
from simple_lang.runtime import CalcRuntimeError, Variables, evaluate
from simple_lang.tokenizer import tokenize
from simple_lang.utils import error_channel, format_number

logger = logging.getLogger(__name__)

BANNER = "Simple Language Interpreter (type 'exit' to quit)"
PROMPT = ">> "
EXIT_COMMAND = "exit"


def evaluate_code(code: str, variables: Variables, errors: Optional[TextIO] = None) -> float:
    """Tokenize, parse and evaluate one line, propagating ParserError and CalcRuntimeError."""
    tokens = tokenize(code, errors=errors)
    expression = parse(tokens)
    return evaluate(expression, variables)


def evaluate_line(code: str, variables: Variables, errors: Optional[TextIO] = None) -> float:
    """Evaluate one line, reporting failures to the error channel and returning 0.0 instead."""
    try:
        return evaluate_code(code, variables, errors=errors)
    except (ParserError, CalcRuntimeError) as e:
        print(e, file=error_channel(errors))
        return 0.0


class Session:
    def __init__(self, out: Optional[TextIO] = None, errors: Optional[TextIO] = None) -> None:
        self.variables: Variables = {}
        self.out = out if out is not None else sys.stdout
        self.errors = error_channel(errors)

    def evaluate_line(self, code: str) -> float:
        return evaluate_line(code, self.variables, errors=self.errors)

    def run_file(self, path: str | Path) -> None:
        """Evaluate a file line by line, printing each result with its 1-based line number.

        Blank lines and lines starting with '#' are skipped but still counted. A failing
        line is reported and the remaining lines are still evaluated.
        """
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.read().split("\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.info("could not read %s: %s", path, e)
            print(f"Could not open file: {path}", file=self.errors)
            return

        for line_number, line in enumerate(lines, start=1):
            if not line.strip() or line.startswith("#"):
                continue
            try:
                result = evaluate_code(line, self.variables, errors=self.errors)
            except (ParserError, CalcRuntimeError) as e:
                print(f"Error at line {line_number}: {e}", file=self.errors)
                continue
            print(f"Line {line_number}: {format_number(result)}", file=self.out)

    def run_interactive(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        if read_line is None:
            read_line = input
        print(BANNER, file=self.out)
        while True:
            try:
                code = read_line(PROMPT)
            except EOFError:
                print(file=self.out)
                break

            if code == EXIT_COMMAND:
                break

            result = self.evaluate_line(code)
            print(format_number(result), file=self.out)
