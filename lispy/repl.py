"""Interactive front-end: read a line, evaluate it, print the result.

Run with `python -m lispy` or the `lispy` console script. Given a file path,
the whole file is evaluated instead and the last value is printed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from lispy import config
from lispy.errors import LispyError
from lispy.interpreter import Interpreter
from lispy.printer import to_string

logger = logging.getLogger(__name__)

EXIT_COMMAND = "(exit)"


def repl(
    interp: Interpreter,
    prompt: str = config.DEFAULT_PROMPT,
    input_fn: Optional[Callable[[str], str]] = None,
    output: Optional[TextIO] = None,
) -> None:
    """Loop until EOF or `(exit)`; errors are reported and the loop continues."""
    input_fn = input_fn or input
    output = output or sys.stdout
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            output.write("\n")
            break
        if line.strip() == EXIT_COMMAND:
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except LispyError as e:
            logger.debug("evaluation failed: %s", type(e).__name__)
            output.write(f"error: {e}\n")
            continue
        text = to_string(result)
        if text:
            output.write(text + "\n")


def run_file(interp: Interpreter, path: Path, output: Optional[TextIO] = None) -> int:
    output = output or sys.stdout
    try:
        result = interp.eval(path.read_text())
    except LispyError as e:
        output.write(f"error: {e}\n")
        return 1
    text = to_string(result)
    if text:
        output.write(text + "\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lispy", description="A minimal Lisp interpreter"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Program to evaluate; starts an interactive session when omitted",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.get_log_level())
    try:
        limit = config.get_recursion_limit()
        if limit is not None:
            logger.info("setting recursion limit to %d", limit)
            sys.setrecursionlimit(limit)
    except (ValueError, OverflowError, RecursionError) as e:
        parser.error(f"invalid LISPY_RECURSION_LIMIT: {e}")

    interp = Interpreter()
    if args.file is not None:
        return run_file(interp, args.file)
    repl(interp, prompt=config.get_prompt())
    return 0
