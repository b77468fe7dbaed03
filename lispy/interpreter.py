from __future__ import annotations

import logging

from lispy import LispValue
from lispy.errors import LispyRecursionError
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import parse_all
from lispy.types.environment import Environment
from lispy.types.unspecified import Unspecified
from lispy.builtin.env_builtin import standard_env

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating lispy code.
    Keeps one root Environment alive across calls so definitions persist.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else standard_env()

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the value of the last one."""
        result: LispValue = Unspecified
        # Read the whole program first: a syntax error evaluates nothing
        exprs = list(parse_all(code))
        try:
            for expr in exprs:
                result = evaluate(expr, self.env)
        except RecursionError as e:
            logger.debug("host stack exhausted while evaluating %r", code)
            raise LispyRecursionError("maximum recursion depth exceeded") from e
        return result
