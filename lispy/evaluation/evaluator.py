"""Core evaluator for the lispy interpreter.

Plain recursive evaluation: every nested call grows the host stack, so deeply
recursive programs end in RecursionError. There is no tail-call elimination.
"""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.errors import LispyTypeError
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.evaluation.apply import apply
from lispy.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case bool():
            raise LispyTypeError(f"unknown expression type: {expr!r}")

        case int() | float():
            return expr

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(proc, args, evaluate)

        case []:
            raise LispyTypeError("cannot evaluate empty list")

    raise LispyTypeError(f"unknown expression type: {expr!r}")
