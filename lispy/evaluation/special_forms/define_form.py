from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispySyntaxError
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.types.unspecified import Unspecified


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame; outer frames are never touched.
    """
    if len(tail) != 2:
        raise LispySyntaxError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispySyntaxError(f"define expects a symbol, got {name!r}")
    env.define(name, evaluate_fn(val_expr, env))
    return Unspecified
