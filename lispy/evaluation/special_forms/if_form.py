from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispySyntaxError
from lispy.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise LispySyntaxError("if requires a test, a consequent and an alternative")

    test, conseq, alt = tail
    # Only #f is false: 0 and the empty list count as true
    if evaluate_fn(test, env) is False:
        return evaluate_fn(alt, env)
    return evaluate_fn(conseq, env)
