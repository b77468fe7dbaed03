from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispySyntaxError
from lispy.types.environment import Environment
from lispy.types.procedure import Lambda
from lispy.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression, no implicit sequence.
    # Use the `begin` builtin to sequence several expressions.
    if len(tail) != 2:
        raise LispySyntaxError("lambda requires a parameter list and a single body")

    params, body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise LispySyntaxError(f"lambda parameters must be a list of symbols, got {params!r}")
    if len(set(params)) != len(params):
        raise LispySyntaxError("lambda parameters must be distinct")

    return Lambda(list(params), body, env)
