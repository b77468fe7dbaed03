"""Application engine for lispy.

Centralizes the procedure-call protocol shared by the evaluator and by builtins
that call procedures (`map`, `apply`):
- Primitive: call the host function with the evaluated arguments.
- Lambda: bind arguments in a new frame parented to the closure's defining
  environment and evaluate the body there.
"""

import logging

from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyTypeError
from lispy.types.procedure import Lambda, Primitive

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Arity is strict: LispyArityError is raised by the new frame when the number
    of arguments differs from the number of formals.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Primitive; anything else is a type error."""
    if isinstance(head, Lambda):
        logger.debug("apply %r to %d argument(s)", head, len(args))
        return apply_lambda(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(*args)
    else:
        raise LispyTypeError(f"Cannot apply non-procedure {head!r}")
