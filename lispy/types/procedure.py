"""Callable values: host primitives and user-defined closures.

Both share the Procedure base so the evaluator can tell callables from data with
a single isinstance check; how each is invoked lives in lispy.evaluation.apply.
"""

from __future__ import annotations

from typing import Callable

from lispy import SExpression, LispValue
from lispy.errors import LispyError, LispyTypeError
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


class Procedure:
    """Common capability of everything that may appear in operator position."""

    __slots__ = ()


class Primitive(Procedure):
    """A host-implemented procedure taking positional Lisp values."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, *args: LispValue) -> LispValue:
        try:
            return self.fn(*args)
        except LispyError:
            raise
        except TypeError as e:
            raise LispyTypeError(f"{self.name}: {e}") from e
        except (ArithmeticError, ValueError) as e:
            raise LispyError(f"{self.name}: {e}") from e

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"


class Lambda(Procedure):
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # The defining frame, not the caller's
        self.env: Environment = env

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Return a fresh frame binding params to `args`, parented to the closure env."""
        return Environment(self.params, args, self.env)

    def __repr__(self) -> str:
        return f"<Lambda ({' '.join(str(p) for p in self.params)})>"
