"""Runtime environment for lispy.

An Environment is one frame of a lexical scope chain: a mapping of Symbols to
evaluated values plus an `outer` link to the enclosing frame. Frames are created
per procedure call and parented to the frame the procedure was defined in, so a
frame lives exactly as long as some closure or active call still refers to it.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from lispy import LispValue
from lispy.errors import LispyArityError, LispySyntaxError, LispyUnboundVariable
from lispy.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        params: Sequence[Symbol] = (),
        args: Sequence[LispValue] = (),
        outer: Optional[Environment] = None,
    ):
        if len(params) != len(args):
            raise LispyArityError(
                f"Expected {len(params)} argument(s), got {len(args)}"
            )
        self.vars: dict[Symbol, LispValue] = dict(zip(params, args))
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        Enclosing frames are never searched or modified, so a define inside a
        procedure body shadows rather than overwrites an outer binding.
        """
        if not isinstance(name, Symbol):
            raise LispySyntaxError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def is_bound(self, symbol: Symbol) -> bool:
        return self.find(symbol) is not None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises LispyUnboundVariable if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LispyUnboundVariable(f"Undefined variable: {name}")
        return env.vars[name]

    def frames(self) -> Iterator[Environment]:
        """Yield this frame and then each enclosing frame up to the root."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __repr__(self) -> str:
        depth = sum(1 for _ in self.frames())
        return f"<Environment {len(self.vars)} binding(s), depth {depth}>"
