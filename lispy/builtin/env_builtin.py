"""Built-in procedures for the lispy runtime environment.

This module defines arithmetic, comparison, list processing, predicates,
application helpers and the host math bindings exposed to Lisp code, and
`standard_env`, which builds a fresh root Environment holding all of them.
"""
from __future__ import annotations

import math
import operator
import sys
from typing import Callable

from lispy import LispValue
from lispy.errors import LispyArityError, LispyError, LispyTypeError
from lispy.evaluation.apply import apply as apply_engine
from lispy.evaluation.evaluator import evaluate
from lispy.printer import to_string
from lispy.types.environment import Environment
from lispy.types.procedure import Procedure, Primitive
from lispy.types.symbol import Symbol
from lispy.types.unspecified import Unspecified


def is_number(x: LispValue) -> bool:
    """Numbers are ints and floats, but never booleans."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: tuple) -> tuple:
    for a in args:
        if not is_number(a):
            raise LispyTypeError(f"All arguments to {name} must be numbers, got {to_string(a)}")
    return args


def _list_arg(name: str, x: LispValue) -> list:
    if not isinstance(x, list):
        raise LispyTypeError(f"{name} expects a list, got {to_string(x)}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: LispValue) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args), 0.0)


def sub(*args: LispValue) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise LispyArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(*args: LispValue) -> LispValue:
    """Return the product of all arguments."""
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result


def div(*args: LispValue) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise LispyArityError("/ requires at least 1 argument")
    first, *rest = _numbers("/", args)
    if not rest:
        first, rest = 1.0, [first]
    try:
        for x in rest:
            first /= x
    except ZeroDivisionError:
        raise LispyError("Division by zero")
    return first


def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]) -> Callable:
    def compare(a: LispValue, b: LispValue) -> bool:
        _numbers(name, (a, b))
        return op(a, b)
    return compare


def extremum(name: str, pick: Callable) -> Callable:
    def fn(*args: LispValue) -> LispValue:
        if not args:
            raise LispyArityError(f"{name} requires at least 1 argument")
        return pick(_numbers(name, args))
    return fn


# -------------------------------
# Lists
# -------------------------------
def car(xs: LispValue) -> LispValue:
    """Return the first element of a non-empty list."""
    xs = _list_arg("car", xs)
    if not xs:
        raise LispyTypeError("car of empty list")
    return xs[0]


def cdr(xs: LispValue) -> list[LispValue]:
    """Return all but the first element of a non-empty list."""
    xs = _list_arg("cdr", xs)
    if not xs:
        raise LispyTypeError("cdr of empty list")
    return xs[1:]


def cons(head: LispValue, tail: LispValue) -> list[LispValue]:
    """Construct a new list by prepending head to the list tail (non-destructive)."""
    return [head] + _list_arg("cons", tail)


def append(*lists: LispValue) -> list[LispValue]:
    """Concatenate lists into a new list."""
    result: list[LispValue] = []
    for xs in lists:
        result.extend(_list_arg("append", xs))
    return result


def length(xs: LispValue) -> float:
    return float(len(_list_arg("length", xs)))


def list_builtin(*args: LispValue) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


def begin(*args: LispValue) -> LispValue:
    """Sequencing: arguments are already evaluated left-to-right, so return the last."""
    return args[-1] if args else Unspecified


def map_builtin(fn: LispValue, *lists: LispValue) -> list[LispValue]:
    """(map f xs ys ...) applies f element-wise, stopping at the shortest list."""
    if not lists:
        raise LispyArityError("map requires a procedure and at least 1 list")
    columns = zip(*(_list_arg("map", xs) for xs in lists))
    return [apply_engine(fn, list(column), evaluate) for column in columns]


def apply_builtin(fn: LispValue, args: LispValue) -> LispValue:
    """(apply f args) calls f with the elements of the list args."""
    return apply_engine(fn, list(_list_arg("apply", args)), evaluate)


# -------------------------------
# Equality and predicates
# -------------------------------
def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity for lists and procedures, value equality for atoms of the same kind."""
    if isinstance(a, (list, Procedure)) or isinstance(b, (list, Procedure)):
        return a is b
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, with element-wise comparison for lists."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return is_eq(a, b)


def logical_not(x: LispValue) -> bool:
    """Only #f is false, so (not 0) is #f."""
    return x is False


def is_null(x: LispValue) -> bool:
    return x == [] if isinstance(x, list) else False


def display_env(env: Environment) -> Callable[[], LispValue]:
    """Build the `env?` builtin: write each frame of `env` to stdout."""
    def show() -> LispValue:
        for level, frame in enumerate(env.frames()):
            sys.stdout.write(f"Environment level {level}:\n")
            for name, value in frame.vars.items():
                sys.stdout.write(f"  {name}: {to_string(value)}\n")
        return Unspecified
    return show


INTEGER_MATH = frozenset({"factorial", "comb", "perm", "isqrt", "gcd", "lcm"})


def integral_args(fn: Callable[..., LispValue]) -> Callable[..., LispValue]:
    """Pass integral floats to an int-only host function as ints."""
    def call(*args: LispValue) -> LispValue:
        return fn(*(int(a) if isinstance(a, float) and a.is_integer() else a for a in args))
    return call


def math_bindings() -> dict[Symbol, LispValue]:
    """Expose the host math module: functions lower-case, constants upper-case."""
    bindings: dict[Symbol, LispValue] = {}
    for name in dir(math):
        if name.startswith("_"):
            continue
        value = getattr(math, name)
        if callable(value):
            if name in INTEGER_MATH:
                value = integral_args(value)
            bindings[Symbol(name.lower())] = Primitive(name.lower(), value)
        elif is_number(value):
            bindings[Symbol(name.upper())] = value
    return bindings


def register(env: Environment) -> None:
    """Register all builtin procedures and constants into the given environment."""
    env.update(math_bindings())
    procedures: dict[str, Callable[..., LispValue]] = {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        ">": _comparison(">", operator.gt),
        "<": _comparison("<", operator.lt),
        ">=": _comparison(">=", operator.ge),
        "<=": _comparison("<=", operator.le),
        "=": _comparison("=", operator.eq),
        "append": append,
        "apply": apply_builtin,
        "begin": begin,
        "car": car,
        "cdr": cdr,
        "cons": cons,
        "eq?": is_eq,
        "equal?": is_equal,
        "length": length,
        "list": list_builtin,
        "list?": lambda x: isinstance(x, list),
        "map": map_builtin,
        "max": extremum("max", max),
        "min": extremum("min", min),
        "not": logical_not,
        "null?": is_null,
        "number?": is_number,
        "procedure?": lambda x: isinstance(x, Procedure),
        "symbol?": lambda x: isinstance(x, Symbol),
        "env?": display_env(env),
    }
    env.update({Symbol(name): Primitive(name, fn) for name, fn in procedures.items()})
    env.define(Symbol("#t"), True)
    env.define(Symbol("#f"), False)


def standard_env() -> Environment:
    """Return a fresh root Environment populated with the builtins."""
    env = Environment()
    register(env)
    return env
