"""Render lispy values as text.

Lists print parenthesized and space-separated, procedures as opaque markers,
booleans as #t / #f, and Unspecified as the empty string.
"""

import math
from io import StringIO

from lispy import LispValue
from lispy.types.procedure import Lambda, Primitive
from lispy.types.unspecified import UnspecifiedType


def _format_number(x: float | int) -> str:
    if isinstance(x, float) and x.is_integer() and abs(x) < 1e16:
        # int() drops the sign of -0.0
        sign = "-" if math.copysign(1.0, x) < 0 else ""
        return sign + str(abs(int(x)))
    return repr(x)


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case Lambda():
            buffer.write("#<procedure>")
        case Primitive():
            buffer.write("#<builtin-procedure>")
        case True:
            buffer.write("#t")
        case False:
            buffer.write("#f")
        case UnspecifiedType():
            pass
        case int() | float():
            buffer.write(_format_number(value))
        case _:
            buffer.write(str(value))


def to_string(value: LispValue) -> str:
    """Return the printed form of `value`."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
