# Core type aliases for the lispy data model.
# Plain Python objects represent both code (forms) and runtime values:
# float for numbers, Symbol for identifiers, list for lists, True/False for booleans.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, passed to special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
