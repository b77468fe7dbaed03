from lispy.types.symbol import Symbol
from lispy.types.unspecified import Unspecified
from lispy.types.environment import Environment
from lispy.types.procedure import Procedure, Primitive, Lambda

__all__ = ["Symbol", "Unspecified", "Environment", "Procedure", "Primitive", "Lambda"]
