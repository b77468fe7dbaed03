
class LispyError(Exception):
    """ Base class for all lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised for malformed program text or a malformed special form"""

class LispyUnboundVariable(LispyError):
    """ Raised when a symbol is looked up but bound in no frame"""

class LispyTypeError(LispyError):
    """ Raised for an unknown expression shape, a call of a non-procedure,
    or operands of the wrong kind"""

class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class LispyRecursionError(LispyError):
    """ Raised when evaluation exhausts the host stack"""
