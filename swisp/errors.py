class SwispError(Exception):
    """ Base class for all Swisp errors"""

class SwispSyntaxError(SwispError):
    """ Raised for malformed input or a special form used with the wrong shape"""

class SwispApplicationError(SwispError):
    """ Raised when the head of an application is not a procedure"""

class SwispTypeError(SwispError):
    """ Raised when a procedure receives an argument of the wrong kind"""

class SwispArityError(SwispError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SwispUndefinedIdentifier(SwispError):
    """ Raised when a symbol has no binding in the environment chain"""

class SwispArithmeticError(SwispError):
    """ Raised when decimal arithmetic fails, e.g. division by zero"""
