
class MinimaError(Exception):
    """ Base class for all Minima errors"""
    pass

class MinimaLexicalError(MinimaError):
    """ Raised when an illegal character is met while scanning an atom"""
    pass

class MinimaSyntaxError(MinimaError):
    """ Raised when the reader meets a token it did not expect"""

class MinimaUnboundAtom(MinimaError):
    """ Raised when an atom has no binding in the environment"""

class MinimaTypeError(MinimaError):
    """ Raised when a value has the wrong shape, e.g. car of an atom"""

class MinimaArityError(MinimaTypeError):
    """ Raised when parameter and argument lists differ in length"""

class MinimaEvalError(MinimaError):
    """ Raised when no evaluation rule matches an expression"""
