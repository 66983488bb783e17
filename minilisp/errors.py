

class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispSyntaxError(MiniLispError):
    """ Raised when a form is missing a parenthesis or starts with an unexpected token"""
    pass

class ArithmeticFailure(MiniLispError):
    """ Raised when an arithmetic fold overflows int32 or divides by zero"""

    def __init__(self, message: str = "failed calculation"):
        super().__init__(message)

class UnboundIdentifierError(MiniLispError):
    """ Raised when a symbol names neither a variable nor a function"""

class MalformedDeclarationError(MiniLispError):
    """ Raised when setq or defun is missing a name, a value or a parameter list"""

class ArityError(MiniLispError):
    """ Raised when a function is called with the wrong number of arguments"""

class CallDepthError(MiniLispError):
    """ Raised when evaluation nests deeper than the configured limit"""
