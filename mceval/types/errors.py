
class MceError(Exception):
    """ Base class for all evaluator errors"""
    pass

class MceSyntaxError(MceError):
    """ Raised by the reader on malformed source text"""

class MceIncompleteInputError(MceSyntaxError):
    """ Raised by the reader when the source ends inside an expression or string"""

class MalformedFormError(MceError):
    """ Raised when a special form does not have the shape it requires"""

class UnboundVariableError(MceError):
    """ Raised when a variable is absent through the whole environment chain"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"Unbound variable {name}")
        self.name = name

class ArityError(MceError):
    """ Raised when parameter and argument counts differ in a procedure call"""

    def __init__(self, side: str, parameters, arguments):
        super().__init__(
            f"{side.capitalize()} arguments supplied: {list(parameters)} {list(arguments)}"
        )
        # "too many" or "too few", always from the point of view of the arguments
        self.side = side
        self.parameters = parameters
        self.arguments = arguments

class UnknownExpressionError(MceError):
    """ Raised when an expression matches no known shape"""

class UnknownProcedureError(MceError):
    """ Raised when applying a value that is not a procedure"""

class DuplicateFormError(MceError):
    """ Raised when a special-form tag is registered twice or used as a variable name"""

class MisplacedElseError(MceError):
    """ Raised when a cond else clause is not the last clause"""
