class MinipythError(Exception):
    """ Base class for all Minipyth errors"""
    pass

class MinipythStructuralError(MinipythError):
    """ Raised when a program cannot be resolved into a composition tree"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message if position is None else f"{message} (at {position})")
        self.message = message
        self.position = position

class MinipythSyntaxError(MinipythStructuralError):
    """ Raised when a program contains a character outside the opcode catalog"""

class MinipythResourceError(MinipythError):
    """ Raised when an iterative operator exceeds the configured step limit"""
