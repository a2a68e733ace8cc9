
class QuillError(Exception):
    """ Base class for all Quill errors"""

    tag = "Error"

    def format(self) -> str:
        message = str(self)
        if message:
            return f"Error: {self.tag}: {message}"
        return f"Error: {self.tag}"


class QuillParseError(QuillError):
    """ Raised when the input text is not exactly one well-formed expression"""
    tag = "ParseError"


class QuillTypeError(QuillError):
    """ Raised when a value has the wrong shape for an operation"""
    tag = "TypeError"


class QuillArityError(QuillError):
    """ Raised when the number of arguments passed to a callable is incorrect"""
    tag = "ArityError"


class QuillNotFoundError(QuillError):
    """ Raised when a symbol is not bound anywhere in the scope chain"""
    tag = "NotFoundError"

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


class QuillEvalError(QuillError):
    """ Raised for any other evaluation failure"""
    tag = "EvalError"
