from typing import Any


class GlispError(Exception):
    """ Base class for all Glisp errors"""

    @property
    def message(self) -> str:
        return str(self)


class GlispUnboundSymbol(GlispError):
    """ Raised when a symbol is used before it is bound"""


class GlispArityError(GlispError):
    """ Raised when the number of arguments does not match a parameter list"""


class GlispTypeError(GlispError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class GlispNotCallable(GlispTypeError):
    """ Raised when the head of an application is not a function"""


class ThrowException(GlispError):
    """Raised by the `throw` native. Carries the raw thrown value, which
    `try`/`catch` binds as-is instead of the message."""

    def __init__(self, value: Any):
        super().__init__(f"ThrowException(value={value!r})")
        self.value: Any = value
