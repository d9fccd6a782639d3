"""Exception and warning types raised by geomforge.

Every public operation validates its arguments before doing any work, so
these are raised synchronously by the call that received the bad input.
"""

from typing import Optional


class GeomforgeError(Exception):
    """Base class for all geomforge errors.

    Attributes:
        argument: Name of the offending argument, if any
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument

    def __str__(self) -> str:
        message = super().__str__()
        if self.argument:
            return f"{message} (argument: {self.argument})"
        return message


class NullArgumentError(GeomforgeError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"The {argument} is null.", argument)


class ShapePreconditionError(GeomforgeError, ValueError):
    """Raised when a ring, window or envelope violates a shape precondition."""
    pass


class ConfigurationError(GeomforgeError, ValueError):
    """Raised when a precision model is configured with invalid settings."""
    pass


class RepairWarning(UserWarning):
    """Emitted when ring repair collapses a shell or drops holes."""
    pass


def require(value, argument: str, message: Optional[str] = None):
    """Return ``value`` unchanged, raising NullArgumentError if it is None."""
    if value is None:
        raise NullArgumentError(argument, message)
    return value


__all__ = [
    'GeomforgeError',
    'NullArgumentError',
    'ShapePreconditionError',
    'ConfigurationError',
    'RepairWarning',
    'require',
]
