"""
Exception hierarchy for pystock.

Errors raised by client input or by a failing query inside a request are
translated into HTTP responses by the handlers in ``exception_handlers``.
The exceptions below cover the startup path, where failing is the only
sensible outcome.
"""


class PyStockError(Exception):
    """Base exception for all pystock errors."""

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "An unspecified pystock error occurred."
        super().__init__(message)


class ConfigurationError(PyStockError, ValueError):
    """
    Raised when a setting holds a value the service cannot use.

    Subclasses ``ValueError`` so settings validation reports it alongside
    other field errors.
    """


class DatabaseUnavailableError(PyStockError):
    """Raised at startup when the database cannot be reached."""
