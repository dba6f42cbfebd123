"""
Exceptions raised by the global alignment core
"""


class InvalidInputError(ValueError):
    """Bad sequences or scoring weights supplied by the caller"""


class CorruptStateError(RuntimeError):
    """
    Internal consistency failure.

    Raised when the traceback leaves the grid, meets a cell without an
    origin, walks longer than any legal path, or when a matrix is driven
    through its lifecycle out of order. Never expected from a correct fill.
    """
