"""Exceptions raised by veclite."""


class VecliteError(Exception):
    """Base exception for veclite errors.

    Users should be able to use this base class to catch any error
    raised on purpose by the package.
    """


class OutOfBoundsError(VecliteError, IndexError):
    """Index does not name an existing position in the container."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of bounds for length {length}")
