"""
Custom exceptions for the tikka package.

This module defines exception classes used throughout the tikka library
to provide clear error messages when count tables are misused. The most
important one is EmptyCountError, raised when a caller tries to decrement
a cell that is already zero.

The two EmptyCountError messages are stable: downstream tooling greps
standard error for them, so they must not change.
"""

import sys
from typing import Optional, TextIO

ANONYMOUS_MESSAGE = "You are trying to decrement an empty cell."
IDENTIFIED_MESSAGE = (
    'You are trying to decrement "{token}" of index {index}, '
    "which is an empty cell."
)


class TikkaError(Exception):
    """
    Base exception class for all tikka-related errors.

    This exception serves as the parent class for more specific exceptions
    and can be used to catch any error raised by the tikka library.

    Example:
        >>> try:
        ...     counts.decrement("the", 0)
        ... except TikkaError as e:
        ...     print(f"Tikka error: {e}")
    """
    pass


class EmptyCountError(TikkaError):
    """
    Raised when a decrement would drive a count cell below zero.

    The error is either anonymous (no identifying context) or identified
    by the token and index of the offending cell. The two kinds render
    different diagnostics:

        You are trying to decrement an empty cell.
        You are trying to decrement "the" of index 42, which is an empty cell.

    The token is inserted verbatim, without escaping, and the index in
    decimal. Neither value is validated.

    Attributes:
        token: Token of the offending cell, or None when anonymous.
        index: Index of the offending cell, or None when anonymous.

    Example:
        >>> err = EmptyCountError.identified("the", 42)
        >>> err.render()
        'You are trying to decrement "the" of index 42, which is an empty cell.'
        >>> EmptyCountError().render()
        'You are trying to decrement an empty cell.'
    """

    def __init__(self, token: Optional[str] = None, index: Optional[int] = None):
        """
        Initialize the error.

        Args:
            token: Token of the cell that could not be decremented.
            index: Index of the cell that could not be decremented.

        Raises:
            ValueError: If only one of token and index is given.
        """
        if (token is None) != (index is None):
            raise ValueError(
                "token and index must be given together or not at all"
            )
        self._token = token
        self._index = index
        super().__init__(self.render())

    @classmethod
    def anonymous(cls) -> "EmptyCountError":
        """Create an error with no identifying context."""
        return cls()

    @classmethod
    def identified(cls, token: str, index: int) -> "EmptyCountError":
        """Create an error identifying the cell by token and index."""
        return cls(token, index)

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def is_anonymous(self) -> bool:
        return self._token is None

    def render(self) -> str:
        """
        Render the single-line diagnostic for this error.

        Returns:
            str: The identified form when token and index were given,
                 the anonymous form otherwise.
        """
        if self.is_anonymous:
            return ANONYMOUS_MESSAGE
        return IDENTIFIED_MESSAGE.format(token=self._token, index=self._index)

    def emit(self, stream: Optional[TextIO] = None) -> None:
        """
        Write the diagnostic and a newline to a stream.

        The line is written with a single write call. If the stream is
        missing, closed or fails, the message is dropped silently.

        Args:
            stream: Destination stream. Defaults to sys.stderr at call time.
        """
        if stream is None:
            stream = sys.stderr
        if stream is None:
            return
        try:
            stream.write(self.render() + "\n")
            flush = getattr(stream, "flush", None)
            if flush is not None:
                flush()
        except (AttributeError, OSError, ValueError):
            # closed, broken or not a stream
            pass

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.is_anonymous:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}(token={self._token!r}, index={self._index!r})"

    def __reduce__(self):
        return (type(self), (self._token, self._index))


class UnknownTokenError(TikkaError, KeyError):
    """
    Raised when a token is not part of a count table's vocabulary.

    This exception is raised when:
    - A cell is read for a token the table does not know
    - Increment or decrement is called with an unknown token
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(token)

    def __str__(self) -> str:
        return f"Unknown token: {self.token!r}"
