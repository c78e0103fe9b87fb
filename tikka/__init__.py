"""
Tikka: token count tables with empty-count diagnostics.

Tikka provides the count bookkeeping used by count-based text models
(topic models, token counters): a table of non-negative integer cells
keyed by (token, index), and a dedicated error, EmptyCountError, raised
whenever something tries to decrement a cell that is already zero.

Quick Start:
    >>> from tikka import TokenCounts, EmptyCountError
    >>>
    >>> counts = TokenCounts.from_documents(texts)
    >>> try:
    ...     counts.decrement("the", 42)
    ... except EmptyCountError as e:
    ...     e.emit()  # writes the diagnostic line to stderr

Diagnostics:
    EmptyCountError renders one of two stable messages:
        You are trying to decrement an empty cell.
        You are trying to decrement "the" of index 42, which is an empty cell.

Classes:
    TokenCounts: Non-negative counts keyed by (token, index).
    TikkaError: Base class for all tikka errors.
    EmptyCountError: Raised when decrementing an empty cell.
    UnknownTokenError: Raised for tokens outside a table's vocabulary.
"""

__version__ = "0.1.0"
__author__ = "Taesun Moon"

# Count tables
from .counts import TokenCounts

# Exceptions
from .exceptions import (
    ANONYMOUS_MESSAGE,
    IDENTIFIED_MESSAGE,
    TikkaError,
    EmptyCountError,
    UnknownTokenError,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Count tables
    "TokenCounts",
    # Exceptions
    "TikkaError",
    "EmptyCountError",
    "UnknownTokenError",
    # Message templates
    "ANONYMOUS_MESSAGE",
    "IDENTIFIED_MESSAGE",
]
