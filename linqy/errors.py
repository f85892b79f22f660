"""
error types raised by terminal operations.

every error derives from LinqyError and from the builtin exception a caller
would expect (ValueError, IndexError), so plain `except ValueError` still works.
"""


class LinqyError(Exception):
    """base class for all errors raised by linqy itself."""
    pass


class EmptySequenceError(LinqyError, ValueError):
    """aggregate without a seed was called on a sequence with no elements."""
    pass


class NoValueFoundError(LinqyError, ValueError):
    """first() or single() found no (matching) element."""
    pass


class NoItemFoundError(LinqyError, ValueError):
    """last() found no (matching) element."""
    pass


class IndexNotFoundError(LinqyError, IndexError):
    """element_at() was given a negative index or one past the end."""
    pass


class MultipleValuesFoundError(LinqyError, ValueError):
    """single() saw a second matching element."""
    pass


class DuplicateKeyError(MultipleValuesFoundError):
    """to.dict() produced the same key for more than one element."""

    def __init__(self, key):
        super().__init__(f"duplicate key in dictionary: {key!r}")
        self.key = key


class EmptyNumericReductionError(LinqyError, ValueError):
    """min(), max() or sum() was called on a sequence with no elements."""
    pass
