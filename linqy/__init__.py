r"""
'    .__  .__
'    |  | |__| ____   ________.__.
'    |  | |  |/    \ / ____<   |  |
'    |  |_|  |   |  < <_|  |\___  |
'    |____/__|___|  /\__   |/ ____|
'                 \/    |__|\/
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, Group

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    zip_sequences,
    linqy,
    L
)

# expose supporting types and the cast/of_type tables
from .types import PrimitiveKind, KIND_CONVERTERS, KIND_TESTS

# expose the error taxonomy
from .errors import (
    LinqyError,
    EmptySequenceError,
    NoValueFoundError,
    NoItemFoundError,
    IndexNotFoundError,
    MultipleValuesFoundError,
    DuplicateKeyError,
    EmptyNumericReductionError
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "Group",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "zip_sequences",
    "linqy",
    "L",
    "PrimitiveKind",
    "KIND_CONVERTERS",
    "KIND_TESTS",
    "LinqyError",
    "EmptySequenceError",
    "NoValueFoundError",
    "NoItemFoundError",
    "IndexNotFoundError",
    "MultipleValuesFoundError",
    "DuplicateKeyError",
    "EmptyNumericReductionError"
]
