from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[K, K], int]
EqualityComparer = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]
DataFunc = Callable[[], Iterator[T]]


def default_compare(a: Any, b: Any) -> int:
    """three-way comparison using the natural ordering of the keys"""
    return (a > b) - (a < b)


def default_equals(a: Any, b: Any) -> bool:
    return a == b


class PrimitiveKind(Enum):
    """the closed set of primitive kinds understood by cast() and of_type()"""
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    BIGINT = "bigint"

    @classmethod
    def parse(cls, kind: Union['PrimitiveKind', str]) -> 'PrimitiveKind':
        """accepts a member or its lowercase name"""
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError:
            raise ValueError(f"unknown primitive kind: {kind!r}") from None


def _to_number(value: Any) -> Union[int, float]:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    return float(value)


KIND_CONVERTERS: Dict[PrimitiveKind, Callable[[Any], Any]] = {
    PrimitiveKind.NUMBER: _to_number,
    PrimitiveKind.BOOLEAN: bool,
    PrimitiveKind.STRING: str,
    PrimitiveKind.BIGINT: int,
}

# exact type tests: bool is not a number here even though it subclasses int
KIND_TESTS: Dict[PrimitiveKind, Callable[[Any], bool]] = {
    PrimitiveKind.NUMBER: lambda x: type(x) in (int, float),
    PrimitiveKind.BOOLEAN: lambda x: type(x) is bool,
    PrimitiveKind.STRING: lambda x: type(x) is str,
    PrimitiveKind.BIGINT: lambda x: type(x) is int,
}
