from __future__ import annotations
import math
import typing
import numpy as np
from ..types import *
from ..errors import EmptyNumericReductionError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

Number = Union[int, float]

class StatsAccessor(Generic[T]):
    """numeric reductions. each one materializes the (projected) sequence first."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Any]] = None) -> List[Any]:
        """helper to extract values for a reduction."""
        if selector: return self._enumerable.select(selector).to.list()
        return self._enumerable.to.list()

    def _get_numbers(self, selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """like _get_values, with none values counted as zero"""
        return [0 if x is None else x for x in self._get_values(selector)]

    @staticmethod
    def _as_float_array(values: List[Any]) -> Optional[np.ndarray]:
        """numpy array for real-valued data holding at least one float, else None.
        all-int data stays on python ints so big values cannot overflow int64."""
        if not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in values):
            return None
        if not any(isinstance(x, float) for x in values):
            return None
        return np.asarray(values, dtype=float)

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum. none values count as zero"""
        values = self._get_numbers(selector)
        if not values: raise EmptyNumericReductionError("no values in collection")
        arr = self._as_float_array(values)
        if arr is not None:
            return np.sum(arr).item()
        return sum(values)

    def average(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """calc average. none values count as zero, an empty sequence gives nan"""
        values = self._get_numbers(selector)
        if not values: return math.nan
        arr = self._as_float_array(values)
        if arr is not None:
            return np.mean(arr).item()
        return sum(values) / len(values)

    def min(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """find minimum"""
        values = self._get_values(selector)
        if not values: raise EmptyNumericReductionError("no values in collection")
        arr = self._as_float_array(values)
        if arr is not None:
            # index back into values so the element keeps its own type
            return values[int(np.argmin(arr))]
        return min(values)

    def max(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """find maximum"""
        values = self._get_values(selector)
        if not values: raise EmptyNumericReductionError("no values in collection")
        arr = self._as_float_array(values)
        if arr is not None:
            return values[int(np.argmax(arr))]
        return max(values)
