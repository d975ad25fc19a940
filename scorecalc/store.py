import collections.abc
import logging
import numbers
from typing import Iterable, Iterator, Union, overload

import numpy

from . import errors, sort_util


MIN_SCORE = 0.0
MAX_SCORE = 10.0
INITIAL_CAPACITY = 10

_logger = logging.getLogger(__name__)


def is_valid_score(value: float) -> bool:
    # NaN fails both comparisons
    return MIN_SCORE <= value <= MAX_SCORE


def validate_score(value: object) -> float:
    # bool is an Integral but never a score
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise errors.OutOfRangeError(value, MIN_SCORE, MAX_SCORE)
    x = float(value)
    if not is_valid_score(x):
        raise errors.OutOfRangeError(value, MIN_SCORE, MAX_SCORE)
    return x


class ScoreStore(collections.abc.Sequence[float]):
    """Ordered, growable container of validated scores.

    Scores live in a numpy buffer whose capacity doubles whenever an append
    would overflow it. The buffer never leaves the store: reads return Python
    floats and :meth:`snapshot` returns a copy.
    """

    def __init__(
        self, values: Iterable[float] = (), capacity: int = INITIAL_CAPACITY
    ) -> None:
        super().__init__()
        if capacity < 1:
            raise ValueError(f"capacity must be positive: {capacity}")
        self._initial_capacity = capacity
        self._buf = numpy.empty(capacity, dtype=numpy.float64)
        self._len = 0
        for value in values:
            self.add(value)

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def add(self, value: float) -> None:
        x = validate_score(value)
        if self._len >= len(self._buf):
            self._grow(self._len + 1)
        self._buf[self._len] = x
        self._len += 1

    def count(self) -> int:  # type: ignore[override]
        return self._len

    def get(self, i: int) -> float:
        if i < 0 or i >= self._len:
            raise errors.IndexOutOfBoundsError(i, self._len)
        return float(self._buf[i])

    def snapshot(self) -> tuple[float, ...]:
        return tuple(self._buf[: self._len].tolist())

    def sort_ascending(self) -> None:
        sort_util.insertion_sort(self._buf[: self._len])

    def replace_all(self, values: Iterable[float]) -> None:
        xs = [validate_score(v) for v in values]
        capacity = self._initial_capacity
        while capacity < len(xs):
            capacity *= 2
        buf = numpy.empty(capacity, dtype=numpy.float64)
        buf[: len(xs)] = xs
        self._buf = buf
        self._len = len(xs)

    def clear(self) -> None:
        self._buf = numpy.empty(self._initial_capacity, dtype=numpy.float64)
        self._len = 0

    def __len__(self) -> int:
        return self._len

    @overload
    def __getitem__(self, i: int) -> float: ...
    @overload
    def __getitem__(self, s: slice) -> list[float]: ...

    def __getitem__(self, i_or_s: Union[int, slice]) -> Union[float, list[float]]:
        if isinstance(i_or_s, slice):
            return [self.get(i) for i in range(*i_or_s.indices(self._len))]
        if i_or_s < 0:
            i_or_s += self._len
        return self.get(i_or_s)

    def __iter__(self) -> Iterator[float]:
        return iter(self.snapshot())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScoreStore):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        return f"ScoreStore({list(self.snapshot())!r})"

    def _grow(self, required: int) -> None:
        capacity = len(self._buf)
        while capacity < required:
            capacity *= 2
        _logger.debug(f"growing score buffer {len(self._buf)} -> {capacity}")
        buf = numpy.empty(capacity, dtype=numpy.float64)
        buf[: self._len] = self._buf[: self._len]
        self._buf = buf
