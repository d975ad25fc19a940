from typing import Iterable, Sequence

import numpy

from . import sort_util


def mean(scores: Iterable[float]) -> float:
    xs = _as_array(scores)
    if xs.size == 0:
        return 0.0
    return float(xs.mean())


def maximum(scores: Iterable[float]) -> float:
    xs = _as_array(scores)
    if xs.size == 0:
        return 0.0
    return float(xs.max())


def minimum(scores: Iterable[float]) -> float:
    xs = _as_array(scores)
    if xs.size == 0:
        return 0.0
    return float(xs.min())


def population_std(scores: Iterable[float]) -> float:
    """Standard deviation dividing by ``n`` (not ``n - 1``)."""
    xs = _as_array(scores)
    if xs.size == 0:
        return 0.0
    return float(xs.std(ddof=0))


def sorted_ascending(scores: Sequence[float]) -> list[float]:
    ret = [float(x) for x in scores]
    sort_util.insertion_sort(ret)
    return ret


def _as_array(scores: Iterable[float]) -> numpy.ndarray:
    return numpy.fromiter(scores, dtype=numpy.float64)
