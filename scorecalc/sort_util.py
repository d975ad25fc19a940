from typing import MutableSequence, Protocol, TypeVar


_CmpT = TypeVar("_CmpT", bound="Comparable")


class Comparable(Protocol):
    def __gt__(self: _CmpT, other: _CmpT) -> bool: ...


def insertion_sort(xs: MutableSequence[_CmpT]) -> None:
    """Sorts ``xs`` in place into non-decreasing order.

    Equal elements keep their relative order. Quadratic in the worst case, which
    is fine for a few hundred entries.
    """
    for i in range(1, len(xs)):
        key = xs[i]
        j = i - 1
        while j >= 0 and xs[j] > key:
            xs[j + 1] = xs[j]
            j -= 1
        xs[j + 1] = key
