"""
Higher-order collection utilities.

Iterate, test, search and transform ordered record sequences without
index-based loops at the call site. Every operation is built on one
index-stepping scan, and none of them mutate the input sequence.
"""

from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")
V = TypeVar("V")

Predicate = Callable[[T], bool]
Extractor = Callable[[T], V]
Visitor = Callable[[T, int], None]

NOT_FOUND = -1


def _scan(items: Sequence[T], step: Callable[[T, int], bool]) -> int:
    """
    Walk items in order, calling step(item, index) until it returns True.

    Returns:
        Index at which step stopped the scan, or NOT_FOUND if it ran to the end
    """
    index = 0
    while index < len(items):
        if step(items[index], index):
            return index
        index += 1
    return NOT_FOUND


def each(items: Sequence[T], visitor: Visitor) -> None:
    """Call visitor(item, index) once per item, in order."""
    def step(item: T, index: int) -> bool:
        visitor(item, index)
        return False

    _scan(items, step)


def all_(items: Sequence[T], predicate: Predicate) -> bool:
    """True if predicate holds for every item; True for an empty sequence."""
    return _scan(items, lambda item, _index: not predicate(item)) == NOT_FOUND


def any_(items: Sequence[T], predicate: Predicate) -> bool:
    """True if predicate holds for at least one item; False for an empty sequence."""
    return _scan(items, lambda item, _index: bool(predicate(item))) != NOT_FOUND


def index_of(items: Sequence[T], target: Any) -> int:
    """
    Index of the first item equal to target.

    Equality is value equality (==), so two records with the same fields
    match. Absence is a normal result, not an error.

    Returns:
        Zero-based index, or NOT_FOUND
    """
    return _scan(items, lambda item, _index: item == target)


def contains(items: Sequence[T], target: Any) -> bool:
    """True if an item equal to target is present."""
    return index_of(items, target) != NOT_FOUND


def _partition_side(items: Sequence[T], predicate: Predicate, keep: bool) -> list[T]:
    kept: list[T] = []

    def collect(item: T, _index: int) -> None:
        if bool(predicate(item)) is keep:
            kept.append(item)

    each(items, collect)
    return kept


def filter_(items: Sequence[T], predicate: Predicate) -> list[T]:
    """New list of the items passing predicate, in original order."""
    return _partition_side(items, predicate, keep=True)


def reject(items: Sequence[T], predicate: Predicate) -> list[T]:
    """New list of the items failing predicate, in original order."""
    return _partition_side(items, predicate, keep=False)


def pluck(items: Sequence[T], extractor: Extractor) -> list:
    """extractor(item) for every item; same length and order as items."""
    values: list = []
    each(items, lambda item, _index: values.append(extractor(item)))
    return values


def sort_by(items: Sequence[T], key: Extractor, reverse: bool = False) -> list[T]:
    """Stable sorted copy of items ordered by key(item)."""
    return sorted(items, key=key, reverse=reverse)
