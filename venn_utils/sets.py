from typing import Hashable, Iterable


def difference(a: Iterable[Hashable], b: Iterable[Hashable]) -> list:
    excluded = set(b)
    return [item for item in a if item not in excluded]


def intersection(a: Iterable[Hashable], b: Iterable[Hashable]) -> list:
    included = set(b)
    return [item for item in a if item in included]
