"""
Insert-or-append helpers for multi-valued maps.

The caller owns the map; these only grow it. Maps are not locked, so
share one between threads only behind the caller's own lock.
"""

from typing import Hashable, List, MutableMapping, Set, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)


def add_to_map_of_sets(key: K, value: H, mapping: MutableMapping[K, Set[H]]) -> None:
    """Add value to the set under key, creating the set on first use."""
    mapping.setdefault(key, set()).add(value)


def add_to_map_of_lists(key: K, value: V, mapping: MutableMapping[K, List[V]]) -> None:
    """Append value to the list under key, creating the list on first use."""
    mapping.setdefault(key, []).append(value)
