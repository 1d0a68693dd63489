"""Sorting of stop lists by name or by consonant count."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from zastavky.sorts import shell_sort
from zastavky.zastavka import Zastavka


def by_name(a: Zastavka, b: Zastavka) -> bool:
    """Ordering that puts names first alphabetically, ignoring case."""
    return a.precedes_alphabetically(b)


def by_consonants(a: Zastavka, b: Zastavka) -> bool:
    """Ordering by increasing number of consonants in the name."""
    return a.has_fewer_consonants(b)


def sort_stops(stops: Any, comparator: Callable[[Zastavka, Zastavka], bool]) -> None:
    """Sort ``stops`` in place with Shell's method using ``comparator``."""
    shell_sort(stops, comparator)