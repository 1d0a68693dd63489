"""Bus stop records and the orderings used to sort them."""

from __future__ import annotations

from dataclasses import dataclass

_CONSONANTS = frozenset("dtnlhgkcjbmprsvzf")


def count_consonants(text: str) -> int:
    """Count consonants in ``text``, treating the digraphs "ch" and "dz" as one."""
    lowered = text.lower()
    count = 0
    for char, following in zip(lowered, lowered[1:] + "\0"):
        if (char, following) in (("c", "h"), ("d", "z")):
            continue
        if char in _CONSONANTS:
            count += 1
    return count


@dataclass(frozen=True)
class Zastavka:
    """One bus stop as read from a carrier's data file."""

    name: str
    latitude: str = ""
    longitude: str = ""
    carrier: str = ""
    carrier_code: str = ""
    town: str = ""

    @property
    def consonant_count(self) -> int:
        """Number of consonants in the stop name."""
        return count_consonants(self.name)

    def precedes_alphabetically(self, other: Zastavka) -> bool:
        """True when this name sorts before ``other``'s, ignoring case."""
        return self.name.lower() < other.name.lower()

    def has_fewer_consonants(self, other: Zastavka) -> bool:
        """True when this name has fewer consonants than ``other``'s."""
        return self.consonant_count < other.consonant_count