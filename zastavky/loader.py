"""Loading of carrier stop files into lists, lookup tables and the hierarchy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

from zastavky.vrchol import DopravcaVrchol, HierarchyNode, ObecVrchol, ZastavkaVrchol
from zastavky.zastavka import Zastavka

_FIELD_COUNT = 8


@dataclass
class CarrierData:
    """Everything loaded for one carrier."""

    name: str
    node: HierarchyNode
    stops: list[Zastavka] = field(default_factory=list)
    table: dict[str, list[Zastavka]] = field(default_factory=dict)


def parse_stops(lines: Iterable[str]) -> Iterator[Zastavka]:
    """Parse ``;``-separated stop records; the first line is a header and is skipped.

    Fields are: id, name, stop site, latitude, longitude, carrier code,
    carrier, town. Missing fields read as empty strings.
    """
    records = iter(lines)
    next(records, None)
    for line in records:
        fields = line.rstrip("\r\n").split(";")
        fields += [""] * (_FIELD_COUNT - len(fields))
        _, name, _, latitude, longitude, carrier_code, carrier, town = fields[
            :_FIELD_COUNT
        ]
        yield Zastavka(name, latitude, longitude, carrier, carrier_code, town)


def load_carrier(
    root: HierarchyNode, path: str | PathLike[str], carrier_name: str
) -> CarrierData:
    """Read a carrier's stop file and hang its towns and stops under ``root``.

    A new town node starts whenever the town differs from the previous
    record's; stops before the first non-empty town get no hierarchy node.
    """
    with open(path, encoding="utf-8") as handle:
        carrier = CarrierData(carrier_name, root.add_son(DopravcaVrchol(carrier_name)))
        town_node: HierarchyNode | None = None
        last_town = ""
        for stop in parse_stops(handle):
            carrier.stops.append(stop)
            carrier.table.setdefault(stop.name, []).append(stop)
            if stop.town != last_town:
                town_node = carrier.node.add_son(ObecVrchol(stop.town))
                last_town = stop.town
            if town_node is not None:
                town_node.add_son(ZastavkaVrchol(stop))
    return carrier