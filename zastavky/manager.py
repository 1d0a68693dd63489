"""Interactive browsing, filtering, lookup and sorting of carriers' bus stops."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from enum import IntEnum
from pathlib import Path
from typing import IO

from zastavky.loader import CarrierData, load_carrier
from zastavky.sort_zastavok import by_consonants, by_name, sort_stops
from zastavky.vrchol import DopravcaVrchol, HierarchyNode, KorenVrchol, ZastavkaVrchol
from zastavky.zastavka import Zastavka

CARRIERS: tuple[tuple[str, str], ...] = (
    ("cow", "Cowichan Valley Regional"),
    ("kam", "Kamloops Transit System"),
    ("nan", "Regional District of Nanaimo Transit System"),
    ("vic", "Victoria Regional Transit System"),
    ("vly", "Fraser Valley Region"),
    ("whi", "Whistler Transit System"),
    ("wil", "Williams Lake Transit System"),
    ("wkt", "West Kootenay Transit System"),
)

_CARRIER_MENU = "\n".join(f"{i}.{name}" for i, (_, name) in enumerate(CARRIERS, 1))

Predicate = Callable[[Zastavka], bool]


class FilterMethod(IntEnum):
    """How a filter key is matched against a stop name."""

    STARTS_WITH = 1
    CONTAINS = 2


def make_predicate(method: int, key: str) -> Predicate:
    """Build a predicate on stop names; ValueError for an unknown method."""
    method = FilterMethod(method)
    if method is FilterMethod.STARTS_WITH:
        return lambda stop: stop.name.startswith(key)
    return lambda stop: key in stop.name


def filter_stops(stops: Iterable[Zastavka], predicate: Predicate) -> list[Zastavka]:
    """Return the stops that satisfy ``predicate``, in their original order."""
    return [stop for stop in stops if predicate(stop)]


def format_stop(stop: Zastavka) -> str:
    """Describe one stop, one field per line."""
    return (
        f"Nazov: {stop.name}\n"
        f"Zemepisna sirka: {stop.latitude}\n"
        f"Zemepisna dlzka: {stop.longitude}\n"
        f"Dopravca: {stop.carrier}\n"
        f"Kod dopravcu: {stop.carrier_code}\n"
        f"Obec: {stop.town}\n"
    )


class _Console:
    """Whitespace-token and line reader over a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._rest = ""

    def token(self) -> str:
        while True:
            stripped = self._rest.lstrip()
            if stripped:
                word = stripped.split(maxsplit=1)[0]
                self._rest = stripped[len(word):]
                return word
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._rest = line

    def integer(self) -> int | None:
        word = self.token()
        try:
            return int(word)
        except ValueError:
            return None

    def ignore_line(self) -> None:
        self._rest = ""

    def line(self) -> str:
        if self._rest:
            text, self._rest = self._rest, ""
        else:
            text = self._stream.readline()
            if not text:
                raise EOFError
        return text.rstrip("\r\n")


class ZastavkaManager:
    """Holds every carrier's stops and drives the text menus over them."""

    def __init__(
        self,
        data_dir: str | Path = "data",
        input_stream: IO[str] | None = None,
        output_stream: IO[str] | None = None,
    ) -> None:
        self._in = _Console(input_stream if input_stream is not None else sys.stdin)
        self._out = output_stream if output_stream is not None else sys.stdout
        self.root = HierarchyNode(KorenVrchol())
        self.filtered: list[Zastavka] = []
        self.carriers: list[CarrierData] = []
        for stem, name in CARRIERS:
            path = Path(data_dir) / f"{stem}_busstops.csv"
            try:
                carrier = load_carrier(self.root, path, name)
            except OSError:
                print(f"subor {path} sa nepodarilo nacitat.", file=sys.stderr)
                carrier = CarrierData(name, HierarchyNode(DopravcaVrchol(name)))
            self.carriers.append(carrier)

    def _carrier(self, carrier_index: int | None) -> CarrierData:
        if carrier_index is None or not 1 <= carrier_index <= len(self.carriers):
            raise ValueError(f"invalid carrier: {carrier_index}")
        return self.carriers[carrier_index - 1]

    def filter_carrier(self, carrier_index: int, method: int, key: str) -> list[Zastavka]:
        """Filter one carrier's stops (numbered from 1) and keep the result."""
        predicate = make_predicate(method, key)
        self.filtered = filter_stops(self._carrier(carrier_index).stops, predicate)
        return self.filtered

    def filter_subtree(self, node: HierarchyNode, method: int, key: str) -> list[Zastavka]:
        """Filter the stops found under ``node`` in pre-order and keep the result."""
        predicate = make_predicate(method, key)
        stops = (
            n.data.zastavka
            for n in node.pre_order()
            if isinstance(n.data, ZastavkaVrchol)
        )
        self.filtered = filter_stops(stops, predicate)
        return self.filtered

    def find(self, carrier_index: int, name: str) -> list[Zastavka]:
        """Return every stop of a carrier with exactly ``name``; KeyError if none."""
        stops = self._carrier(carrier_index).table.get(name)
        if not stops:
            raise KeyError(name)
        return list(stops)

    def sort_filtered(self, option: int) -> list[tuple[Zastavka, int]]:
        """Sort the kept stops; 1 by name, 2 by consonant count.

        Returns each stop with its position (option 1) or consonant count (option 2).
        """
        if not self.filtered:
            raise ValueError("no stops have been filtered")
        if option == 1:
            sort_stops(self.filtered, by_name)
            return [(stop, pos) for pos, stop in enumerate(self.filtered, 1)]
        if option == 2:
            sort_stops(self.filtered, by_consonants)
            return [(stop, stop.consonant_count) for stop in self.filtered]
        raise ValueError(f"invalid sort option: {option}")

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _clear_screen(self) -> None:
        isatty = getattr(self._out, "isatty", None)
        if isatty is not None and isatty():
            self._write("\033[2J\033[H")

    def _write_filtered(self) -> None:
        self._write("Vysledok filtrovania:\n\n")
        for stop in self.filtered:
            self._write(f"{stop.name}\n")

    def _level_one(self) -> None:
        while True:
            self._write(_CARRIER_MENU + "\n\nVyber dopravcu (1-8) alebo ('0' - EXIT): ")
            carrier = self._in.integer()
            if carrier == 0:
                return
            self._write("\n1. startsWithStr\n2. containsStr\n\nVyber metodu:")
            method = self._in.integer()
            self._write("\nZadaj kluc pre filtrovanie:")
            key = self._in.token()
            if method not in (1, 2):
                self._clear_screen()
                self._write(
                    " Nespravna metoda. Zadaj 1 pre startsWithStr alebo 2 pre containsStr.\n\n"
                )
                continue
            try:
                self.filter_carrier(carrier, method, key)
            except ValueError:
                self._clear_screen()
                self._write("Nespravny vyber dopravcu. Skus to znova.\n\n")
                continue
            self._write("\n")
            self._write_filtered()
            self._write("\n\nChcete pokracovat? (1 - ANO, 0 - NIE): ")
            if self._in.integer() == 0:
                return
            self._clear_screen()

    def _level_two(self) -> None:
        node = self.root
        while True:
            self._clear_screen()
            if node is not self.root:
                self._write(f"Aktualna uroven: {node.data}\n\n")
            for number, son in enumerate(node.sons, 1):
                self._write(f"{number}. {son.data}\n")
            self._write(
                "\nVyber jednu z moznosti (1-n) alebo "
                "('0' uroven vyssie, 'f' -filtrovanie, 'e' - exit) : "
            )
            selection = self._in.token()
            if selection == "e":
                return
            self._write("\n")
            if selection == "0":
                if node.parent is None:
                    self._write("Uz si na najvyssej urovni.\n\n")
                else:
                    node = node.parent
                continue
            if selection == "f":
                self._write("\nVyber moznost: (1 - startsWithStr , 2 - containsStr) : ")
                method = self._in.integer()
                self._write("\nZadaj kluc pre filtrovanie:")
                key = self._in.token()
                if method not in (1, 2):
                    self._write(
                        "Nespravna metoda. Zadaj 1 pre startsWithStr alebo 2 pre containsStr.\n"
                    )
                    continue
                self.filter_subtree(node, method, key)
                self._write_filtered()
                self._write("\nchcete vysledky zoradit? ( 1 - ANO, 0 - NIE): ")
                if self._in.integer() == 1:
                    self._level_four()
                continue
            try:
                index = int(selection) - 1
            except ValueError:
                index = -1
            if not 0 <= index < node.degree():
                print("Nespravny vyber. Skus to znova.", file=sys.stderr)
                continue
            node = node.sons[index]

    def _level_three(self) -> None:
        while True:
            self._write(_CARRIER_MENU + "\n\nVyber dopravcu (1-8) alebo ('0' - exit): ")
            carrier = self._in.integer()
            if carrier == 0:
                return
            self._write("\nVyhladaj podla nazvu: ")
            self._in.ignore_line()
            key = self._in.line()
            if key == "0":
                return
            try:
                stops = self.find(carrier, key)  # type: ignore[arg-type]
            except ValueError:
                self._clear_screen()
                self._write("***Nespravny vyber. Skus to znova.***\n\n")
                continue
            except KeyError:
                self._clear_screen()
                self._write("***Zastavka nebola najdena.***\n\n")
                continue
            self._write("\n")
            for stop in stops:
                self._write(format_stop(stop) + "\n")
            self._write("chces pokracovat? (1 - ANO, 0 - NIE): ")
            if self._in.integer() == 0:
                return
            self._clear_screen()

    def _level_four(self) -> None:
        while True:
            if not self.filtered:
                self._write(
                    "Najprv v prvej alebo druhej urovni vyfiltruj zastavky.  ( 0 - EXIT )\n"
                )
                self._in.integer()
                return
            self._write(
                "1. Zorad abecedne\n2. Zorad podla poctu spoluhlasok\n\nVyber moznost: "
            )
            option = self._in.integer()
            self._write("\n")
            if option not in (1, 2):
                self._write("Nespravna moznost. Skus to znova.\n")
                continue
            rows = self.sort_filtered(option)
            label = " abecedy:" if option == 1 else " poctu spoluhlasok:"
            self._write(f"\nZoradenie podla{label}\n\n")
            for stop, value in rows:
                self._write(f"{stop.name} [{value}]\n")
            self._write("\nspat na vyber zoradenia ( 1 - ANO, 0 - NIE ): ")
            if self._in.integer() == 0:
                return
            self._clear_screen()

    def start(self) -> None:
        """Run the main menu until the user exits or input ends."""
        levels = {
            1: self._level_one,
            2: self._level_two,
            3: self._level_three,
            4: self._level_four,
        }
        try:
            while True:
                self._clear_screen()
                self._write(
                    "**************\n1. Prva uroven\n2. Druha uroven\n3. Tretia uroven\n"
                    "4. Stvrta uroven\n0. Exit\n\nVyber moznost: "
                )
                option = self._in.integer()
                self._clear_screen()
                if option == 0:
                    break
                level = levels.get(option)  # type: ignore[arg-type]
                if level is None:
                    self._write("Nespravna moznost. Skus to znova.\n")
                else:
                    level()
        except EOFError:
            pass


def main(argv: list[str] | None = None) -> int:
    """Start the interactive stop browser."""
    parser = argparse.ArgumentParser(description="Browse carriers' bus stops.")
    parser.add_argument("--data-dir", default="data", help="directory with *_busstops.csv")
    args = parser.parse_args(argv)
    ZastavkaManager(args.data_dir, sys.stdin, sys.stdout).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())