# zastavky

A console browser for regional bus stops, together with the small data
structure library it is built on. It has no dependencies beyond the
Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the browser

```
zastavky --data-dir data
```

`--data-dir` defaults to `data`. The same program can be started with
`python -m zastavky.manager`. The menus and messages are in Slovak.

The browser reads one file per carrier from the data directory:
`cow_busstops.csv`, `kam_busstops.csv`, `nan_busstops.csv`,
`vic_busstops.csv`, `vly_busstops.csv`, `whi_busstops.csv`,
`wil_busstops.csv` and `wkt_busstops.csv`. Each file is UTF-8 text whose
first line is a header, followed by records of the form

```
id;name;stopsite;latitude;longitude;carrier code;carrier;town
```

Missing trailing fields read as empty strings. A file that cannot be
opened is reported on standard error and that carrier is left without
stops.

Stops are arranged in a hierarchy of root, carrier, town and stop. A new
town node is started whenever a record's town differs from the previous
record's. From the main menu you can:

1. filter the stops of one carrier by a name prefix or a substring,
2. walk the hierarchy (`0` goes up a level, `f` filters every stop below
   the current node, `e` leaves) and optionally sort the result,
3. look up every stop of a carrier with exactly a given name,
4. sort the last filtered result alphabetically (case-insensitive) or by
   the number of consonants in the stop name.

The screen is cleared with ANSI escapes only when output is a terminal.
The program ends on option `0` or at the end of input.

## Using the library

```python
from zastavky.stack import ImplicitStack
from zastavky.zastavka import count_consonants

stack = ImplicitStack()
stack.push(1)
stack.push(2)
assert stack.pop() == 2
assert len(stack) == 1

# "ch" and "dz" count as a single letter
assert count_consonants("Chestnut") == 5
```

The browser can also be driven without the menus:

```python
from zastavky.manager import ZastavkaManager, FilterMethod

manager = ZastavkaManager("data")
manager.filter_carrier(1, FilterMethod.STARTS_WITH, "Main")
for stop, position in manager.sort_filtered(1):
    print(position, stop.name)
```

Modules:

- `zastavky.implicit_sequence` – `ImplicitSequence`, `CyclicImplicitSequence`
- `zastavky.explicit_sequence` – `SinglyLinkedSequence`, `DoublyLinkedSequence`
- `zastavky.lists` – `ImplicitList`, `ImplicitCyclicList`, `SinglyLinkedList`, `DoublyLinkedList`
- `zastavky.stack` – `ImplicitStack`, `ExplicitStack`
- `zastavky.queue` – `ImplicitQueue` (fixed capacity, default 100), `ExplicitQueue`
- `zastavky.sorts` – `ShellSort`, `shell_sort` (works on an `ImplicitSequence` or a Python list)
- `zastavky.network` – `ExplicitNetwork`, `NetworkNode`
- `zastavky.zastavka` – `Zastavka`, `count_consonants`
- `zastavky.vrchol` – `HierarchyNode` with pre-, post- and level-order traversal, and the node payloads `KorenVrchol`, `DopravcaVrchol`, `ObecVrchol`, `ZastavkaVrchol`
- `zastavky.sort_zastavok` – `sort_stops`, `by_name`, `by_consonants`
- `zastavky.loader` – `load_carrier`, `parse_stops`, `CarrierData`
- `zastavky.manager` – `ZastavkaManager`, `FilterMethod`, `make_predicate`, `filter_stops`, `format_stop`, `main`

Invalid positions, empty containers and pushing onto a full
`ImplicitQueue` raise `IndexError`. Removing a node that is not in an
`ExplicitNetwork`, or disconnecting unrelated nodes, raises `ValueError`.

## What it does not do

The package ships no bus stop data; the CSV files must be supplied. It
has no tool for measuring the timing of its lookup tables, which are
plain dictionaries keyed by stop name.