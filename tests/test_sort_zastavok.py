from zastavky.implicit_sequence import ImplicitSequence
from zastavky.sort_zastavok import by_consonants, by_name, sort_stops
from zastavky.zastavka import Zastavka

NAMES = [
    "Yates",
    "douglas",
    "Blanshard",
    "Oak Bay",
    "cook",
    "Hillside",
    "Fort",
    "menzies",
    "Quadra",
    "Admirals",
    "Richmond",
    "Shelbourne",
]


def make_stops():
    return [Zastavka(name) for name in NAMES]


def test_sort_by_name_list():
    stops = make_stops()
    sort_stops(stops, by_name)
    assert [s.name for s in stops] == sorted(NAMES, key=str.lower)


def test_sort_by_consonants_is_nondecreasing():
    stops = make_stops()
    sort_stops(stops, by_consonants)
    counts = [s.consonant_count for s in stops]
    assert counts == sorted(counts)
    assert sorted(s.name for s in stops) == sorted(NAMES)


def test_sort_implicit_sequence():
    sequence = ImplicitSequence()
    for stop in make_stops():
        sequence.insert_last(stop)
    sort_stops(sequence, by_name)
    assert [s.name for s in sequence] == sorted(NAMES, key=str.lower)


def test_sort_empty_and_single():
    empty = []
    sort_stops(empty, by_name)
    assert empty == []
    single = [Zastavka("Fort")]
    sort_stops(single, by_consonants)
    assert [s.name for s in single] == ["Fort"]


def test_comparators():
    a, b = Zastavka("apple"), Zastavka("Blanshard")
    assert by_name(a, b)
    assert not by_name(b, a)
    assert by_consonants(a, b) == (a.consonant_count < b.consonant_count)