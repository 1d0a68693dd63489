import pytest

from zastavky.zastavka import Zastavka, count_consonants


def make_stop(name, town="Town"):
    return Zastavka(name, "48.4", "-123.3", "Victoria", "VIC", town)


def test_vowels_only_have_no_consonants():
    assert count_consonants("aeiou") == 0


def test_letters_outside_set_are_not_counted():
    assert count_consonants("wxqy") == 0


@pytest.mark.parametrize(
    "digraph, single", [("ch", "h"), ("dz", "z"), ("CH", "h"), ("Dz", "z")]
)
def test_digraph_counts_as_one(digraph, single):
    assert count_consonants(digraph) == count_consonants(single)


def test_case_is_ignored():
    assert count_consonants("MAIN STREET") == count_consonants("main street")


def test_counts_add_up_across_words():
    left, right = "Douglas", "Pandora"
    assert count_consonants(left + " " + right) == count_consonants(
        left
    ) + count_consonants(right)


def test_trailing_c_is_counted():
    assert count_consonants("ac") == count_consonants("c")
    assert count_consonants("c") == count_consonants("d")


def test_consonant_count_property_matches_function():
    stop = make_stop("Fort Street at Cook")
    assert stop.consonant_count == count_consonants("Fort Street at Cook")


def test_precedes_alphabetically_ignores_case():
    apple = make_stop("apple")
    banana = make_stop("Banana")
    assert apple.precedes_alphabetically(banana)
    assert not banana.precedes_alphabetically(apple)


def test_equal_names_do_not_precede():
    first = make_stop("Hillside")
    second = make_stop("HILLSIDE")
    assert not first.precedes_alphabetically(second)
    assert not second.precedes_alphabetically(first)


def test_has_fewer_consonants():
    short = make_stop("Oak")
    long = make_stop("Blanshard")
    assert short.has_fewer_consonants(long)
    assert not long.has_fewer_consonants(short)
    assert not short.has_fewer_consonants(short)


def test_fields_are_kept():
    stop = Zastavka("Main", "1.5", "2.5", "Carrier", "CODE", "Town")
    assert (stop.name, stop.latitude, stop.longitude) == ("Main", "1.5", "2.5")
    assert (stop.carrier, stop.carrier_code, stop.town) == ("Carrier", "CODE", "Town")