import pytest

from zastavky.loader import load_carrier, parse_stops
from zastavky.vrchol import HierarchyNode, KorenVrchol

HEADER = "stop_id;stop_name;stop_site;lat;lon;code;carrier;town"


def write_file(tmp_path, rows):
    path = tmp_path / "stops.csv"
    path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
    return path


def row(name, town, index=1):
    return f"{index};{name};S{index};48.4;-123.3;VIC;Victoria Regional;{town}"


def test_parse_maps_fields():
    lines = [HEADER, "1;Main St;S1;48.42;-123.36;VIC;Victoria Regional;Victoria\n"]
    (stop,) = list(parse_stops(lines))
    assert stop.name == "Main St"
    assert (stop.latitude, stop.longitude) == ("48.42", "-123.36")
    assert stop.carrier_code == "VIC"
    assert stop.carrier == "Victoria Regional"
    assert stop.town == "Victoria"


def test_parse_skips_header_and_pads_missing_fields():
    stops = list(parse_stops([HEADER, "7;Short"]))
    assert len(stops) == 1
    assert stops[0].name == "Short"
    assert stops[0].town == ""
    assert list(parse_stops([HEADER])) == []


def test_load_builds_hierarchy(tmp_path):
    path = write_file(
        tmp_path,
        [row("Alpha", "A", 1), row("Beta", "A", 2), row("Gamma", "B", 3)],
    )
    root = HierarchyNode(KorenVrchol())
    carrier = load_carrier(root, path, "Victoria Regional Transit System")
    assert root.sons == [carrier.node]
    assert str(carrier.node.data) == "Victoria Regional Transit System"
    assert [str(t.data) for t in carrier.node.sons] == ["A", "B"]
    assert [str(s.data) for s in carrier.node.sons[0].sons] == ["Alpha", "Beta"]
    assert [s.name for s in carrier.stops] == ["Alpha", "Beta", "Gamma"]


def test_stop_nodes_reference_loaded_stops(tmp_path):
    path = write_file(tmp_path, [row("Alpha", "A", 1), row("Gamma", "B", 2)])
    root = HierarchyNode(KorenVrchol())
    carrier = load_carrier(root, path, "C")
    leaves = [n.data.zastavka for n in root.pre_order() if n.data.has_zastavka]
    assert leaves == carrier.stops


def test_repeated_town_after_another_starts_new_node(tmp_path):
    path = write_file(
        tmp_path,
        [row("a", "A", 1), row("b", "A", 2), row("c", "B", 3), row("d", "A", 4)],
    )
    carrier = load_carrier(HierarchyNode(KorenVrchol()), path, "C")
    assert carrier.node.degree() == 3
    assert [str(t.data) for t in carrier.node.sons] == ["A", "B", "A"]


def test_table_groups_same_names(tmp_path):
    path = write_file(
        tmp_path, [row("Main", "A", 1), row("Side", "A", 2), row("Main", "B", 3)]
    )
    carrier = load_carrier(HierarchyNode(KorenVrchol()), path, "C")
    assert [s.town for s in carrier.table["Main"]] == ["A", "B"]
    assert [s.name for s in carrier.table["Side"]] == ["Side"]
    assert "Missing" not in carrier.table


def test_stops_without_town_get_no_node(tmp_path):
    path = write_file(tmp_path, [row("Lone", "", 1), row("Alpha", "A", 2)])
    carrier = load_carrier(HierarchyNode(KorenVrchol()), path, "C")
    assert [s.name for s in carrier.stops] == ["Lone", "Alpha"]
    assert [str(t.data) for t in carrier.node.sons] == ["A"]


def test_missing_file_raises_and_adds_nothing(tmp_path):
    root = HierarchyNode(KorenVrchol())
    with pytest.raises(FileNotFoundError):
        load_carrier(root, tmp_path / "absent.csv", "C")
    assert root.sons == []