import pytest

from exceptions import ValidationError
from utils import Registry, city_label, parse_participant_arg


def test_add_keeps_insertion_order():
    reg = Registry()
    first = reg.add("Ana", "America/New_York")
    second = reg.add("Bruno", "Europe/Madrid")
    assert reg.list() == (first, second)
    assert len(reg) == 2


def test_add_trims_name():
    reg = Registry()
    p = reg.add("  Ana  ", "UTC")
    assert p.name == "Ana"


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_add_rejects_empty_name(name):
    reg = Registry()
    reg.add("Ana", "UTC")
    with pytest.raises(ValidationError):
        reg.add(name, "UTC")
    assert len(reg) == 1


def test_ids_are_unique_even_for_duplicate_entries():
    reg = Registry()
    ids = {reg.add("Ana", "UTC").id for _ in range(50)}
    assert len(ids) == 50
    assert len(reg) == 50


def test_remove_by_id(registry):
    ana, bruno = registry.list()
    registry.remove(ana.id)
    assert registry.list() == (bruno,)


def test_remove_missing_id_is_noop(registry):
    before = registry.list()
    registry.remove("does-not-exist")
    assert registry.list() == before


def test_list_is_a_snapshot(registry):
    snapshot = registry.list()
    registry.add("Carla", "Asia/Tokyo")
    assert len(snapshot) == 2
    assert len(registry.list()) == 3


def test_from_config_seeds_participants():
    reg = Registry.from_config([
        {"name": "Equipo Buenos Aires", "timezone": "America/Buenos_Aires"},
        {"name": "Equipo New York", "timezone": "America/New_York"},
    ])
    assert [p.name for p in reg] == ["Equipo Buenos Aires", "Equipo New York"]


@pytest.mark.parametrize("zone,expected", [
    ("America/Argentina/Buenos_Aires", "Buenos Aires"),
    ("America/New_York", "New York"),
    ("Europe/Paris", "Paris"),
    ("UTC", "UTC"),
])
def test_city_label(zone, expected):
    assert city_label(zone) == expected


def test_parse_participant_arg():
    assert parse_participant_arg("Ana = America/New_York") == ("Ana", "America/New_York")


@pytest.mark.parametrize("value", ["Ana", "=UTC", "  =UTC"])
def test_parse_participant_arg_invalid(value):
    with pytest.raises(ValidationError):
        parse_participant_arg(value)


def test_from_config_skips_unusable_entries(caplog):
    reg = Registry.from_config([
        {"name": "  ", "timezone": "UTC"},
        "not-a-mapping",
        {"name": "Ana", "timezone": "America/New_York"},
    ])
    assert [p.name for p in reg] == ["Ana"]
    assert "Skipping participant entry" in caplog.text
