import pytest

from dsbasics.person import Person
from dsbasics.treemap import KeyValue, TreeMap

ENTRIES = [
    ("NOM_G", Person("NOM_G", 70)),
    ("NOM_B", Person("NOM_B", 20)),
    ("NOM_J", Person("NOM_J", 100)),
    ("NOM_A", Person("NOM_A", 10)),
    ("NOM_D", Person("NOM_D", 40)),
    ("NOM_I", Person("NOM_I", 90)),
    ("NOM_F", Person("NOM_F", 60)),
    ("NOM_C", Person("NOM_C", 30)),
    ("NOM_E", Person("NOM_E", 20)),
    ("NOM_H", Person("NOM_H", 80)),
    ("NOM_E", Person("NOM_E", 50)),
]


@pytest.fixture
def filled():
    people = TreeMap()
    for key, person in ENTRIES:
        people.add(key, person)
    return people


def test_new_map_is_empty():
    assert TreeMap().is_empty()


def test_map_not_empty_after_add(filled):
    assert not filled.is_empty()


@pytest.mark.parametrize(
    "key, expected",
    [
        ("NOM_A", Person("NOM_A", 10)),
        ("NOM_G", Person("NOM_G", 70)),
        ("NOM_D", Person("NOM_D", 40)),
        ("NOM_I", Person("NOM_I", 90)),
        ("NOM_E", Person("NOM_E", 50)),
    ],
)
def test_lookup(filled, key, expected):
    assert filled[key] == expected


def test_missing_key_gives_none(filled):
    assert filled["NOM_K"] is None


def test_add_replaces_existing_value():
    people = TreeMap()
    people.add("x", 1)
    people.add("x", 2)
    assert people["x"] == 2
    assert str(people).count("<x,") == 1


def test_every_key_rendered_once(filled):
    text = str(filled)
    for key in {key for key, _ in ENTRIES}:
        assert text.count(f"<{key},") == 1
    assert "<NOM_E, (NOM_E, 50)>" in text
    assert "(NOM_E, 20)" not in text


def test_copy_matches_and_is_independent(filled):
    duplicate = filled.copy()
    assert str(duplicate) == str(filled)
    duplicate.add("NOM_A", Person("NOM_A", 11))
    duplicate.add("NOM_Z", Person("NOM_Z", 1))
    assert filled["NOM_A"] == Person("NOM_A", 10)
    assert filled["NOM_Z"] is None
    assert duplicate["NOM_A"] == Person("NOM_A", 11)


def test_key_value_text():
    assert str(KeyValue("NOM_A", Person("NOM_A", 10))) == "<NOM_A, (NOM_A, 10)>"


def test_key_value_compares_by_key():
    assert KeyValue("a", 5) < KeyValue("b", 1)
    assert not KeyValue("b", 1) < KeyValue("a", 5)
    assert KeyValue("a", 1) == KeyValue("a", 2)
    assert not KeyValue("a", 1) == KeyValue("b", 1)