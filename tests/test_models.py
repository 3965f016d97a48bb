import pytest

from json2ged.core.exceptions import MissingIdentifierError
from json2ged.models import (
    Dataset,
    EventRecord,
    FamilyRecord,
    IndividualRecord,
    as_text,
    float_text,
    raw_json,
)


def test_as_text_renders_scalars():
    assert as_text("x") == "x"
    assert as_text(7) == "7"
    assert as_text(True) == "true"
    assert as_text(None) == "null"
    assert as_text({"a": 1}) == ""
    assert as_text([1]) == ""


def test_raw_json_is_compact_and_keeps_unicode():
    assert raw_json({"name": "Müller", "sex": "F"}) == '{"name":"Müller","sex":"F"}'


def test_individual_from_json_maps_all_fields():
    indi = IndividualRecord.from_json(
        {
            "id": "I1",
            "name": "Jon Snow",
            "sex": "M",
            "events": {
                "birth": {"date": "1 JAN 1990", "place": "Winterfell"},
                "death": {"place": "Castle Black"},
            },
            "families_as_spouse": ["F1", "F2"],
            "families_as_child": ["F0"],
        }
    )

    assert indi.id == "I1"
    assert indi.name == "Jon Snow"
    assert indi.sex == "M"
    assert indi.birth == EventRecord(date="1 JAN 1990", place="Winterfell")
    assert indi.death == EventRecord(date=None, place="Castle Black")
    assert indi.families_as_spouse == ["F1", "F2"]
    assert indi.families_as_child == ["F0"]


def test_individual_without_id_is_none():
    assert IndividualRecord.from_json({"name": "Nobody"}) is None
    assert IndividualRecord.from_json("I1") is None


def test_non_object_events_are_ignored():
    indi = IndividualRecord.from_json(
        {"id": "I1", "events": {"birth": "1990", "death": None}}
    )
    assert indi.birth is None
    assert indi.death is None

    indi = IndividualRecord.from_json({"id": "I1", "events": ["birth"]})
    assert indi.birth is None


def test_non_array_links_are_ignored():
    indi = IndividualRecord.from_json({"id": "I1", "families_as_spouse": "F1"})
    assert indi.families_as_spouse == []


def test_numeric_id_is_rendered_as_text():
    indi = IndividualRecord.from_json({"id": 42})
    assert indi.id == "42"


def test_family_without_id_raises():
    with pytest.raises(MissingIdentifierError) as excinfo:
        FamilyRecord.from_json("F9", {"husband": "I1"})
    assert excinfo.value.key == "F9"
    assert "F9" in str(excinfo.value)


def test_family_from_json_maps_marriage():
    fam = FamilyRecord.from_json(
        "F1",
        {
            "id": "F1",
            "husband": "I1",
            "children": ["I3", "I4"],
            "events": {"marriage": {"date": "1 MAY 1900"}},
        },
    )
    assert fam.husband == "I1"
    assert fam.wife is None
    assert fam.children == ["I3", "I4"]
    assert fam.marriage == EventRecord(date="1 MAY 1900")


def test_dataset_skips_individuals_without_id_and_keeps_order():
    dataset = Dataset.from_json(
        {
            "individuals": {
                "b": {"id": "I2"},
                "x": {"name": "No Id"},
                "a": {"id": "I1"},
            }
        }
    )

    assert [i.id for i in dataset.individuals] == ["I2", "I1"]
    assert dataset.skipped == [{"name": "No Id"}]
    assert dataset.families == []


def test_dataset_tolerates_missing_or_wrong_top_level_sections():
    assert Dataset.from_json({}).individuals == []
    assert Dataset.from_json({"individuals": [], "families": "x"}).families == []
    assert Dataset.from_json([1, 2]).individuals == []


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.5, "1.5"),
        (1000000.0, "1000000.0"),
        (0.001, "0.001"),
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (1e16, "1.0E16"),
        (12345678.0, "1.2345678E7"),
        (1.5e-05, "1.5E-5"),
        (-2.5e20, "-2.5E20"),
        (float("inf"), "Infinity"),
    ],
)
def test_float_text_matches_jvm_double_rendering(value, expected):
    assert float_text(value) == expected
    assert as_text(value) == expected


def test_large_float_id_uses_exponent_form():
    indi = IndividualRecord.from_json({"id": 1e16})
    assert indi.id == "1.0E16"
