import json

import pytest

from owner_mapper.core.dates import aggregate, serialize_owners_by_date, to_iso_date
from owner_mapper.core.models import Company, Person, owner_from_dict

A = Person("John", "Smith")
B = Person("Jane", "Doe")
C = Company("ACME LLC")
D = Person("Tom", "Roe")
E = Person("Sue", "Baker", "Ann")


@pytest.mark.parametrize("value, expected", [
    ("03/14/2019", "2019-03-14"),
    ("3/4/2019", "2019-03-04"),
    ("2019-03-14", "2019-03-14"),
    ("March 14, 2019", "2019-03-14"),
    ("Mar 14, 2019", "2019-03-14"),
    ("Sept. 5, 2020", "2020-09-05"),
    ("03/2019", "2019-03-01"),
    ("Sale Date: 3/14/2019", "2019-03-14"),
    ("13/45/2020", None),
    ("not a date", None),
    ("", None),
    (None, None),
])
def test_to_iso_date(value, expected):
    assert to_iso_date(value) == expected


def test_aggregate_ordering_and_merge():
    dated = [
        {"date": "05/01/2020", "owners": [A]},
        {"date": "01/15/2018", "owners": [B]},
        {"date": None, "owners": [C]},
        {"date": "garbage", "owners": [D]},
        {"date": "2018-01-15", "owners": [B, E]},
    ]
    result = aggregate(dated, [A])
    assert list(result) == ["2018-01-15", "2020-05-01", "unknown_date_1", "unknown_date_2", "current"]
    assert result["2018-01-15"] == [B, E]
    assert result["unknown_date_1"] == [C]
    assert result["unknown_date_2"] == [D]
    assert result["current"] == [A]


def test_current_always_present():
    assert aggregate([], None) == {"current": []}


def test_empty_entries_skipped():
    result = aggregate([{"date": None, "owners": []}, {"date": None, "owners": [A]}])
    assert result == {"unknown_date_1": [A], "current": []}


def test_tuple_entries():
    result = aggregate([("01/02/2003", [A, A])], [B])
    assert result == {"2003-01-02": [A], "current": [B]}


def test_serialized_round_trip():
    result = aggregate([("01/02/2003", [A, C])], [E])
    loaded = json.loads(json.dumps(serialize_owners_by_date(result)))
    rebuilt = {key: [owner_from_dict(o) for o in owners] for key, owners in loaded.items()}
    assert rebuilt == result
    assert loaded["current"][0]["prefix_name"] is None
