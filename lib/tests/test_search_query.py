from __future__ import annotations

import json
from urllib.parse import parse_qs

from carapi_client import JsonSearch, JsonSearchItem
from carapi_client.query import encode_query


def test_item_with_value_serializes_all_keys() -> None:
    search = JsonSearch().add_item(JsonSearchItem("make", "in", ["Tesla"]))
    assert json.loads(search.to_json()) == [{"field": "make", "op": "in", "val": ["Tesla"]}]


def test_item_without_value_omits_val() -> None:
    search = JsonSearch(JsonSearchItem("trim", "is null"))
    assert search.as_list() == [{"field": "trim", "op": "is null"}]


def test_falsy_value_is_kept() -> None:
    assert JsonSearchItem("year", "=", 0).as_dict() == {"field": "year", "op": "=", "val": 0}


def test_search_preserves_insertion_order() -> None:
    search = (
        JsonSearch()
        .add_item(JsonSearchItem("year", ">=", 2015))
        .add_item(JsonSearchItem("make", "like", "Tesla"))
        .add_item(JsonSearchItem("model", "not null"))
    )
    assert len(search) == 3
    assert [item["field"] for item in json.loads(search.to_json())] == ["year", "make", "model"]
    assert [item.field for item in search] == ["year", "make", "model"]


def test_encode_query_empty() -> None:
    assert encode_query(None) == ""
    assert encode_query({}) == ""


def test_encode_query_serializes_json_search() -> None:
    search = JsonSearch().add_item(JsonSearchItem("make", "in", ["Tesla"]))
    qs = encode_query({"json": search, "year": 2020})
    assert qs.startswith("json=")
    assert parse_qs(qs) == {
        "json": ['[{"field":"make","op":"in","val":["Tesla"]}]'],
        "year": ["2020"],
    }


def test_encode_query_scalars_and_sequences() -> None:
    qs = encode_query({"verbose": True, "all": False, "skip": None, "make": ["Ford", "Kia"], "q": "a b&c"})
    assert parse_qs(qs) == {"verbose": ["1"], "all": ["0"], "make": ["Ford", "Kia"], "q": ["a b&c"]}
    assert "skip" not in qs


def test_single_item_serializes_as_object() -> None:
    item = JsonSearchItem("make", "=", "Tesla")
    assert json.loads(item.to_json()) == {"field": "make", "op": "=", "val": "Tesla"}


def test_encode_query_serializes_single_item() -> None:
    qs = encode_query({"json": JsonSearchItem("make", "=", "Tesla")})
    assert json.loads(parse_qs(qs)["json"][0]) == {"field": "make", "op": "=", "val": "Tesla"}


def test_encode_query_nested_mapping_uses_brackets() -> None:
    qs = encode_query({"a": {"b": 1, "c": {"d": "x"}, "skip": None}, "page": 2})
    assert parse_qs(qs) == {"a[b]": ["1"], "a[c][d]": ["x"], "page": ["2"]}
    assert qs.startswith("a%5Bb%5D=1")
