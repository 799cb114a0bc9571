"""Testes do extrator tipado de caminhos opcionais."""

from __future__ import annotations

import pytest

from api.normalizers.neynar.extractor import (
    get_int,
    get_list,
    get_mapping,
    get_path,
    get_string,
)


def test_get_path_descends_nested_mappings() -> None:
    obj = {"conversation": {"cast": {"hash": "0xabc"}}}

    assert get_path(obj, ("conversation", "cast", "hash")) == ("0xabc", True)


def test_get_path_missing_key_or_non_mapping() -> None:
    obj = {"conversation": {"cast": "not-a-dict"}}

    assert get_path(obj, ("conversation", "missing")) == (None, False)
    assert get_path(obj, ("conversation", "cast", "hash")) == (None, False)
    assert get_path(None, "anything") == (None, False)


def test_get_path_present_null_value() -> None:
    assert get_path({"url": None}, "url") == (None, True)


def test_get_string_zero_value_for_wrong_type() -> None:
    assert get_string({"text": "gm"}, "text") == ("gm", True)
    assert get_string({"text": 42}, "text") == ("", False)
    assert get_string({"text": None}, "text") == ("", False)
    assert get_string({}, "text") == ("", False)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (7, (7, True)),
        (7.0, (7, True)),
        (7.5, (0, False)),
        (True, (0, False)),
        ("7", (0, False)),
        (None, (0, False)),
    ],
)
def test_get_int_accepts_only_integral_numbers(value: object, expected: tuple[int, bool]) -> None:
    assert get_int({"fid": value}, "fid") == expected


def test_get_int_absent() -> None:
    assert get_int({}, "fid") == (0, False)


def test_get_mapping_and_get_list_defaults() -> None:
    assert get_mapping({"reactions": {"likes_count": 1}}, "reactions") == (
        {"likes_count": 1},
        True,
    )
    assert get_mapping({"reactions": []}, "reactions") == ({}, False)
    assert get_list({"embeds": [{"url": "x"}]}, "embeds") == ([{"url": "x"}], True)
    assert get_list({"embeds": {"url": "x"}}, "embeds") == ([], False)


def test_get_mapping_returns_copy() -> None:
    source = {"author": {"fid": 1}}

    author, _ = get_mapping(source, "author")
    author["fid"] = 2

    assert source["author"]["fid"] == 1
