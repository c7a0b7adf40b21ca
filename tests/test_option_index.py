# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Behavioural tests for :mod:`flagindex.index`."""

from __future__ import annotations

import logging

import pytest

from flagindex import (
    DashedNameError,
    DuplicateFlagError,
    EmptyNameError,
    OptionIndex,
    OptionKwargsBuilder,
    OptionRecord,
    ShortFlagExhaustedError,
)


def test_register_manual_records_option_and_flags(index: OptionIndex) -> None:
    record = index.register_manual("-a", "--apple", "Description for Apple option")

    assert record == OptionRecord("-a", "--apple", "Description for Apple option")
    assert index.options == (record,)
    assert index.used_flags == frozenset({"-a", "--apple"})


def test_register_manual_keeps_metadata(index: OptionIndex) -> None:
    kwargs = OptionKwargsBuilder().set_deprecated().build()

    record = index.register_manual("-a", "--apple", "mock", kwargs)

    assert record.kwargs is kwargs


@pytest.mark.parametrize(
    ("short", "long", "colliding"),
    [
        ("-a", "--apricot", ("-a",)),
        ("-ab", "--apple", ("--apple",)),
        ("-a", "--apple", ("-a", "--apple")),
        ("--apple", "--avocado", ("--apple",)),
    ],
)
def test_register_manual_rejects_either_collision(
    index: OptionIndex,
    short: str,
    long: str,
    colliding: tuple[str, ...],
) -> None:
    index.register_manual("-a", "--apple", "mock")

    with pytest.raises(DuplicateFlagError, match="already exist") as excinfo:
        index.register_manual(short, long, "mock")

    assert excinfo.value.flags == colliding
    assert len(index) == 1
    assert index.used_flags == frozenset({"-a", "--apple"})


def test_register_rejects_identical_short_and_long(index: OptionIndex) -> None:
    with pytest.raises(DuplicateFlagError):
        index.register_manual("-x", "-x", "mock")

    assert len(index) == 0
    assert index.used_flags == frozenset()


def test_register_accepts_prebuilt_record(index: OptionIndex) -> None:
    record = OptionRecord("-q", "--quiet", "Quiet output")

    assert index.register(record) is record
    assert index["--quiet"] is record


def test_register_auto_generates_flags(index: OptionIndex) -> None:
    verbose = index.register_auto("verbose", "Verbose output")
    version = index.register_auto("version", "Print version")

    assert verbose.flags == ("-v", "--verbose")
    assert version.flags == ("-ve", "--version")
    assert index.used_flags == frozenset({"-v", "--verbose", "-ve", "--version"})


def test_register_auto_avoids_manual_flags(index: OptionIndex) -> None:
    index.register_manual("-h", "--hostname", "mock")

    record = index.register_auto("help", "Show help")

    assert record.short_flag == "-he"


def test_register_auto_rejects_existing_long_flag(index: OptionIndex) -> None:
    index.register_manual("-x", "--verbose", "mock")

    with pytest.raises(DuplicateFlagError) as excinfo:
        index.register_auto("verbose", "mock")

    assert excinfo.value.flags == ("--verbose",)
    assert len(index) == 1


def test_register_auto_reports_exhaustion_without_partial_insert(index: OptionIndex) -> None:
    index.register_manual("-a", "--x1", "mock")
    index.register_manual("-ab", "--x2", "mock")
    before = index.used_flags

    with pytest.raises(ShortFlagExhaustedError):
        index.register_auto("ab", "mock")

    assert len(index) == 2
    assert index.used_flags == before
    assert "--ab" not in index.used_flags


def test_register_auto_rejects_empty_name(index: OptionIndex) -> None:
    with pytest.raises(EmptyNameError):
        index.register_auto("", "mock")

    assert len(index) == 0


def test_register_auto_rejects_dashed_name(index: OptionIndex) -> None:
    index.register_manual("-a", "--apple", "mock")

    with pytest.raises(DashedNameError):
        index.register_auto("-x", "mock")

    assert len(index) == 1
    assert index.search("--x") == []
    assert "--x" not in index.used_flags


def test_collection_keeps_insertion_order_until_sorted(index: OptionIndex) -> None:
    for name in ("zeta", "alpha", "mu", "beta"):
        index.register_auto(name, "mock")

    assert list(index) == ["--zeta", "--alpha", "--mu", "--beta"]

    index.sort()

    longs = [record.long_flag for record in index.options]
    assert longs == ["--alpha", "--beta", "--mu", "--zeta"]
    assert all(left <= right for left, right in zip(longs, longs[1:]))


def test_sort_is_idempotent(index: OptionIndex) -> None:
    index.register_manual("-b", "--b", "mock")
    index.register_manual("-a", "--a", "mock")
    index.sort()
    first = index.options

    index.sort()

    assert index.options == first


def test_search_single_option(index: OptionIndex) -> None:
    index.register_manual("-a", "--apple", "mock")
    index.register_manual("-ap", "--apricot", "mock")
    index.sort()

    assert index.search("--appl") == ["--apple"]
    assert index.search("--ap") == ["--apple", "--apricot"]


def test_search_uses_prefix_not_substring_semantics(index: OptionIndex) -> None:
    index.register_manual("-a", "--ab", "mock")
    index.register_manual("-acd", "--acde", "mock")
    index.register_manual("-ad", "--ade", "mock")
    index.register_manual("-ab", "--abc", "mock")
    index.sort()

    assert index.search("--ab") == ["--ab", "--abc"]


def test_search_exact_flag_includes_longer_matches(index: OptionIndex) -> None:
    index.register_manual("-a", "--ab", "mock")
    index.register_manual("-ab", "--abc", "mock")
    index.sort()

    assert index.search("--abc") == ["--abc"]
    assert index.search("--ab") == ["--ab", "--abc"]


def test_search_without_match_is_empty(index: OptionIndex) -> None:
    index.register_manual("-a", "--apple", "mock")
    index.register_manual("-ab", "--applicable", "mock")
    index.sort()

    assert index.search("--na") == []


@pytest.mark.parametrize("query", ["--a", "-a", "-", "--", "apple", ""])
def test_search_on_empty_index_is_empty(index: OptionIndex, query: str) -> None:
    assert index.search(query) == []


@pytest.mark.parametrize("query", ["apple", "a", ""])
def test_search_ignores_queries_without_dash(index: OptionIndex, query: str) -> None:
    index.register_manual("-a", "--apple", "mock")
    index.sort()

    assert index.search(query) == []


def test_search_short_flags_returns_long_flags(index: OptionIndex) -> None:
    index.register_manual("-a", "--apple", "mock")
    index.register_manual("-b", "--banana", "mock")
    index.register_manual("-c", "--cherry", "mock")
    index.sort()

    assert index.search("-b") == ["--banana"]
    assert index.search("-") == ["--apple", "--banana", "--cherry"]


def test_behaves_like_mapping(index: OptionIndex) -> None:
    record = index.register_manual("-a", "--apple", "mock")

    assert len(index) == 1
    assert "--apple" in index
    assert "-a" not in index
    assert index["--apple"] is record
    assert dict(index.items()) == {"--apple": record}
    with pytest.raises(KeyError):
        index["--missing"]


def test_find_matches_short_or_long(index: OptionIndex) -> None:
    record = index.register_manual("-a", "--apple", "mock")

    assert index.find("--apple") is record
    assert index.find("-a") is record
    assert index.find("-z") is None


def test_registration_is_logged(index: OptionIndex, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="flagindex.index"):
        index.register_manual("-a", "--apple", "mock")

    assert "registered option -a/--apple" in caplog.text
