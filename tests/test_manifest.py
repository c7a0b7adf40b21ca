# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests covering manifest loading and CLI construction."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from flagindex import CLI, DuplicateFlagError, ManifestError, OptionKwargs
from flagindex.manifest import build_cli, load_manifest, resolve_command


def test_toml_manifest_builds_sorted_cli(manifest_path: Path) -> None:
    cli = build_cli(load_manifest(manifest_path))

    assert isinstance(cli, CLI)
    assert cli.name == "tool"
    assert cli.description == "Example tool"
    assert [record.flags for record in cli.index.options] == [
        ("-o", "--output"),
        ("-v", "--verbose"),
        ("-ve", "--version"),
    ]
    assert cli.index["--output"].kwargs == OptionKwargs(required=True, nargs=1)
    assert cli.index["--verbose"].kwargs is None
    assert cli.search_options("--ver") == ["--verbose", "--version"]


def test_manifest_subcommands_are_resolvable(manifest_path: Path) -> None:
    cli = build_cli(load_manifest(manifest_path))

    build = resolve_command(cli, "build")
    fast = resolve_command(cli, "build.fast")

    assert build.search_options("--rel") == ["--release"]
    assert fast.name == "fast"
    assert len(fast.index) == 0
    assert resolve_command(cli, None) is cli
    assert resolve_command(cli, "") is cli


def test_resolve_command_reports_unknown_segment(manifest_path: Path) -> None:
    cli = build_cli(load_manifest(manifest_path))

    with pytest.raises(ManifestError, match="no subcommand 'slow'"):
        resolve_command(cli, "build.slow")


def test_json_manifest_is_supported(tmp_path: Path) -> None:
    path = tmp_path / "tool.json"
    path.write_text(
        json.dumps(
            {
                "name": "tool",
                "options": [
                    {"short": "-a", "long": "--apple", "description": "Apple"},
                    {"short": "-ap", "long": "--apricot", "kwargs": {"deprecated": True}},
                ],
            },
        ),
        encoding="utf-8",
    )

    cli = build_cli(load_manifest(path))

    assert cli.search_options("--ap") == ["--apple", "--apricot"]
    assert cli.index["--apricot"].kwargs == OptionKwargs(deprecated=True)


def test_missing_manifest_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_manifest(tmp_path / "missing.toml")


def test_unsupported_suffix_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "tool.yaml"
    path.write_text("name: tool\n", encoding="utf-8")

    with pytest.raises(ManifestError, match="unsupported manifest format"):
        load_manifest(path)


@pytest.mark.parametrize(
    ("filename", "content"),
    [
        ("broken.toml", b"name = \n"),
        ("broken.json", b"{name"),
        ("latin1.toml", b"name = \"\xff\"\n"),
        ("latin1.json", b"{\"name\": \"\xff\xfe\"}"),
    ],
)
def test_undecodable_manifest_is_rejected(tmp_path: Path, filename: str, content: bytes) -> None:
    path = tmp_path / filename
    path.write_bytes(content)

    with pytest.raises(ManifestError, match="failed to parse"):
        load_manifest(path)


@pytest.mark.parametrize(
    "option",
    [
        {"name": "verbose", "short": "-v"},
        {"short": "-v"},
        {"long": "--verbose"},
        {"description": "nothing else"},
        {"name": "verbose", "alias": "v"},
    ],
)
def test_invalid_option_entries_are_rejected(tmp_path: Path, option: dict[str, str]) -> None:
    path = tmp_path / "tool.json"
    path.write_text(json.dumps({"name": "tool", "options": [option]}), encoding="utf-8")

    with pytest.raises(ManifestError, match="invalid manifest"):
        load_manifest(path)


def test_manifest_without_name_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "tool.json"
    path.write_text(json.dumps({"options": []}), encoding="utf-8")

    with pytest.raises(ManifestError, match="invalid manifest"):
        load_manifest(path)


def test_registration_errors_propagate(tmp_path: Path) -> None:
    path = tmp_path / "tool.json"
    path.write_text(
        json.dumps(
            {
                "name": "tool",
                "options": [
                    {"short": "-v", "long": "--verbose"},
                    {"name": "verbose"},
                ],
            },
        ),
        encoding="utf-8",
    )
    entry = load_manifest(path)

    with pytest.raises(DuplicateFlagError):
        build_cli(entry)


def test_invalid_kwargs_surface_with_context(tmp_path: Path) -> None:
    path = tmp_path / "tool.json"
    path.write_text(
        json.dumps({"name": "tool", "options": [{"name": "jobs", "kwargs": {"nargs": "many"}}]}),
        encoding="utf-8",
    )
    entry = load_manifest(path)

    with pytest.raises(ManifestError, match=r"tool\.options\[0\]\.kwargs"):
        build_cli(entry)
