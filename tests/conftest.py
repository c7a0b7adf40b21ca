# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from flagindex import OptionIndex

MANIFEST_TOML = """
name = "tool"
description = "Example tool"

[[options]]
name = "verbose"
description = "Verbose output"

[[options]]
name = "version"
description = "Print version"

[[options]]
short = "-o"
long = "--output"
description = "Output path"

[options.kwargs]
required = true
nargs = 1

[[commands]]
name = "build"
description = "Build things"

[[commands.options]]
name = "release"
description = "Release mode"

[[commands.commands]]
name = "fast"
""".lstrip()


@pytest.fixture
def index() -> OptionIndex:
    """Return an empty option index."""
    return OptionIndex()


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Write the shared example manifest and return its path."""
    path = tmp_path / "tool.toml"
    path.write_text(MANIFEST_TOML, encoding="utf-8")
    return path
