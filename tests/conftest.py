"""Shared pytest fixtures for the foldergen test suite.

Provides reusable fixtures for:
- A temporary assets root to generate into
- Sample structure configs (the demo layout, an empty one, one with blanks)
- A generation engine bound to the temporary assets root
- A clean FOLDERGEN_* environment
"""

from __future__ import annotations

from pathlib import Path

import pytest

from foldergen.generator.engine import GenerationEngine
from foldergen.structure.models import FolderGroup, StructureConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def assets_root(tmp_path: Path) -> Path:
    """Temporary assets directory (auto-cleanup)."""
    root = tmp_path / "Assets"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Structure configs
# ---------------------------------------------------------------------------


@pytest.fixture
def demo_config() -> StructureConfig:
    """One ``Art`` group with two subfolders and a ``Settings`` standalone folder."""
    return StructureConfig(
        groups=[FolderGroup(name="Art", subfolders=["Sprites", "Shaders"])],
        standalone_folders=["Settings"],
        create_marker_files=True,
    )


@pytest.fixture
def empty_config() -> StructureConfig:
    """A config that describes no folders at all."""
    return StructureConfig(groups=[], standalone_folders=[])


@pytest.fixture
def messy_config() -> StructureConfig:
    """A config full of blanks, a disabled group and a blank-named group."""
    return StructureConfig(
        groups=[
            FolderGroup(name="Art", subfolders=["Sprites", "", "  ", "Shaders", ""]),
            FolderGroup(name="Audio", subfolders=["Music"], enabled=False),
            FolderGroup(name="   ", subfolders=["Orphan"]),
            FolderGroup(name="Docs"),
        ],
        standalone_folders=["", "Settings", " ", "Plugins", ""],
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


@pytest.fixture
def engine(assets_root: Path) -> GenerationEngine:
    """Engine generating into the temporary assets root."""
    return GenerationEngine(assets_root=assets_root)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every FOLDERGEN_* variable for the duration of the test."""
    for variable in (
        "FOLDERGEN_ASSETS_ROOT",
        "FOLDERGEN_CONFIG",
        "FOLDERGEN_ROOT_NAME",
        "FOLDERGEN_VERBOSE",
        "FOLDERGEN_MARKERS",
    ):
        monkeypatch.delenv(variable, raising=False)
    return monkeypatch
