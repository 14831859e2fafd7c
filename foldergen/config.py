"""foldergen application settings.

Typed settings for the command-line front end. Pydantic v2 models validate at
construction time and can be built from environment variables without
boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(raw: str, variable: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{variable} must be one of {sorted(TRUE_VALUES | FALSE_VALUES)}, got {raw!r}")


class Settings(BaseModel):
    """Where to generate, which structure to read, and how loudly.

    Instances are created once by the CLI and passed to the engine and the
    structure loader.
    """

    assets_root: Path = Field(default=Path("Assets"))
    config_path: Path = Field(default=Path("Assets/Editor/FolderStructureConfig.json"))
    root_name: str | None = Field(default=None, description="Root folder name; None means the config default")
    verbose: bool = Field(default=False)
    create_marker_files: bool | None = Field(
        default=None, description="Overrides the config's marker setting when not None"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            FOLDERGEN_ASSETS_ROOT, FOLDERGEN_CONFIG, FOLDERGEN_ROOT_NAME,
            FOLDERGEN_VERBOSE, FOLDERGEN_MARKERS.

        Raises:
            ValueError: If a boolean variable holds an unrecognised value.
        """
        defaults = cls()
        markers: bool | None = None
        if os.environ.get("FOLDERGEN_MARKERS"):
            markers = _parse_bool(os.environ["FOLDERGEN_MARKERS"], "FOLDERGEN_MARKERS")

        verbose = False
        if os.environ.get("FOLDERGEN_VERBOSE"):
            verbose = _parse_bool(os.environ["FOLDERGEN_VERBOSE"], "FOLDERGEN_VERBOSE")

        return cls(
            assets_root=Path(os.environ.get("FOLDERGEN_ASSETS_ROOT", str(defaults.assets_root))),
            config_path=Path(os.environ.get("FOLDERGEN_CONFIG", str(defaults.config_path))),
            root_name=os.environ.get("FOLDERGEN_ROOT_NAME"),
            verbose=verbose,
            create_marker_files=markers,
        )
