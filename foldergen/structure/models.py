"""Pydantic v2 models describing the desired folder tree.

``StructureConfig`` is the editable, persisted description of a project's
folder layout. The stored lists are the editing draft and may contain blank
slots; generation only ever reads the derived views, which filter blanks and
disabled groups out.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, PrivateAttr, ValidationError

from foldergen.utils import is_blank

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


class ConfigError(Exception):
    """Raised when a structure config file cannot be read or validated."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Folder group
# ---------------------------------------------------------------------------


class FolderGroup(BaseModel):
    """A top-level category folder (e.g. ``Art``) and its subfolders."""

    name: str = Field(default="", description="Name of the main folder")
    subfolders: list[str] = Field(
        default_factory=list, description="Subfolders to create inside the main folder"
    )
    enabled: bool = Field(default=True, description="Enable/disable this folder group")


# ---------------------------------------------------------------------------
# Structure config
# ---------------------------------------------------------------------------


class StructureConfig(BaseModel):
    """Declarative description of the folder tree to generate.

    Attributes:
        default_root_name: Root folder name proposed to the user.
        groups: Main folders and their subfolders, in creation order.
        standalone_folders: Folders created next to the root rather than
            inside it.
        create_marker_files: Write a ``.gitkeep`` into each new leaf folder.
    """

    default_root_name: str = Field(default="_PROJECT_NAME")
    groups: list[FolderGroup] = Field(default_factory=list)
    standalone_folders: list[str] = Field(default_factory=list)
    create_marker_files: bool = Field(default=True)

    _version: int = PrivateAttr(default=0)

    @property
    def version(self) -> int:
        """Counter bumped on every sanitised mutation."""
        return self._version

    @property
    def group_count(self) -> int:
        """Number of groups a run would generate."""
        return len(self.derived_main_structure())

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def derived_main_structure(self) -> dict[str, list[str]]:
        """Return ``{group name: [subfolders]}`` for every enabled, named group.

        Blank subfolder names are dropped and order is preserved. Disabled
        groups and groups with a blank name are left out entirely.
        """
        structure: dict[str, list[str]] = {}
        for group in self.groups:
            if group.enabled and not is_blank(group.name):
                structure[group.name] = [s for s in group.subfolders if not is_blank(s)]
        return structure

    def derived_standalone_folders(self) -> list[str]:
        """Return the non-blank standalone folders in config order."""
        return [folder for folder in self.standalone_folders if not is_blank(folder)]

    # ------------------------------------------------------------------
    # Sanitation and mutation
    # ------------------------------------------------------------------

    def sanitize(self) -> None:
        """Drop surplus blank entries from the editing lists.

        Each list keeps at most one blank slot (the last one) so an editor
        always has an empty row ready. Bumps :attr:`version`.
        """
        self.standalone_folders = _collapse_blanks(self.standalone_folders)
        for group in self.groups:
            group.subfolders = _collapse_blanks(group.subfolders)
        self._version += 1

    def add_group(
        self,
        name: str,
        subfolders: list[str] | None = None,
        enabled: bool = True,
    ) -> FolderGroup:
        group = FolderGroup(name=name, subfolders=list(subfolders or []), enabled=enabled)
        self.groups.append(group)
        self.sanitize()
        return group

    def add_standalone_folder(self, name: str) -> None:
        self.standalone_folders.append(name)
        self.sanitize()

    def set_group_enabled(self, name: str, enabled: bool) -> None:
        """Enable or disable every group called *name*.

        Raises:
            KeyError: If no group has that name.
        """
        matches = [group for group in self.groups if group.name == name]
        if not matches:
            raise KeyError(name)
        for group in matches:
            group.enabled = enabled
        self.sanitize()

    def set_create_marker_files(self, enabled: bool) -> None:
        self.create_marker_files = enabled
        self.sanitize()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as JSON, or YAML for ``.yaml``/``.yml``.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path that was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if target.suffix.lower() in YAML_SUFFIXES:
            content = yaml.safe_dump(self.model_dump(), sort_keys=False, allow_unicode=True)
        else:
            content = self.model_dump_json(indent=2)
        target.write_text(content, encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "StructureConfig":
        """Load and sanitise a configuration file.

        Raises:
            ConfigError: If the file is missing, unreadable, has an unsupported
                suffix, or does not describe a valid structure.
        """
        source = Path(path)
        suffix = source.suffix.lower()
        if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
            raise ConfigError(source, f"unsupported config format '{suffix or '<none>'}'")

        try:
            raw = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(source, f"cannot read file ({exc})") from exc

        try:
            if suffix in YAML_SUFFIXES:
                data: Any = yaml.safe_load(raw) or {}
            else:
                data = json.loads(raw)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigError(source, f"malformed file ({exc})") from exc

        try:
            config = cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(source, f"invalid structure ({exc.error_count()} errors)\n{exc}") from exc

        config.sanitize()
        return config

    @classmethod
    def load_or_create(cls, path: Path) -> "StructureConfig":
        """Load *path*, writing the default structure there first if it is missing."""
        source = Path(path)
        if source.exists():
            return cls.load(source)
        config = cls.default()
        config.save(source)
        return config

    @classmethod
    def default(cls) -> "StructureConfig":
        """Return the built-in project layout."""
        return cls(
            groups=[group.model_copy(deep=True) for group in DEFAULT_GROUPS],
            standalone_folders=list(DEFAULT_STANDALONE_FOLDERS),
        )


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_GROUPS: list[FolderGroup] = [
    FolderGroup(name="Art", subfolders=["Animations", "Materials", "Models", "Shaders", "Sprites", "Textures"]),
    FolderGroup(name="Audio", subfolders=["Music", "SFX"]),
    FolderGroup(name="Code", subfolders=["Scripts", "Editor"]),
    FolderGroup(name="Level", subfolders=["Prefabs", "Scenes", "UI"]),
    FolderGroup(name="Docs"),
]

DEFAULT_STANDALONE_FOLDERS: list[str] = ["Plugins", "Settings", "ThirdParty"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _collapse_blanks(entries: list[str]) -> list[str]:
    """Remove every blank entry except the last one.

    Lists of zero or one entries are returned unchanged.
    """
    if len(entries) <= 1:
        return list(entries)

    kept: list[str] = []
    seen_blank = False
    for entry in reversed(entries):
        if is_blank(entry):
            if seen_blank:
                continue
            seen_blank = True
        kept.append(entry)
    kept.reverse()
    return kept
