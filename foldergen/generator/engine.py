"""Folder generation engine.

Reconciles a ``StructureConfig`` against the filesystem under an assets root:
validates the requested root name, creates every missing folder of the
derived structure, optionally drops ``.gitkeep`` markers into new leaf
folders, and reports what happened as a ``GenerationResult``. Existing
folders are skipped, never recreated, so re-running after a partial failure
resumes where the previous run stopped.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from foldergen.structure.models import StructureConfig
from foldergen.utils import console, is_blank, pluralize, print_warning

DEFAULT_ASSETS_ROOT = Path("Assets")
MARKER_FILE_NAME = ".gitkeep"
MARKER_CONTENT = "# This file ensures the folder is tracked by Git.\n"

# Union of the characters Windows and POSIX reject in a path component.
RESERVED_CHARACTERS = frozenset('<>:"/\\|?*') | frozenset(chr(c) for c in range(32))
RESERVED_NAMES = frozenset({".", ".."})

RefreshHook = Callable[[Path], None]


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """Outcome of a single :meth:`GenerationEngine.generate` call."""

    model_config = ConfigDict(frozen=True)

    succeeded: bool = Field(..., description="False for an invalid root or a filesystem failure")
    root_name: str = Field(default="", description="Root folder name that was requested")
    created_count: int = Field(default=0, ge=0)
    skipped_count: int = Field(default=0, ge=0)
    message: str = Field(default="", description="Human-readable summary for the caller")
    created_paths: tuple[Path, ...] = Field(default=())
    marker_paths: tuple[Path, ...] = Field(default=())


# ---------------------------------------------------------------------------
# Name validation
# ---------------------------------------------------------------------------


def is_valid_folder_name(name: str | None) -> bool:
    """Return ``True`` if *name* can be used as a single folder name.

    Rejects ``None``, empty and whitespace-only names, ``.`` and ``..``, and
    any name containing a path separator, a control character (including NUL)
    or one of ``< > : " | ? *``. Names the host filesystem encoding cannot
    represent (e.g. lone surrogates) are rejected too.
    """
    if is_blank(name):
        return False
    if name in RESERVED_NAMES:
        return False
    separators = {os.sep, os.altsep} - {None}
    if any(ch in RESERVED_CHARACTERS or ch in separators for ch in name):
        return False
    try:
        os.fsencode(name)
    except UnicodeError:
        return False
    return True


def _noop_refresh(_root: Path) -> None:
    return None


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class _RunState:
    """Counters accumulated while a single run walks the structure."""

    def __init__(self) -> None:
        self.created: list[Path] = []
        self.markers: list[Path] = []
        self.skipped = 0


class GenerationEngine:
    """Creates the folders described by a ``StructureConfig``.

    The engine holds no state between calls. It is synchronous and assumes a
    single writer: callers must not run two generations against the same
    subtree at once.

    Attributes:
        assets_root: Directory the root folder and standalone folders are
            created in.
        refresh_hook: Called with ``assets_root`` after a successful run that
            created at least one folder, so a host can rescan the tree.
        marker_name: File name of the version-control marker.
        verbose: Log every created folder and marker to the console.
    """

    def __init__(
        self,
        assets_root: str | Path = DEFAULT_ASSETS_ROOT,
        refresh_hook: RefreshHook | None = None,
        marker_name: str = MARKER_FILE_NAME,
        verbose: bool = False,
    ) -> None:
        self.assets_root = Path(assets_root)
        self.refresh_hook = refresh_hook or _noop_refresh
        self.marker_name = marker_name
        self.verbose = verbose

    # -- Public API --------------------------------------------------------

    def generate(self, config: StructureConfig, root_name: str) -> GenerationResult:
        """Create every missing folder of *config* under ``assets_root / root_name``.

        Args:
            config: The structure to materialise. Read only.
            root_name: Name of the project root folder.

        Returns:
            A ``GenerationResult``. Errors are reported through the result and
            never raised.
        """
        if not is_valid_folder_name(root_name):
            return GenerationResult(
                succeeded=False,
                root_name=root_name or "",
                message=(
                    f"Invalid root folder name {root_name!r}: use a non-empty name "
                    "without reserved characters."
                ),
            )

        state = _RunState()
        try:
            self._create_structure(config, root_name, state)
        except Exception as exc:
            return GenerationResult(
                succeeded=False,
                root_name=root_name,
                created_count=len(state.created),
                skipped_count=state.skipped,
                message=f"Failed to create folders: {exc}",
                created_paths=tuple(state.created),
                marker_paths=tuple(state.markers),
            )

        if state.created:
            self._notify_refresh()

        return GenerationResult(
            succeeded=True,
            root_name=root_name,
            created_count=len(state.created),
            skipped_count=state.skipped,
            message=_compose_message(root_name, len(state.created), state.skipped),
            created_paths=tuple(state.created),
            marker_paths=tuple(state.markers),
        )

    def plan(self, config: StructureConfig, root_name: str) -> list[Path]:
        """Return every folder a run would create or skip, in creation order.

        Every planned folder is a leaf: a group with subfolders is created as
        their parent and is not planned itself. Invalid entries are left out.
        Nothing on disk is touched. An invalid *root_name* yields an empty plan.
        """
        if not is_valid_folder_name(root_name):
            return []

        root = self.assets_root / root_name
        entries: list[Path] = []

        for group_name, subfolders in config.derived_main_structure().items():
            if not is_valid_folder_name(group_name):
                continue
            group_path = root / group_name
            valid_subfolders = [s for s in subfolders if is_valid_folder_name(s)]
            if not valid_subfolders:
                entries.append(group_path)
                continue
            entries.extend(group_path / sub for sub in valid_subfolders)

        for folder in config.derived_standalone_folders():
            if is_valid_folder_name(folder):
                entries.append(self.assets_root / folder)

        return entries

    # -- Creation ----------------------------------------------------------

    def _create_structure(self, config: StructureConfig, root_name: str, state: _RunState) -> None:
        """Create each planned folder; raises on the first failure."""
        write_markers = config.create_marker_files
        for path in self.plan(config, root_name):
            if path.is_dir():
                state.skipped += 1
                continue

            path.mkdir(parents=True, exist_ok=True)
            state.created.append(path)
            if self.verbose:
                console.log(f"Created folder: {path}")

            if write_markers:
                marker = self._write_marker(path)
                if marker is not None:
                    state.markers.append(marker)

    def _write_marker(self, folder: Path) -> Path | None:
        """Write the marker file into *folder* unless it exists.

        Returns the marker path when it was written, ``None`` otherwise.
        Write errors are ignored: markers never affect the run.
        """
        marker = folder / self.marker_name
        if marker.exists():
            return None
        try:
            marker.write_text(MARKER_CONTENT, encoding="utf-8")
        except OSError as exc:
            if self.verbose:
                console.log(f"Could not write marker {marker}: {exc}")
            return None
        if self.verbose:
            console.log(f"Created marker: {marker}")
        return marker

    def _notify_refresh(self) -> None:
        try:
            self.refresh_hook(self.assets_root)
        except Exception as exc:
            print_warning(f"Refresh hook failed for {self.assets_root}: {exc}")


# ---------------------------------------------------------------------------
# Message composition
# ---------------------------------------------------------------------------


def _compose_message(root_name: str, created: int, skipped: int) -> str:
    if created == 0 and skipped == 0:
        return (
            f"No folders were created for '{root_name}': the configuration "
            "contains no folders to generate."
        )
    if created == 0:
        return (
            f"No new folders were created for '{root_name}'; "
            f"{pluralize(skipped, 'folder')} already existed."
        )
    message = f"Successfully created {pluralize(created, 'folder')} for '{root_name}'."
    if skipped:
        message += f" {pluralize(skipped, 'folder')} already existed."
    return message
