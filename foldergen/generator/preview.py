"""Read-only preview of a generation run.

Renders the derived structure as a Rich tree and builds the short summary
shown before folders are generated. Nothing here touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape
from rich.tree import Tree

from foldergen.generator.engine import DEFAULT_ASSETS_ROOT, GenerationResult
from foldergen.structure.models import StructureConfig
from foldergen.utils import is_blank, pluralize

FOLDER_ICON = "\U0001F4C1"
SUBFOLDER_ICON = "\U0001F4C2"


def preview_root_name(config: StructureConfig, root_name: str | None = None) -> str:
    """Return *root_name*, falling back to the config's default when blank."""
    if is_blank(root_name):
        return config.default_root_name
    return root_name


def build_preview_tree(
    config: StructureConfig,
    root_name: str | None = None,
    assets_root: Path = DEFAULT_ASSETS_ROOT,
) -> Tree:
    """Build a tree of the folders *config* would create.

    The top node is the assets root; the project root and the standalone
    folders hang off it as siblings.
    """
    tree = Tree(f"{FOLDER_ICON} {escape(str(assets_root))}", guide_style="dim")
    project = tree.add(f"{FOLDER_ICON} [bold]{escape(preview_root_name(config, root_name))}[/bold]")

    for group_name, subfolders in config.derived_main_structure().items():
        group_node = project.add(f"{FOLDER_ICON} {escape(group_name)}")
        for subfolder in subfolders:
            group_node.add(f"{SUBFOLDER_ICON} {escape(subfolder)}")

    for folder in config.derived_standalone_folders():
        tree.add(f"{FOLDER_ICON} {escape(folder)}")

    return tree


def build_summary(config: StructureConfig, last_result: GenerationResult | None = None) -> str:
    """Return the multi-line summary shown next to the preview."""
    lines = [
        "This will create folders based on the selected configuration.",
        f"Git keep files: {'Enabled' if config.create_marker_files else 'Disabled'}",
        f"Total folder groups: {config.group_count}",
        f"Standalone folders: {pluralize(len(config.derived_standalone_folders()), 'folder')}",
    ]
    if last_result is not None and last_result.message:
        lines.append(f"Last run: {last_result.message}")
    return "\n".join(lines)
