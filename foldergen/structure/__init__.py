"""Folder structure description.

Usage::

    from foldergen.structure import FolderGroup, StructureConfig

    config = StructureConfig()
    config.add_group("Art", ["Sprites", "Shaders"])
    config.add_standalone_folder("Settings")
    config.derived_main_structure()  # {"Art": ["Sprites", "Shaders"]}
"""

from foldergen.structure.models import (
    ConfigError,
    FolderGroup,
    StructureConfig,
)

__all__ = [
    "ConfigError",
    "FolderGroup",
    "StructureConfig",
]
