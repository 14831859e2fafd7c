"""foldergen -- idempotent project folder structure generation."""

from foldergen.generator import GenerationEngine, GenerationResult, is_valid_folder_name
from foldergen.structure import ConfigError, FolderGroup, StructureConfig

__all__ = [
    "ConfigError",
    "FolderGroup",
    "GenerationEngine",
    "GenerationResult",
    "StructureConfig",
    "is_valid_folder_name",
]
