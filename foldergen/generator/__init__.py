"""Folder generation engine and preview.

Quick usage::

    from foldergen.generator import GenerationEngine
    from foldergen.structure import StructureConfig

    engine = GenerationEngine(assets_root="Assets")
    result = engine.generate(StructureConfig.default(), "Demo")
    print(result.message)
"""

from foldergen.generator.engine import (
    GenerationEngine,
    GenerationResult,
    is_valid_folder_name,
)
from foldergen.generator.preview import build_preview_tree, build_summary

__all__ = [
    "GenerationEngine",
    "GenerationResult",
    "build_preview_tree",
    "build_summary",
    "is_valid_folder_name",
]
