"""foldergen command-line front end.

Loads (or creates) a structure config, then either previews the tree or
generates it under the assets root.

Usage::

    foldergen Demo
    foldergen Demo --config structure.yaml --assets-root ./Assets
    foldergen --preview
"""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.panel import Panel

from foldergen.config import Settings
from foldergen.generator.engine import GenerationEngine, GenerationResult
from foldergen.generator.preview import build_preview_tree, build_summary
from foldergen.structure.models import ConfigError, StructureConfig
from foldergen.utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldergen",
        description="Generate a project folder structure from a config file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  foldergen Demo\n"
            "  foldergen Demo -c structure.yaml -a ./Assets\n"
            "  foldergen --preview\n"
        ),
    )
    parser.add_argument(
        "root_name",
        nargs="?",
        default=None,
        help="Root folder name (default: FOLDERGEN_ROOT_NAME or the config's default)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Structure config file, JSON or YAML; created with defaults if missing (never by --preview)",
    )
    parser.add_argument(
        "--assets-root", "-a",
        type=Path,
        default=None,
        help="Directory to generate into (default: ./Assets)",
    )
    parser.add_argument(
        "--no-markers",
        action="store_true",
        help="Do not write .gitkeep files into new leaf folders",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the folders that would be created and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every created folder",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    updates: dict[str, object] = {}
    if args.root_name is not None:
        updates["root_name"] = args.root_name
    if args.config is not None:
        updates["config_path"] = args.config
    if args.assets_root is not None:
        updates["assets_root"] = args.assets_root
    if args.no_markers:
        updates["create_marker_files"] = False
    if args.verbose:
        updates["verbose"] = True
    return settings.model_copy(update=updates)


def _load_config(path: Path, create_missing: bool) -> StructureConfig:
    """Load the structure config; a missing file is written only when *create_missing*."""
    if create_missing:
        return StructureConfig.load_or_create(path)
    if path.exists():
        return StructureConfig.load(path)
    return StructureConfig.default()


def _print_result(result: GenerationResult) -> None:
    if result.succeeded:
        print_success(result.message)
    else:
        print_error(result.message)
    print_summary_table(
        {
            "Root folder": result.root_name,
            "Created": str(result.created_count),
            "Skipped (already existed)": str(result.skipped_count),
            "Marker files": str(len(result.marker_paths)),
        },
        title="Folder generation",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``foldergen`` and ``python -m foldergen.cli``."""
    args = build_parser().parse_args(argv)

    try:
        settings = _settings_from_args(args)
    except ValueError as exc:
        print_error(f"Error: {exc}")
        return 1

    try:
        config = _load_config(settings.config_path, create_missing=not args.preview)
    except ConfigError as exc:
        print_error(f"Error: {exc}")
        return 1

    if settings.create_marker_files is not None:
        config.set_create_marker_files(settings.create_marker_files)

    root_name = settings.root_name
    if root_name is None:
        root_name = config.default_root_name

    if args.preview:
        console.print(build_preview_tree(config, root_name, settings.assets_root))
        console.print(Panel(build_summary(config), title="Configuration", expand=False))
        return 0

    engine = GenerationEngine(assets_root=settings.assets_root, verbose=settings.verbose)
    result = engine.generate(config, root_name)
    _print_result(result)
    return 0 if result.succeeded else 1


if __name__ == "__main__":
    raise SystemExit(main())
