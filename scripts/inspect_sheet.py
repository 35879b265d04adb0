#!/usr/bin/env python3
"""
Sprite Sheet Inspector

Prints how the character preview will read a set of PNG files: whether each
file counts as a sheet or a pre-cut sprite, whether it is skipped as a
composite/reference sheet, and the grid the slicer infers for it.

With --resolve, runs the full class resolution against an asset folder and
prints the frames chosen for each facing direction.

Usage:
    python scripts/inspect_sheet.py assets/Characters/Mage
    python scripts/inspect_sheet.py --root assets --resolve Mage
"""

import argparse
import sys
from pathlib import Path
from typing import Iterator, List

import pygame

from common.src.sprites import Direction, NamedImage, infer_cell_size, is_bad_sheet, slice_sheet
from charselect.src.assets import FileSystemAssetProvider, is_frame_sprite_name
from charselect.src.config import get_config
from charselect.src.rendering import AssetResolver, DirectionalFrameSelector


def print_header(text: str) -> None:
    """Print a formatted header."""
    print()
    print("=" * 60)
    print(f"  {text}")
    print("=" * 60)
    print()


def iter_pngs(paths: List[Path]) -> Iterator[Path]:
    """Yield PNG files from files and directories, directories recursively."""
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob("*") if p.suffix.lower() == ".png")
        elif path.suffix.lower() == ".png":
            yield path


def inspect_file(path: Path) -> bool:
    """
    Print the slicing summary of one PNG.

    Returns:
        False if the file could not be loaded.
    """
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        print(f"  {path}: ERROR {e}")
        return False

    image = NamedImage.from_surface(path.stem, surface, path=path.parent.as_posix())
    kind = "sprite" if is_frame_sprite_name(path.stem) else "sheet"
    flags = " [skipped: composite/reference]" if is_bad_sheet(image.name) else ""
    print(f"  {path.name}: {image.width}x{image.height} {kind}{flags}")

    if kind == "sheet":
        cell = infer_cell_size(image.width, image.height)
        frames = slice_sheet(image)
        print(f"    cell {cell}px, grid {image.width // cell}x{image.height // cell}, {len(frames)} frames")
    return True


def resolve_class(root: Path, class_name: str) -> int:
    """Print the frames the preview would show for a class."""
    config = get_config()
    provider = FileSystemAssetProvider(root)
    resolver = AssetResolver(provider, paths=config.assets.asset_paths())
    selector = DirectionalFrameSelector(config.animation.row_directions())

    pool = resolver.resolve(class_name)
    print_header(f"{class_name}: {len(pool)} frames in pool")
    if not pool:
        print("  No usable art found.")
        return 1

    for direction in Direction:
        frames = selector.select(pool, direction)
        names = ", ".join(frame.name for frame in frames)
        print(f"  {direction.value:<6} {len(frames):>3}  {names}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect character sprite sheets")
    parser.add_argument("paths", nargs="*", type=Path, help="PNG files or folders to inspect")
    parser.add_argument("--root", type=Path, default=None, help="Asset root for --resolve")
    parser.add_argument("--resolve", metavar="CLASS", default=None, help="Resolve a class's preview frames")
    args = parser.parse_args()

    pygame.init()
    try:
        if args.resolve:
            root = args.root or Path(get_config().assets.root_dir)
            return resolve_class(root, args.resolve)

        if not args.paths:
            parser.error("give PNG files or folders, or --resolve CLASS")

        print_header("Sheet Inspection")
        failures = sum(1 for path in iter_pngs(args.paths) if not inspect_file(path))
        return 1 if failures else 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
