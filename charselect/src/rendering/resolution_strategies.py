"""
Frame pool resolution strategies.

Each strategy is a function ``(request) -> list[Frame]`` that searches one
part of the asset store for a class's frames. The resolver tries them in
order and keeps the first non-empty result, so the order of
DEFAULT_STRATEGIES is the search priority:

1. the class's own walk sheet
2. class-folder sprites, walk before idle
3. class-folder sheets, sliced, walk before idle
4. the nested "Character sprites" layout, then the flat class folder
5. shared parent folders, any name containing the class
6. the whole asset namespace

Composite and reference sheets ("full", "sheet", "reference") are excluded at
every stage, for pre-cut sprites and for sheets before they are sliced.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from common.src.sprites import (
    AssetPaths,
    Frame,
    MotionType,
    NamedImage,
    contains_any,
    is_bad_sheet,
)
from ..assets.provider import AssetProvider

Slicer = Callable[[NamedImage], List[Frame]]


@dataclass(frozen=True)
class ResolveRequest:
    """
    Everything a strategy needs to search for one class.

    Attributes:
        class_name: Class being resolved, as the UI names it
        provider: Asset store to query
        paths: Folder layout of the art pool
        slicer: Sheet slicer for whole images
    """
    class_name: str
    provider: AssetProvider
    paths: AssetPaths
    slicer: Slicer

    @property
    def needle(self) -> str:
        """Lowercase class name used for containment tests."""
        return self.class_name.lower()


ResolverStrategy = Callable[[ResolveRequest], List[Frame]]


# =============================================================================
# HELPERS
# =============================================================================

def _sprite_frames(
    request: ResolveRequest,
    path: str,
    match_class: bool = False,
) -> List[Frame]:
    """Usable pre-cut sprites under a path, one frame each."""
    frames = []
    for sprite in request.provider.list_sprites(path):
        if is_bad_sheet(sprite.name):
            continue
        if match_class and request.needle not in sprite.name.lower():
            continue
        frames.append(Frame.whole(sprite))
    return frames


def _sliced_frames(
    request: ResolveRequest,
    path: str,
    match_class: bool = False,
) -> List[Frame]:
    """Frames of every usable sheet under a path, sliced in listing order."""
    frames = []
    for image in request.provider.list_images(path):
        if is_bad_sheet(image.name):
            continue
        if match_class and request.needle not in image.name.lower():
            continue
        frames.extend(request.slicer(image))
    return frames


def prefer_motion(
    frames: Sequence[Frame],
    motions: Sequence[MotionType] = (MotionType.WALK, MotionType.IDLE),
) -> List[Frame]:
    """
    Narrow frames to the first motion that any of them carries.

    Args:
        frames: Candidate frames.
        motions: Motions to try, in preference order.

    Returns:
        Frames named with the first matching motion's tokens, or all
        candidates unchanged when none carries a motion token.
    """
    for motion in motions:
        matching = [frame for frame in frames if contains_any(frame.name, motion.tokens)]
        if matching:
            return matching
    return list(frames)


def _first_non_empty(*searches: Callable[[], List[Frame]]) -> List[Frame]:
    for search in searches:
        frames = search()
        if frames:
            return frames
    return []


# =============================================================================
# STRATEGIES
# =============================================================================

def find_walk_sheet(request: ResolveRequest) -> Optional[NamedImage]:
    """
    Find the class's walk sheet in its own folder.

    Tries ``<Class>_walk`` then ``<class>_walk`` by exact name, then the first
    usable sheet whose name contains "walk".
    """
    images = request.provider.list_images(request.paths.class_folder(request.class_name))
    for wanted in request.paths.walk_sheet_names(request.class_name):
        for image in images:
            if image.name == wanted:
                return image

    for image in images:
        if is_bad_sheet(image.name):
            continue
        if "walk" in image.name.lower():
            return image
    return None


def exact_walk_sheet(request: ResolveRequest) -> List[Frame]:
    """Stage 1: slice the class's own walk sheet."""
    sheet = find_walk_sheet(request)
    if sheet is None:
        return []
    return request.slicer(sheet)


def class_folder_sprites(request: ResolveRequest) -> List[Frame]:
    """Stage 2: class-named sprites in the class folder, walk before idle."""
    folder = request.paths.class_folder(request.class_name)
    return prefer_motion(_sprite_frames(request, folder, match_class=True))


def class_folder_sheets(request: ResolveRequest) -> List[Frame]:
    """Stage 3: class-named sheets in the class folder, sliced, walk before idle."""
    folder = request.paths.class_folder(request.class_name)
    return prefer_motion(_sliced_frames(request, folder, match_class=True))


def nested_folders(request: ResolveRequest) -> List[Frame]:
    """
    Stage 4: the nested pack layout, then the flat class folder.

    Each folder is tried at sprite level before sheet level; names are not
    required to contain the class here because the folder already does.
    """
    paths = request.paths
    folders = (
        paths.nested_folder(request.class_name),
        paths.nested_sheet_folder(request.class_name),
        paths.class_folder(request.class_name),
    )
    for folder in folders:
        frames = _first_non_empty(
            lambda: _sprite_frames(request, folder),
            lambda: _sliced_frames(request, folder),
        )
        if frames:
            return frames
    return []


def broad_scan(request: ResolveRequest) -> List[Frame]:
    """Stage 5: anything named after the class under the shared parent folders."""
    for root in request.paths.broad_scan_roots():
        frames = _first_non_empty(
            lambda: _sprite_frames(request, root, match_class=True),
            lambda: _sliced_frames(request, root, match_class=True),
        )
        if frames:
            return frames
    return []


def namespace_scan(request: ResolveRequest) -> List[Frame]:
    """Stage 6: anything named after the class anywhere in the store."""
    root = AssetPaths.NAMESPACE_ROOT
    return _first_non_empty(
        lambda: _sprite_frames(request, root, match_class=True),
        lambda: _sliced_frames(request, root, match_class=True),
    )


DEFAULT_STRATEGIES: Tuple[ResolverStrategy, ...] = (
    exact_walk_sheet,
    class_folder_sprites,
    class_folder_sheets,
    nested_folders,
    broad_scan,
    namespace_scan,
)
