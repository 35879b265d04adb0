"""
Preview Sources - Pre-rendered character rigs used in place of raw sheets.

Some classes ship a rendered rig (a posed, layered character) instead of, or
in addition to, loose sprite sheets. The registry maps a class, optionally
narrowed by race and gender, to the name of such a rig; a PreviewRigSource
turns a rig name and a facing direction into frames.

Registry matching:
- an entry's class must match (case-insensitive)
- an entry that names a race or gender only matches that race or gender
- among matching entries, race agreement scores 2 and gender agreement 1;
  the highest score wins, earlier entries win ties
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from common.src.sprites import Direction, Frame
from ..logging_config import get_logger

logger = get_logger("preview_sources")

RACE_MATCH_SCORE = 2
GENDER_MATCH_SCORE = 1


# =============================================================================
# CAPABILITIES
# =============================================================================

class PreviewRigSource(Protocol):
    """Renders preview frames for a named rig."""

    def frames_for(self, rig_name: str, direction: Direction) -> List[Frame]:
        """Frames of a rig facing a direction; empty if the rig is unknown."""
        ...


@runtime_checkable
class HasIdentifierCode(Protocol):
    """Anything that can report the identifier code of the rig it wraps."""

    def code(self) -> Optional[str]:
        ...


def rig_identifier(obj: object) -> Optional[str]:
    """
    Read a rig's identifier code.

    Args:
        obj: Any object; only HasIdentifierCode implementers are asked.

    Returns:
        The object's code, or None when it has no code capability.
    """
    if isinstance(obj, HasIdentifierCode):
        return obj.code()
    return None


# =============================================================================
# RIG REGISTRY
# =============================================================================

@dataclass(frozen=True)
class RigEntry:
    """
    One registry row.

    Attributes:
        class_name: Class the rig previews
        rig_name: Name passed to the rig source
        race: Race the rig is restricted to, or None for any race
        is_male: Gender the rig is restricted to, or None for either
    """
    class_name: str
    rig_name: str
    race: Optional[str] = None
    is_male: Optional[bool] = None

    def score(self, class_name: str, race: Optional[str], is_male: Optional[bool]) -> Optional[int]:
        """
        Score this entry against a selection.

        Returns:
            None when the entry cannot apply, otherwise the match score.
        """
        if self.class_name.lower() != class_name.lower():
            return None

        score = 0
        if self.race is not None:
            if race is None or self.race.lower() != race.lower():
                return None
            score += RACE_MATCH_SCORE
        if self.is_male is not None:
            if is_male is None or self.is_male != is_male:
                return None
            score += GENDER_MATCH_SCORE
        return score


class PreviewRigRegistry:
    """Lookup table from class selections to preview rig names."""

    def __init__(self, entries: Sequence[RigEntry] = ()):
        self._entries: List[RigEntry] = list(entries)

    def register(
        self,
        class_name: str,
        rig_name: str,
        race: Optional[str] = None,
        is_male: Optional[bool] = None,
    ) -> RigEntry:
        """Add an entry and return it."""
        entry = RigEntry(class_name=class_name, rig_name=rig_name, race=race, is_male=is_male)
        self._entries.append(entry)
        return entry

    def find(
        self,
        class_name: str,
        race: Optional[str] = None,
        is_male: Optional[bool] = None,
    ) -> Optional[RigEntry]:
        """
        Find the best entry for a selection.

        Args:
            class_name: Selected class.
            race: Selected race, if any.
            is_male: Selected gender, if any.

        Returns:
            The highest-scoring applicable entry, or None.
        """
        best: Optional[RigEntry] = None
        best_score = -1
        for entry in self._entries:
            score = entry.score(class_name, race, is_male)
            if score is not None and score > best_score:
                best, best_score = entry, score
        return best

    def rig_name_for(
        self,
        class_name: str,
        race: Optional[str] = None,
        is_male: Optional[bool] = None,
    ) -> Optional[str]:
        entry = self.find(class_name, race, is_male)
        return entry.rig_name if entry else None

    def __len__(self) -> int:
        return len(self._entries)


def rig_frames(
    registry: Optional[PreviewRigRegistry],
    source: Optional[PreviewRigSource],
    class_name: str,
    direction: Direction,
    race: Optional[str] = None,
    is_male: Optional[bool] = None,
) -> List[Frame]:
    """
    Frames from a pre-rendered rig, when one is configured for the selection.

    Returns:
        The rig's frames, or an empty list when no registry entry or source
        applies or the source renders nothing.
    """
    if registry is None or source is None:
        return []

    rig_name = registry.rig_name_for(class_name, race, is_male)
    if rig_name is None:
        return []

    frames = [frame for frame in source.frames_for(rig_name, direction) if frame is not None]
    if frames:
        logger.debug("Using rig %s for %s facing %s", rig_name, class_name, direction.value)
    return frames
