"""
Character selection state.

Holds what the player has picked so far and the record handed to the game
once the choice is confirmed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from common.src.sprites import AssetPaths, Direction, MotionType


@dataclass(frozen=True)
class SelectedCharacter:
    """
    A confirmed character choice.

    Attributes:
        class_name: Chosen class
        race: Chosen race
        is_male: Chosen gender
        facing: Direction the preview faced when confirmed
        idle_resource_path: Logical path of the class's idle sheet
        walk_frames_folder: Logical folder of the class's walk frames
        character_name: Name the player typed, if any
        rig_name: Preview rig used for the class, if any
    """
    class_name: str
    race: str
    is_male: bool
    facing: Direction
    idle_resource_path: str
    walk_frames_folder: str
    character_name: str = ""
    rig_name: Optional[str] = None

    @classmethod
    def build(
        cls,
        class_name: str,
        race: str,
        is_male: bool,
        facing: Direction,
        paths: AssetPaths,
        character_name: str = "",
        rig_name: Optional[str] = None,
    ) -> "SelectedCharacter":
        return cls(
            class_name=class_name,
            race=race,
            is_male=is_male,
            facing=facing,
            idle_resource_path=paths.idle_resource_path(class_name),
            walk_frames_folder=paths.walk_frames_folder(class_name),
            character_name=character_name.strip(),
            rig_name=rig_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_name": self.class_name,
            "race": self.race,
            "is_male": self.is_male,
            "facing": self.facing.value,
            "idle_resource_path": self.idle_resource_path,
            "walk_frames_folder": self.walk_frames_folder,
            "character_name": self.character_name,
            "rig_name": self.rig_name,
        }


@dataclass
class SelectionState:
    """Mutable in-progress selection."""
    class_name: Optional[str] = None
    race: Optional[str] = None
    is_male: bool = True
    direction: Direction = Direction.SOUTH
    motion: MotionType = MotionType.WALK
    confirmed: Optional[SelectedCharacter] = field(default=None, repr=False)

    @property
    def has_class(self) -> bool:
        return bool(self.class_name)

    def clear(self) -> None:
        """Forget the chosen class and facing; gender is kept."""
        self.class_name = None
        self.race = None
        self.direction = Direction.SOUTH
        self.motion = MotionType.WALK
        self.confirmed = None
