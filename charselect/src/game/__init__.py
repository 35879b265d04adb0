"""Selection data: the class catalog and the player's current choice."""

from .catalog import BUILTIN_CLASSES, DEFAULT_RACE, CharacterClass, ClassCatalog
from .selection_state import SelectedCharacter, SelectionState

__all__ = [
    "BUILTIN_CLASSES",
    "CharacterClass",
    "ClassCatalog",
    "DEFAULT_RACE",
    "SelectedCharacter",
    "SelectionState",
]
