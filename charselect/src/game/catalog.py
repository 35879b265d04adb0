"""
Class Catalog - The selectable character classes.

Classes are read from classes.yml and validated with Pydantic. When the file
is missing or lists no classes the built-in Warrior, Mage and Rogue are used.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator

from ..logging_config import get_logger

logger = get_logger("catalog")

DEFAULT_CLASSES_PATH = Path(__file__).parent.parent / "classes.yml"

DEFAULT_RACE = "Hero"


class CharacterClass(BaseModel):
    """One selectable class with its display stats."""
    class_name: str = Field(min_length=1)
    race: str = Field(default=DEFAULT_RACE)
    description: str = ""
    primary_stat: str = ""
    health: int = Field(default=100, ge=0)
    mana: int = Field(default=50, ge=0)
    attack: int = Field(default=10, ge=0)
    defense: int = Field(default=10, ge=0)
    magic: int = Field(default=10, ge=0)
    color: str = Field(default="#FFFFFF", description="Theme colour as #RRGGBB")

    @field_validator("class_name", "race")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("color")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        value = value.strip()
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ValueError(f"color must be #RRGGBB, got {value!r}")
        int(digits, 16)
        return "#" + digits.upper()

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """Theme colour as an (r, g, b) tuple for pygame."""
        digits = self.color[1:]
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def key(self) -> Tuple[str, str]:
        return (self.class_name.lower(), self.race.lower())


class CatalogFile(BaseModel):
    """Top-level layout of classes.yml."""
    classes: List[CharacterClass] = Field(default_factory=list)


BUILTIN_CLASSES: Tuple[CharacterClass, ...] = (
    CharacterClass(
        class_name="Warrior",
        description="A mighty warrior skilled in melee combat and defense.",
        primary_stat="Attack",
        health=120, mana=40, attack=16, defense=12, magic=4,
        color="#CC3333",
    ),
    CharacterClass(
        class_name="Mage",
        description="A powerful spellcaster with devastating magical abilities.",
        primary_stat="Magic",
        health=80, mana=140, attack=6, defense=5, magic=18,
        color="#994DCC",
    ),
    CharacterClass(
        class_name="Rogue",
        description="A stealthy assassin with deadly precision and agility.",
        primary_stat="Defense",
        health=90, mana=60, attack=14, defense=10, magic=8,
        color="#339933",
    ),
)


class ClassCatalog:
    """
    Ordered collection of selectable classes.

    Entries sharing a class name and race (case-insensitive) collapse to the
    first one seen.
    """

    def __init__(self, classes: Sequence[CharacterClass] = BUILTIN_CLASSES):
        self._classes: List[CharacterClass] = []
        seen = set()
        for character_class in classes:
            key = character_class.key()
            if key in seen:
                logger.debug(
                    "Ignoring duplicate class %s (%s)", character_class.class_name, character_class.race
                )
                continue
            seen.add(key)
            self._classes.append(character_class)

    @classmethod
    def from_yaml(cls, path: Optional[Path] = None) -> "ClassCatalog":
        """
        Load the catalog from a YAML file.

        Args:
            path: Catalog file; defaults to the bundled classes.yml.

        Returns:
            The loaded catalog, or the built-in classes when the file is
            missing or lists none.

        Raises:
            pydantic.ValidationError: If an entry is malformed.
        """
        path = Path(path) if path else DEFAULT_CLASSES_PATH
        if not path.exists():
            logger.info("No class catalog at %s; using built-in classes", path)
            return cls()

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        parsed = CatalogFile(**data)
        if not parsed.classes:
            logger.info("Class catalog %s is empty; using built-in classes", path)
            return cls()
        return cls(parsed.classes)

    @property
    def classes(self) -> List[CharacterClass]:
        return list(self._classes)

    def races(self) -> List[str]:
        """Distinct races in catalog order, compared case-insensitively."""
        races: Dict[str, str] = {}
        for character_class in self._classes:
            races.setdefault(character_class.race.lower(), character_class.race)
        return list(races.values()) or [DEFAULT_RACE]

    def classes_for_race(self, race: Optional[str]) -> List[CharacterClass]:
        """Classes of one race; every class when race is None."""
        if race is None:
            return self.classes
        wanted = race.lower()
        return [c for c in self._classes if c.race.lower() == wanted]

    def get(self, class_name: str, race: Optional[str] = None) -> Optional[CharacterClass]:
        """
        Look up a class by name.

        Args:
            class_name: Class name (case-insensitive).
            race: Restrict the lookup to one race.

        Returns:
            The first matching class, or None.
        """
        wanted = class_name.strip().lower()
        for character_class in self.classes_for_race(race):
            if character_class.class_name.lower() == wanted:
                return character_class
        return None

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self):
        return iter(self._classes)
