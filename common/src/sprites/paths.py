"""
Asset path builders for character preview art.

Constructs the logical folder paths the resolver searches for a class.
Paths are relative to the asset store root and always use "/" separators.
"""

from dataclasses import dataclass
from typing import List


def join_path(*parts: str) -> str:
    """Join logical path segments, skipping empty ones."""
    return "/".join(part.strip("/") for part in parts if part and part.strip("/"))


@dataclass(frozen=True)
class AssetPaths:
    """
    Folder layout of a character art pool.

    Attributes:
        class_root: Folder holding one sub-folder per class
        nested_root: Folder of the "Character sprites" pack layout
    """
    class_root: str = "Characters"
    nested_root: str = "Characters/New Characters/Character sprites"

    # Whole asset namespace, used by the last-resort scan
    NAMESPACE_ROOT = ""

    def class_folder(self, class_name: str) -> str:
        """
        Get the class's own folder.

        Returns:
            Path like "Characters/Mage"
        """
        return join_path(self.class_root, class_name)

    def walk_sheet_names(self, class_name: str) -> List[str]:
        """
        Candidate names of the class's walk sheet, most specific first.

        Returns:
            ["Mage_walk", "mage_walk"] (deduplicated for lowercase names)
        """
        names = [f"{class_name}_walk", f"{class_name.lower()}_walk"]
        return list(dict.fromkeys(names))

    def idle_sheet_name(self, class_name: str) -> str:
        """Name of the class's idle sheet, e.g. "Mage_idle"."""
        return f"{class_name}_idle"

    def nested_folder(self, class_name: str) -> str:
        """
        Get the class folder inside the nested pack layout.

        Returns:
            Path like "Characters/New Characters/Character sprites/Mage"
        """
        return join_path(self.nested_root, class_name)

    def nested_sheet_folder(self, class_name: str) -> str:
        """
        Get the same-named sub-sheet folder inside the nested class folder.

        Returns:
            Path like ".../Character sprites/Mage/Mage"
        """
        return join_path(self.nested_folder(class_name), class_name)

    def broad_scan_roots(self) -> List[str]:
        """Shared parent folders scanned for any name containing the class."""
        return [self.nested_root, self.class_root]

    def idle_resource_path(self, class_name: str) -> str:
        """
        Get the resource path of the class's idle sheet.

        Returns:
            Path like "Characters/Mage/Mage_idle"
        """
        return join_path(self.class_folder(class_name), self.idle_sheet_name(class_name))

    def walk_frames_folder(self, class_name: str) -> str:
        """
        Get the resource path of the class's walk sheet.

        Returns:
            Path like "Characters/Mage/Mage_walk"
        """
        return join_path(self.class_folder(class_name), f"{class_name}_walk")
