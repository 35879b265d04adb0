"""Common sprite types shared by the preview runtime and asset tooling."""

__version__ = "1.0"
