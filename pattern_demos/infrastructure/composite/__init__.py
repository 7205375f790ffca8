"""Composite file system tree."""

from pattern_demos.infrastructure.composite.file_system import File, Folder

__all__ = ["File", "Folder"]
