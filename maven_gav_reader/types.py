"""Package-wide type definitions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A ``group:artifact:version`` triple; fields are opaque strings."""

    group_id: str = ""
    artifact_id: str = ""
    version: str = ""

    @property
    def is_empty(self) -> bool:
        """Return True when every field is the empty string."""
        return not (self.group_id or self.artifact_id or self.version)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True, slots=True)
class ModuleDescriptor:
    """Coordinates of one module together with the location of its pom."""

    coordinate: Coordinate
    descriptor_path: Path
    parent: Coordinate | None = None


def build_module_descriptor(
    group_id: str,
    artifact_id: str,
    version: str,
    descriptor_path: Path | str,
    *,
    parent: tuple[str, str, str] | Coordinate | None = None,
) -> ModuleDescriptor:
    """Utility for constructing `ModuleDescriptor` from plain values.

    The descriptor path is made absolute without resolving symlinks.
    """
    if parent is not None and not isinstance(parent, Coordinate):
        parent = Coordinate(*parent)
    return ModuleDescriptor(
        coordinate=Coordinate(group_id, artifact_id, version),
        descriptor_path=Path(os.path.abspath(descriptor_path)),
        parent=parent,
    )
