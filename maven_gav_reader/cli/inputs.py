from __future__ import annotations

import argparse
import os
from pathlib import Path

from maven_gav_reader.errors import ContractViolation
from maven_gav_reader.types import Coordinate, ModuleDescriptor

_MODULE_FIELDS = ("group_id", "artifact_id", "version")
_PARENT_FIELDS = ("parent_group_id", "parent_artifact_id", "parent_version")


def _coordinate_from(
    args: argparse.Namespace, fields: tuple[str, str, str]
) -> Coordinate | None:
    values = [getattr(args, name, None) for name in fields]
    if all(value is None for value in values):
        return None
    return Coordinate(*(value or "" for value in values))


def uses_explicit_coordinates(args: argparse.Namespace) -> bool:
    return any(
        getattr(args, name, None) is not None
        for name in (*_MODULE_FIELDS, *_PARENT_FIELDS, "pom_path")
    )


def descriptor_from_args(args: argparse.Namespace) -> ModuleDescriptor:
    """Build a descriptor from ``--group-id``/``--artifact-id``/... flags."""
    coordinate = _coordinate_from(args, _MODULE_FIELDS)
    if coordinate is None:
        raise ContractViolation(
            "module coordinate is absent; pass --group-id, --artifact-id "
            "or --version"
        )
    if not args.pom_path:
        raise ContractViolation("descriptor path is absent; pass --pom-path")
    return ModuleDescriptor(
        coordinate=coordinate,
        descriptor_path=Path(os.path.abspath(os.path.expanduser(args.pom_path))),
        parent=_coordinate_from(args, _PARENT_FIELDS),
    )
