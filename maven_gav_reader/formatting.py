"""Serialization of module coordinates into the single-line JSON record."""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from maven_gav_reader.errors import ContractViolation
from maven_gav_reader.types import Coordinate, ModuleDescriptor

__all__ = [
    "build_record",
    "emit",
    "format_descriptor",
    "format_module",
    "gav_string",
]

logger = logging.getLogger(__name__)


def gav_string(coordinate: Coordinate | None) -> str:
    """Join a coordinate as ``group:artifact:version``.

    An absent coordinate, and one whose fields are all empty, both become the
    empty string. Consumers cannot tell the two apart.
    """
    if coordinate is None or coordinate.is_empty:
        return ""
    return str(coordinate)


def build_record(
    coordinate: Coordinate | None,
    parent: Coordinate | None,
    descriptor_path: Path | str | None,
) -> dict[str, str]:
    """Return the ``gav``/``parentGav``/``pomPath`` mapping in output order.

    Raises
    ------
    ContractViolation
        If the module coordinate is missing or the descriptor path is not
        absolute.
    """
    if coordinate is None:
        raise ContractViolation("module coordinate is absent")
    if descriptor_path is None or not str(descriptor_path):
        raise ContractViolation("descriptor path is absent")
    if not os.path.isabs(descriptor_path):
        raise ContractViolation(
            f"descriptor path is not absolute: {descriptor_path}"
        )
    return {
        "gav": str(coordinate),
        "parentGav": gav_string(parent),
        "pomPath": str(descriptor_path),
    }


def format_descriptor(
    coordinate: Coordinate | None,
    parent: Coordinate | None,
    descriptor_path: Path | str | None,
) -> str:
    """Serialize one module as a compact JSON object, without a newline."""
    record = build_record(coordinate, parent, descriptor_path)
    return json.dumps(record, separators=(",", ":"), ensure_ascii=False)


def format_module(descriptor: ModuleDescriptor) -> str:
    """Serialize a `ModuleDescriptor` as its single-line JSON record."""
    return format_descriptor(
        descriptor.coordinate, descriptor.parent, descriptor.descriptor_path
    )


def emit(
    descriptors: Iterable[ModuleDescriptor],
    stream: TextIO | None = None,
) -> int:
    """Write one line per descriptor and return the number of lines written.

    Every record is formatted before anything is written, so a failing
    descriptor leaves the stream untouched.
    """
    lines = [format_module(descriptor) for descriptor in descriptors]
    target = stream if stream is not None else sys.stdout
    if lines:
        target.write("".join(f"{line}\n" for line in lines))
        target.flush()
    logger.debug("Emitted %d record(s)", len(lines))
    return len(lines)
