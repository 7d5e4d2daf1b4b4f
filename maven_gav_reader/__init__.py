"""
Maven GAV reader package.

Emits the coordinates of a Maven module, its parent, and the absolute path to
its ``pom.xml`` as a single JSON line for IDE integrations.
"""

from __future__ import annotations

from maven_gav_reader.errors import (
    ContractViolation,
    DescriptorError,
    GavReaderError,
    RecordError,
)
from maven_gav_reader.formatting import (
    emit,
    format_descriptor,
    format_module,
    gav_string,
)
from maven_gav_reader.pom import read_module_descriptor, read_reactor
from maven_gav_reader.types import Coordinate, ModuleDescriptor

__all__: tuple[str, ...] = (
    "ContractViolation",
    "Coordinate",
    "DescriptorError",
    "GavReaderError",
    "ModuleDescriptor",
    "RecordError",
    "emit",
    "format_descriptor",
    "format_module",
    "gav_string",
    "read_module_descriptor",
    "read_reactor",
)
