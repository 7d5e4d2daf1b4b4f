"""Exception hierarchy shared by the reader, the formatter and the CLI."""

from __future__ import annotations

__all__ = [
    "ContractViolation",
    "DescriptorError",
    "GavReaderError",
    "RecordError",
]


class GavReaderError(RuntimeError):
    """Base class for all errors raised by this package."""


class ContractViolation(GavReaderError):
    """Raised when a required input is absent or cannot be resolved."""


class DescriptorError(ContractViolation):
    """Raised when a ``pom.xml`` cannot be located, read or parsed."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class RecordError(GavReaderError, ValueError):
    """Raised when an emitted record line cannot be parsed back."""
