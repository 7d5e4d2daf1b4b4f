"""Tests for the single-line record formatter."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from maven_gav_reader.errors import ContractViolation
from maven_gav_reader.formatting import emit, format_descriptor, gav_string
from maven_gav_reader.types import Coordinate, ModuleDescriptor


def test_root_module_without_parent() -> None:
    """A module with no parent reports an empty parentGav."""
    line = format_descriptor(
        Coordinate("com.acme", "widget", "1.0.0"),
        None,
        Path("/repo/widget/pom.xml"),
    )
    assert line == (
        '{"gav":"com.acme:widget:1.0.0","parentGav":"",'
        '"pomPath":"/repo/widget/pom.xml"}'
    )


def test_child_module_with_parent() -> None:
    line = format_descriptor(
        Coordinate("com.acme", "widget-core", "1.0.0"),
        Coordinate("com.acme", "widget-parent", "1.0.0"),
        "/repo/widget/core/pom.xml",
    )
    assert line == (
        '{"gav":"com.acme:widget-core:1.0.0",'
        '"parentGav":"com.acme:widget-parent:1.0.0",'
        '"pomPath":"/repo/widget/core/pom.xml"}'
    )


def test_empty_parent_serializes_like_absent_parent() -> None:
    coordinate = Coordinate("g", "a", "v")
    absent = format_descriptor(coordinate, None, "/p/pom.xml")
    empty = format_descriptor(coordinate, Coordinate("", "", ""), "/p/pom.xml")
    assert absent == empty
    assert json.loads(empty)["parentGav"] == ""


def test_partially_empty_fields_are_kept() -> None:
    assert gav_string(Coordinate("g", "", "v")) == "g::v"
    assert gav_string(Coordinate("", "a", "")) == ":a:"
    assert gav_string(None) == ""


def test_key_order_is_fixed() -> None:
    line = format_descriptor(Coordinate("g", "a", "v"), None, "/p/pom.xml")
    assert list(json.loads(line)) == ["gav", "parentGav", "pomPath"]


def test_backslashes_are_escaped() -> None:
    """Backslashes in paths are escaped so the line stays valid JSON."""
    path = "/repo/odd\\dir/pom.xml"
    line = format_descriptor(Coordinate("g", "a", "v"), None, path)
    assert "odd\\\\dir" in line
    assert json.loads(line)["pomPath"] == path


def test_missing_module_coordinate_is_fatal() -> None:
    with pytest.raises(ContractViolation, match="module coordinate"):
        format_descriptor(None, None, "/repo/pom.xml")


@pytest.mark.parametrize("path", [None, "", "relative/pom.xml"])
def test_unresolved_descriptor_path_is_fatal(path: str | None) -> None:
    with pytest.raises(ContractViolation, match="descriptor path"):
        format_descriptor(Coordinate("g", "a", "v"), None, path)


def test_emit_writes_one_line_per_descriptor() -> None:
    stream = io.StringIO()
    descriptors = [
        ModuleDescriptor(Coordinate("g", "a", "1"), Path("/r/pom.xml")),
        ModuleDescriptor(
            Coordinate("g", "b", "1"),
            Path("/r/b/pom.xml"),
            parent=Coordinate("g", "a", "1"),
        ),
    ]
    assert emit(descriptors, stream) == 2
    lines = stream.getvalue().split("\n")
    assert lines[-1] == ""
    assert [json.loads(line)["gav"] for line in lines[:-1]] == ["g:a:1", "g:b:1"]


def test_emit_writes_nothing_when_any_record_fails() -> None:
    stream = io.StringIO()
    descriptors = [
        ModuleDescriptor(Coordinate("g", "a", "1"), Path("/r/pom.xml")),
        ModuleDescriptor(Coordinate("g", "b", "1"), Path("b/pom.xml")),
    ]
    with pytest.raises(ContractViolation):
        emit(descriptors, stream)
    assert stream.getvalue() == ""
