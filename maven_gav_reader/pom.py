"""Coordinate extraction from Maven ``pom.xml`` descriptors."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Final, Mapping

from lxml import etree

from maven_gav_reader.errors import ContractViolation, DescriptorError
from maven_gav_reader.settings import Settings, get_settings
from maven_gav_reader.types import Coordinate, ModuleDescriptor

__all__ = [
    "read_module_descriptor",
    "read_reactor",
    "resolve_pom_path",
]

logger = logging.getLogger(__name__)

_POM_NAMESPACE: Final[str] = "http://maven.apache.org/POM/4.0.0"
_PROPERTY_REFERENCE: Final[re.Pattern[str]] = re.compile(r"\$\{([^}]+)\}")
_MAX_RESOLUTION_DEPTH: Final[int] = 10


def resolve_pom_path(path: Path | str, *, pom_filename: str = "pom.xml") -> Path:
    """Return the absolute path of the descriptor named by ``path``.

    ``path`` may be the descriptor itself or the directory holding it. The
    result is made absolute without following symlinks.
    """
    candidate = Path(os.path.abspath(os.path.expanduser(str(path))))
    if candidate.is_dir():
        candidate = candidate / pom_filename
    if not candidate.is_file():
        raise DescriptorError(candidate, "no such descriptor file")
    return candidate


def _parse(pom_path: Path) -> etree._Element:
    parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
    try:
        document = etree.parse(str(pom_path), parser)
    except OSError as exc:
        raise DescriptorError(pom_path, f"cannot read descriptor ({exc})") from exc
    except etree.XMLSyntaxError as exc:
        raise DescriptorError(pom_path, f"malformed XML ({exc})") from exc
    root = document.getroot()
    if etree.QName(root).localname != "project":
        raise DescriptorError(pom_path, "root element is not <project>")
    return root


def _child(node: etree._Element, tag: str) -> etree._Element | None:
    """Find a direct child, with or without the POM namespace."""
    element = node.find(f"{{{_POM_NAMESPACE}}}{tag}")
    if element is None:
        element = node.find(tag)
    return element


def _text(node: etree._Element | None, tag: str) -> str | None:
    if node is None:
        return None
    element = _child(node, tag)
    if element is None or element.text is None:
        return None
    text = element.text.strip()
    return text or None


def _properties(root: etree._Element) -> dict[str, str]:
    container = _child(root, "properties")
    if container is None:
        return {}
    properties: dict[str, str] = {}
    for element in container:
        if not isinstance(element.tag, str):
            continue
        properties[etree.QName(element).localname] = (element.text or "").strip()
    return properties


def _resolve(value: str, properties: Mapping[str, str]) -> str:
    """Expand ``${name}`` references; unknown references are kept verbatim."""

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        keys = [name]
        if name.startswith("pom."):
            keys.append("project." + name[len("pom."):])
        for key in keys:
            if key in properties:
                return properties[key]
        return match.group(0)

    resolved = value
    for _ in range(_MAX_RESOLUTION_DEPTH):
        expanded = _PROPERTY_REFERENCE.sub(_substitute, resolved)
        if expanded == resolved:
            break
        resolved = expanded
    return resolved


def _read_coordinates(
    root: etree._Element,
    pom_path: Path,
    *,
    resolve_properties: bool,
) -> tuple[Coordinate, Coordinate | None]:
    parent_node = _child(root, "parent")
    parent: Coordinate | None = None
    if parent_node is not None:
        parent = Coordinate(
            group_id=_text(parent_node, "groupId") or "",
            artifact_id=_text(parent_node, "artifactId") or "",
            version=_text(parent_node, "version") or "",
        )

    artifact_id = _text(root, "artifactId")
    if not artifact_id:
        raise ContractViolation(f"{pom_path}: module coordinate is absent (no <artifactId>)")
    group_id = _text(root, "groupId") or (parent.group_id if parent else "")
    version = _text(root, "version") or (parent.version if parent else "")

    if resolve_properties:
        properties = _properties(root)
        properties.update(
            {
                "project.groupId": group_id,
                "project.artifactId": artifact_id,
                "project.version": version,
            }
        )
        if parent is not None:
            properties.update(
                {
                    "project.parent.groupId": parent.group_id,
                    "project.parent.artifactId": parent.artifact_id,
                    "project.parent.version": parent.version,
                }
            )
            parent = Coordinate(
                group_id=_resolve(parent.group_id, properties),
                artifact_id=_resolve(parent.artifact_id, properties),
                version=_resolve(parent.version, properties),
            )
        group_id = _resolve(group_id, properties)
        artifact_id = _resolve(artifact_id, properties)
        version = _resolve(version, properties)

    return Coordinate(group_id, artifact_id, version), parent


def read_module_descriptor(
    pom_path: Path | str,
    *,
    settings: Settings | None = None,
) -> ModuleDescriptor:
    """Read the module and parent coordinates declared by one ``pom.xml``.

    Parameters
    ----------
    pom_path:
        The descriptor file or the directory that contains it.
    settings:
        Optional configuration; defaults to :func:`get_settings`.

    Raises
    ------
    DescriptorError
        If the descriptor is missing, unreadable or not a POM.
    ContractViolation
        If the descriptor does not declare an ``artifactId``.
    """
    cfg = settings or get_settings()
    path = resolve_pom_path(pom_path, pom_filename=cfg.pom_filename)
    root = _parse(path)
    coordinate, parent = _read_coordinates(
        root, path, resolve_properties=cfg.resolve_properties
    )
    logger.debug("Read %s (parent %s) from %s", coordinate, parent, path)
    return ModuleDescriptor(
        coordinate=coordinate,
        descriptor_path=path,
        parent=parent,
    )


def _declared_modules(root: etree._Element) -> list[str]:
    container = _child(root, "modules")
    if container is None:
        return []
    names: list[str] = []
    for element in container:
        if not isinstance(element.tag, str):
            continue
        if etree.QName(element).localname != "module":
            continue
        name = (element.text or "").strip()
        if name:
            names.append(name)
    return names


def read_reactor(
    pom_path: Path | str,
    *,
    settings: Settings | None = None,
) -> list[ModuleDescriptor]:
    """Read a module and every module it aggregates through ``<modules>``.

    Modules are returned depth-first in declaration order, each aggregator
    before the modules it lists. A descriptor reached twice is returned once.
    Any failing module aborts the whole walk.
    """
    cfg = settings or get_settings()
    descriptors: list[ModuleDescriptor] = []
    seen: set[Path] = set()

    def _visit(path: Path) -> None:
        if path in seen:
            logger.debug("Skipping already visited %s", path)
            return
        seen.add(path)
        root = _parse(path)
        coordinate, parent = _read_coordinates(
            root, path, resolve_properties=cfg.resolve_properties
        )
        descriptors.append(
            ModuleDescriptor(
                coordinate=coordinate,
                descriptor_path=path,
                parent=parent,
            )
        )
        for name in _declared_modules(root):
            child = resolve_pom_path(
                path.parent / name, pom_filename=cfg.pom_filename
            )
            _visit(child)

    _visit(resolve_pom_path(pom_path, pom_filename=cfg.pom_filename))
    logger.debug("Reactor at %s holds %d module(s)", pom_path, len(descriptors))
    return descriptors
