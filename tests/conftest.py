"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from maven_gav_reader import settings

_POM_NS = 'xmlns="http://maven.apache.org/POM/4.0.0"'


def write_pom(directory: Path, body: str, *, namespaced: bool = True) -> Path:
    """Write a ``pom.xml`` wrapping ``body`` in a <project> element."""
    directory.mkdir(parents=True, exist_ok=True)
    attrs = f" {_POM_NS}" if namespaced else ""
    target = directory / "pom.xml"
    target.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<project{attrs}>\n"
        "  <modelVersion>4.0.0</modelVersion>\n"
        f"{body}\n"
        "</project>\n",
        encoding="utf-8",
    )
    return target


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
):
    """Reload settings from a blank environment for every test."""
    for name in (
        "GAV_READER_POM_FILENAME",
        "GAV_READER_RESOLVE_PROPERTIES",
        "GAV_READER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    blank_env = tmp_path / "blank.env"
    blank_env.write_text("")
    monkeypatch.setenv("GAV_READER_DOTENV_PATH", str(blank_env))
    settings.get_settings(force_reload=True)
    yield
    settings._CACHED_SETTINGS = None


@pytest.fixture
def pom_writer():
    """Expose :func:`write_pom` to tests in subpackages."""
    return write_pom


@pytest.fixture
def widget_reactor(tmp_path: Path) -> Path:
    """A parent aggregator with two child modules; returns the root pom."""
    root = tmp_path / "widget"
    root_pom = write_pom(
        root,
        """
  <groupId>com.acme</groupId>
  <artifactId>widget-parent</artifactId>
  <version>1.0.0</version>
  <packaging>pom</packaging>
  <modules>
    <module>core</module>
    <module>api/pom.xml</module>
  </modules>
""",
    )
    write_pom(
        root / "core",
        """
  <parent>
    <groupId>com.acme</groupId>
    <artifactId>widget-parent</artifactId>
    <version>1.0.0</version>
  </parent>
  <artifactId>widget-core</artifactId>
""",
    )
    write_pom(
        root / "api",
        """
  <parent>
    <groupId>com.acme</groupId>
    <artifactId>widget-parent</artifactId>
    <version>1.0.0</version>
  </parent>
  <artifactId>widget-api</artifactId>
  <version>${project.parent.version}</version>
""",
    )
    return root_pom
