"""Shared pytest fixtures for the springgen test suite.

Provides reusable fixtures for:
- Small hand-built file trees
- Project configurations (the single-entity shop and a multi-entity variant)
- Configuration files on disk for CLI tests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from springgen.filetree import FolderNode
from springgen.scaffolder import Entity, EntityField, FieldType, ProjectConfig


# ---------------------------------------------------------------------------
# File trees
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_mapping() -> dict[str, Any]:
    """Nested mapping form of a small project tree."""
    return {
        "src": {
            "main": {
                "java": {
                    "App.java": "class App {}",
                },
                "resources": {
                    "application.properties": "server.port=8080",
                },
            },
            "test": {
                "java": {},
            },
        },
        "pom.xml": "<project/>",
        "README.md": "# demo",
    }


@pytest.fixture
def sample_tree(sample_mapping: dict[str, Any]) -> FolderNode:
    """``FolderNode`` built from :func:`sample_mapping`."""
    return FolderNode.from_mapping(sample_mapping)


# ---------------------------------------------------------------------------
# Project configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def shop_config() -> ProjectConfig:
    """Single-entity Maven/H2 project."""
    return ProjectConfig(
        project_name="shop",
        build_tool="maven",
        domain="com.example",
        db_choice="h2",
        entities=[
            Entity(name="Product", fields=[EntityField(name="title", type=FieldType.STRING)]),
        ],
    )


@pytest.fixture
def library_config() -> ProjectConfig:
    """Two-entity Gradle/MySQL project with every field type."""
    return ProjectConfig(
        project_name="Library",
        build_tool="gradle",
        domain="org.acme.books",
        db_choice="mysql",
        entities=[
            Entity(
                name="Book",
                fields=[
                    EntityField(name="title", type="String"),
                    EntityField(name="pages", type="Integer"),
                    EntityField(name="isbn", type="Long"),
                    EntityField(name="price", type="Double"),
                    EntityField(name="available", type="Boolean"),
                    EntityField(name="published", type="Date"),
                ],
            ),
            Entity(name="Author", fields=[EntityField(name="name")]),
        ],
    )


@pytest.fixture
def shop_config_data() -> dict[str, Any]:
    """Raw camelCase configuration, as exported by the web UI."""
    return {
        "projectName": "shop",
        "buildTool": "maven",
        "domain": "com.example",
        "dbChoice": "h2",
        "entities": [
            {"name": "Product", "fields": [{"name": "title", "type": "String"}]},
        ],
    }


@pytest.fixture
def config_file(tmp_path: Path, shop_config_data: dict[str, Any]) -> Path:
    """``shop_config_data`` written to a JSON file."""
    path = tmp_path / "shop.json"
    path.write_text(json.dumps(shop_config_data), encoding="utf-8")
    return path
