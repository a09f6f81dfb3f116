"""Tests for scaffolder input/output models (springgen.scaffolder.models).

Covers:
- EntityField / Entity validation (blank names, empty and duplicate fields)
- ProjectConfig defaults, camelCase aliases, duplicate entity names
- ProjectConfig.parse / load_config error reporting
- Project file access and index lookups
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from springgen.scaffolder import (
    BuildTool,
    DbChoice,
    Entity,
    EntityField,
    FieldType,
    FileCategory,
    MisconfiguredProjectError,
    ProjectConfig,
    generate_project,
    load_config,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class TestEntityField:
    def test_default_type_is_string(self):
        assert EntityField(name="title").type is FieldType.STRING

    def test_name_is_stripped(self):
        assert EntityField(name="  title ").name == "title"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            EntityField(name="   ")

    def test_slash_in_name_rejected(self):
        with pytest.raises(ValidationError, match="must not contain"):
            EntityField(name="a/b")

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            EntityField(name="tags", type="List")

    def test_all_types_accepted(self):
        names = [EntityField(name="f", type=t).type.value for t in FieldType]
        assert names == ["String", "Integer", "Long", "Double", "Boolean", "Date"]


class TestEntity:
    def test_fields_keep_order(self):
        entity = Entity(name="User", fields=[{"name": "b"}, {"name": "a"}, {"name": "c"}])
        assert [f.name for f in entity.fields] == ["b", "a", "c"]

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="entity name"):
            Entity(name="", fields=[{"name": "a"}])

    def test_slash_in_name_rejected(self):
        with pytest.raises(ValidationError, match="entity name must not contain"):
            Entity(name="a/B", fields=[{"name": "a"}])

    def test_no_fields_rejected(self):
        with pytest.raises(ValidationError, match="at least one field"):
            Entity(name="User", fields=[])

    def test_duplicate_field_rejected(self):
        with pytest.raises(ValidationError, match="duplicate field name: email"):
            Entity(name="User", fields=[{"name": "email"}, {"name": "email", "type": "Long"}])

    def test_uses_date(self):
        assert Entity(name="E", fields=[{"name": "at", "type": "Date"}]).uses_date
        assert not Entity(name="E", fields=[{"name": "n"}]).uses_date

    def test_frozen(self):
        entity = Entity(name="User", fields=[{"name": "a"}])
        with pytest.raises(ValidationError):
            entity.name = "Other"


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------


class TestProjectConfig:
    def test_defaults(self):
        config = ProjectConfig(project_name="demo")
        assert config.build_tool is BuildTool.MAVEN
        assert config.db_choice is DbChoice.H2
        assert config.domain == "com.example"
        assert config.entities == []

    def test_camel_case_aliases(self, shop_config_data: dict[str, Any]):
        config = ProjectConfig.model_validate(shop_config_data)
        assert config.project_name == "shop"
        assert config.build_tool is BuildTool.MAVEN
        assert config.db_choice is DbChoice.H2
        assert config.entities[0].fields[0].name == "title"

    def test_blank_project_name_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name=" ")

    @pytest.mark.parametrize("name", ["my/app", "/shop", "shop/"])
    def test_slash_in_project_name_rejected(self, name: str):
        with pytest.raises(ValidationError, match="project name must not contain"):
            ProjectConfig(project_name=name)

    @pytest.mark.parametrize("domain", ["com/example", "com.example/api", "org.acme/"])
    def test_slash_in_domain_rejected(self, domain: str):
        with pytest.raises(ValidationError, match="domain segments"):
            ProjectConfig(project_name="demo", domain=domain)

    def test_domain_is_stripped(self):
        assert ProjectConfig(project_name="demo", domain=" org.acme ").domain == "org.acme"

    def test_invalid_build_tool_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name="demo", build_tool="ant")

    def test_duplicate_entity_names_rejected(self):
        with pytest.raises(ValidationError, match="duplicate entity name"):
            ProjectConfig(
                project_name="demo",
                entities=[
                    {"name": "Order", "fields": [{"name": "a"}]},
                    {"name": "Order", "fields": [{"name": "b"}]},
                ],
            )

    def test_entity_names_differing_in_case_rejected(self):
        with pytest.raises(ValidationError, match="conflicts with Order"):
            ProjectConfig(
                project_name="demo",
                entities=[
                    {"name": "Order", "fields": [{"name": "a"}]},
                    {"name": "ORDER", "fields": [{"name": "b"}]},
                ],
            )

    def test_equal_configs_compare_equal(self, shop_config: ProjectConfig, shop_config_data):
        assert ProjectConfig.model_validate(shop_config_data) == shop_config


class TestParseAndLoad:
    def test_parse_valid(self, shop_config_data):
        assert ProjectConfig.parse(shop_config_data).project_name == "shop"

    def test_parse_reports_location(self, shop_config_data):
        shop_config_data["entities"][0]["fields"] = []
        with pytest.raises(MisconfiguredProjectError, match="entities.0.fields"):
            ProjectConfig.parse(shop_config_data)

    def test_parse_missing_name(self):
        with pytest.raises(MisconfiguredProjectError, match="projectName"):
            ProjectConfig.parse({"buildTool": "maven"})

    def test_misconfigured_is_value_error(self):
        assert issubclass(MisconfiguredProjectError, ValueError)

    def test_load_config(self, config_file: Path):
        assert load_config(config_file).entities[0].name == "Product"

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MisconfiguredProjectError, match="invalid JSON"):
            load_config(path)

    def test_load_non_object(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(MisconfiguredProjectError, match="expected a JSON object"):
            load_config(path)

    def test_load_non_utf8(self, tmp_path: Path):
        path = tmp_path / "utf16.json"
        path.write_bytes(b"\xff\xfe{\x00}\x00")
        with pytest.raises(MisconfiguredProjectError, match="not valid UTF-8"):
            load_config(path)

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------


class TestProject:
    @pytest.fixture
    def project(self, shop_config: ProjectConfig):
        return generate_project(shop_config)

    def test_read_file(self, project):
        assert project.read_file("pom.xml").startswith("<?xml")
        assert project.read_file("missing.txt") is None

    def test_write_file_returns_new_project(self, project):
        updated = project.write_file("README.md", "# custom")
        assert updated is not project
        assert updated.read_file("README.md") == "# custom"
        assert project.read_file("README.md") != "# custom"
        assert updated.file_index == project.file_index
        assert updated.name == project.name

    def test_write_file_miss_returns_self(self, project):
        assert project.write_file("src/main/java/Nope.java", "x") is project
        assert project.write_file("src/main", "x") is project

    def test_path_for(self, project):
        assert project.path_for("Product", FileCategory.CONTROLLER) == (
            "src/main/java/com/example/shop/controller/ProductController.java"
        )
        assert project.path_for("Missing", FileCategory.MODEL) is None

    def test_first_file_in(self, project):
        assert project.first_file_in(FileCategory.REPOSITORY).endswith(
            "repository/ProductRepository.java"
        )

    def test_first_file_in_without_entities(self):
        project = generate_project(ProjectConfig(project_name="empty"))
        assert project.first_file_in(FileCategory.MODEL) is None

    def test_entries(self, project):
        paths = [e.path for e in project.entries()]
        assert paths[0] == "src"
        assert "README.md" in paths
