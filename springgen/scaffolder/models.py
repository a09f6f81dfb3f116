"""Pydantic v2 models for project generation.

Defines the input side (``EntityField``, ``Entity``, ``ProjectConfig``) that
describes what to scaffold, and the output side (``Project``) that holds the
generated file tree together with the resolved location of every generated
file.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from springgen.filetree import (
    FolderNode,
    TreeEntry,
    flatten,
    get_file_by_path,
    set_file_by_path,
)


class MisconfiguredProjectError(ValueError):
    """Raised when a project configuration is missing or has invalid fields."""


def _check_name(value: str, what: str) -> str:
    """Strip *value* and reject names that cannot be a single path segment."""
    value = value.strip()
    if not value:
        raise ValueError(f"{what} must not be empty")
    if "/" in value:
        raise ValueError(f"{what} must not contain '/': {value}")
    return value


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FieldType(str, Enum):
    """Supported entity field types; values are the Java type names."""
    STRING = "String"
    INTEGER = "Integer"
    LONG = "Long"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    DATE = "Date"


class BuildTool(str, Enum):
    """Build system of the generated project."""
    MAVEN = "maven"
    GRADLE = "gradle"


class DbChoice(str, Enum):
    """Database the generated project is configured for."""
    H2 = "h2"
    MYSQL = "mysql"


class FileCategory(str, Enum):
    """Per-entity source categories.

    The value is the category's folder path relative to the project package.
    """
    MODEL = "model"
    REPOSITORY = "repository"
    SERVICE = "service"
    SERVICE_IMPL = "service/impl"
    CONTROLLER = "controller"


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------

class EntityField(BaseModel):
    """A single typed member of an entity."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Member name, e.g. 'title'")
    type: FieldType = Field(default=FieldType.STRING, description="Java type of the member")

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        return _check_name(value, "field name")


class Entity(BaseModel):
    """A user-defined data record that drives the generated sources."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Entity class name, e.g. 'Product'")
    fields: list[EntityField] = Field(..., description="Members in declaration order")

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        return _check_name(value, "entity name")

    @field_validator("fields")
    @classmethod
    def _fields_valid(cls, value: list[EntityField]) -> list[EntityField]:
        if not value:
            raise ValueError("an entity needs at least one field")
        seen: set[str] = set()
        for field in value:
            if field.name in seen:
                raise ValueError(f"duplicate field name: {field.name}")
            seen.add(field.name)
        return value

    @property
    def uses_date(self) -> bool:
        """Whether any member is a ``Date`` (needs a ``java.util`` import)."""
        return any(f.type is FieldType.DATE for f in self.fields)


class ProjectConfig(BaseModel):
    """Everything the generator needs to build a project.

    Keys may be given in snake_case or in the camelCase form exported by the
    web UI (``projectName``, ``buildTool``, ``dbChoice``).
    """

    model_config = ConfigDict(populate_by_name=True)

    project_name: str = Field(..., alias="projectName", description="Project / artifact name")
    build_tool: BuildTool = Field(default=BuildTool.MAVEN, alias="buildTool")
    domain: str = Field(default="com.example", description="Dotted base package, e.g. 'com.example'")
    db_choice: DbChoice = Field(default=DbChoice.H2, alias="dbChoice")
    entities: list[Entity] = Field(default_factory=list, description="Entities in generation order")

    @field_validator("project_name")
    @classmethod
    def _valid_project_name(cls, value: str) -> str:
        return _check_name(value, "project name")

    @field_validator("domain")
    @classmethod
    def _valid_domain(cls, value: str) -> str:
        # Each dotted segment becomes one package folder.
        value = value.strip()
        if "/" in value:
            raise ValueError(f"domain segments must not contain '/': {value}")
        return value

    @model_validator(mode="after")
    def _unique_entity_names(self) -> ProjectConfig:
        # Generated identifiers use the lowercase form, so names that only
        # differ in case would collide.
        seen: dict[str, str] = {}
        for entity in self.entities:
            key = entity.name.lower()
            if key in seen:
                raise ValueError(
                    f"duplicate entity name: {entity.name} (conflicts with {seen[key]})"
                )
            seen[key] = entity.name
        return self

    @classmethod
    def parse(cls, data: dict[str, Any]) -> ProjectConfig:
        """Validate a raw mapping into a ``ProjectConfig``.

        Raises:
            MisconfiguredProjectError: With a readable summary of every
                validation problem.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise MisconfiguredProjectError(_describe_errors(exc)) from exc


def load_config(path: str | Path) -> ProjectConfig:
    """Load and validate a ``ProjectConfig`` from a JSON file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        MisconfiguredProjectError: If the file is not UTF-8 encoded, is not a
            JSON object or fails validation.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MisconfiguredProjectError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MisconfiguredProjectError(f"{path}: invalid JSON ({exc.msg})") from exc
    if not isinstance(data, dict):
        raise MisconfiguredProjectError(f"{path}: expected a JSON object")
    return ProjectConfig.parse(data)


def _describe_errors(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``location: message`` lines."""
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "config"
        lines.append(f"{location}: {error['msg']}")
    return "; ".join(lines)


# ---------------------------------------------------------------------------
# Output model
# ---------------------------------------------------------------------------

class Project(BaseModel):
    """A generated project: its settings, file tree and file locations.

    ``file_index`` maps each entity name to the full path of every file
    generated for it, so callers can open a file without re-deriving the
    package folders from the domain.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    build_tool: BuildTool
    domain: str
    db_choice: DbChoice
    files: FolderNode = Field(default_factory=FolderNode)
    package_path: str = Field(default="", description="Slash path of the project package folder")
    application_path: str = Field(default="")
    properties_path: str = Field(default="")
    build_file_path: str = Field(default="")
    file_index: dict[str, dict[FileCategory, str]] = Field(default_factory=dict)

    # -- File access --------------------------------------------------------

    def read_file(self, path: str) -> str | None:
        """Return the content at *path*, or ``None`` if it is not a file."""
        return get_file_by_path(self.files, path)

    def write_file(self, path: str, content: str) -> Project:
        """Return a copy of this project with the file at *path* replaced.

        Returns ``self`` when *path* does not name an existing file.
        """
        files = set_file_by_path(self.files, path, content)
        if files is self.files:
            return self
        return self.model_copy(update={"files": files})

    def entries(self) -> list[TreeEntry]:
        """Flattened listing of the whole tree."""
        return flatten(self.files)

    # -- Index lookups ------------------------------------------------------

    def path_for(self, entity_name: str, category: FileCategory) -> str | None:
        """Return the path of *entity_name*'s file in *category*, if generated."""
        return self.file_index.get(entity_name, {}).get(category)

    def first_file_in(self, category: FileCategory) -> str | None:
        """Return the first generated file of *category*, in entity order."""
        for paths in self.file_index.values():
            if category in paths:
                return paths[category]
        return None
