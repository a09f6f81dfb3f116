"""springgen scaffolder -- generates Spring Boot projects as file trees.

This module takes a ``ProjectConfig`` describing the project and its
entities and renders a complete layered backend (model, repository, service,
controller, build descriptor, configuration) into an in-memory
``FolderNode`` tree.

Quick usage::

    from springgen.scaffolder import Entity, EntityField, ProjectConfig, generate_project

    config = ProjectConfig(
        project_name="shop",
        entities=[Entity(name="Product", fields=[EntityField(name="title")])],
    )
    project = generate_project(config)
    project.read_file(project.application_path)
"""

from springgen.scaffolder.generator import ProjectGenerator, generate_project
from springgen.scaffolder.models import (
    BuildTool,
    DbChoice,
    Entity,
    EntityField,
    FieldType,
    FileCategory,
    MisconfiguredProjectError,
    Project,
    ProjectConfig,
    load_config,
)
from springgen.scaffolder.naming import EntityNames
from springgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "BuildTool",
    "DbChoice",
    "Entity",
    "EntityField",
    "EntityNames",
    "FieldType",
    "FileCategory",
    "MisconfiguredProjectError",
    "Project",
    "ProjectConfig",
    "ProjectGenerator",
    "TemplateRenderer",
    "generate_project",
    "load_config",
]
