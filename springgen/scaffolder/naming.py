"""Identifier forms shared by every generated file.

Each template refers to an entity through the same derived names (class
name, lowercase variable, endpoint path) so the generated sources reference
each other consistently.  All derivations live here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import Entity, FileCategory

# File name suffix per category, appended to the entity class name.
_CATEGORY_SUFFIXES: dict[FileCategory, str] = {
    FileCategory.MODEL: "",
    FileCategory.REPOSITORY: "Repository",
    FileCategory.SERVICE: "Service",
    FileCategory.SERVICE_IMPL: "ServiceImpl",
    FileCategory.CONTROLLER: "Controller",
}


@dataclass(frozen=True)
class EntityNames:
    """Derived identifiers for one entity."""

    class_name: str
    variable_name: str
    endpoint: str
    plural_label: str

    @classmethod
    def for_entity(cls, entity: Entity) -> EntityNames:
        variable = entity.name.lower()
        return cls(
            class_name=entity.name,
            variable_name=variable,
            endpoint=f"/api/{variable}",
            plural_label=f"{entity.name}s",
        )

    def type_name(self, category: FileCategory) -> str:
        """Java type declared by this entity's file in *category*."""
        return f"{self.class_name}{_CATEGORY_SUFFIXES[category]}"

    def file_name(self, category: FileCategory) -> str:
        return f"{self.type_name(category)}.java"


def package_segments(domain: str) -> list[str]:
    """Split a dotted domain into package folder names.

    >>> package_segments("com.example")
    ['com', 'example']
    """
    return [part for part in domain.split(".") if part]


def java_package(domain: str, project_name: str) -> str:
    """Root Java package of the generated project."""
    return ".".join([*package_segments(domain), project_name])


def application_class(project_name: str) -> str:
    """Class name of the Spring Boot entry point."""
    return f"{project_name}Application"
