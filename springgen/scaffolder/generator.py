"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and builds the complete Spring Boot project as an
in-memory file tree: one model, repository, service, service implementation
and controller per entity, plus the application entry point, build
descriptor, properties file, readme and ignore file.
"""

from __future__ import annotations

import logging
from typing import Any

from springgen.config import Settings
from springgen.filetree import FileNode, FolderNode

from .models import BuildTool, FileCategory, Project, ProjectConfig
from .naming import EntityNames, application_class, java_package, package_segments
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Template / output name tables
# ---------------------------------------------------------------------------

# Category -> template rendered once per entity
ENTITY_TEMPLATES: dict[FileCategory, str] = {
    FileCategory.MODEL: "java/Entity.java.j2",
    FileCategory.REPOSITORY: "java/Repository.java.j2",
    FileCategory.SERVICE: "java/Service.java.j2",
    FileCategory.SERVICE_IMPL: "java/ServiceImpl.java.j2",
    FileCategory.CONTROLLER: "java/Controller.java.j2",
}

# Build tool -> (template, output file name)
BUILD_FILES: dict[BuildTool, tuple[str, str]] = {
    BuildTool.MAVEN: ("build/pom.xml.j2", "pom.xml"),
    BuildTool.GRADLE: ("build/build.gradle.j2", "build.gradle"),
}

SOURCE_ROOT = ("src", "main", "java")
PROPERTIES_PATH = "src/main/resources/application.properties"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Builds a ``Project`` from a ``ProjectConfig``.

    Generation is deterministic and side-effect free: every call to
    :meth:`generate` renders the whole tree again from the configuration, so
    two generators given equal configurations produce equal projects.
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self) -> Project:
        """Render every file and assemble the project tree.

        Returns:
            The generated ``Project`` with its tree and file index.
        """
        context = self._build_context()
        package_dirs = [*SOURCE_ROOT, *package_segments(self.config.domain), self.config.project_name]
        package_path = "/".join(package_dirs)

        # 1. Per-entity sources, grouped by category folder
        package_folder, file_index = self._render_entities(context, package_path)

        # 2. Application entry point beside the category folders
        app_name = f"{application_class(self.config.project_name)}.java"
        package_folder = package_folder.with_child(
            app_name,
            FileNode(content=self.renderer.render("java/Application.java.j2", context)),
        )

        # 3. src/ subtree: sources, resources and an empty test source root
        properties = FileNode(content=self._render_properties(context))
        src = FolderNode(children={
            "main": FolderNode(children={
                "java": _nest(package_dirs[len(SOURCE_ROOT):], package_folder),
                "resources": FolderNode(children={"application.properties": properties}),
            }),
            "test": FolderNode(children={"java": FolderNode()}),
        })

        # 4. Root files
        build_template, build_file = BUILD_FILES[self.config.build_tool]
        root = FolderNode(children={
            "src": src,
            build_file: FileNode(content=self.renderer.render(build_template, context)),
            "README.md": FileNode(content=self.renderer.render("README.md.j2", context)),
            ".gitignore": FileNode(content=self.renderer.render("gitignore.j2", context)),
        })

        project = Project(
            name=self.config.project_name,
            build_tool=self.config.build_tool,
            domain=self.config.domain,
            db_choice=self.config.db_choice,
            files=root,
            package_path=package_path,
            application_path=f"{package_path}/{app_name}",
            properties_path=PROPERTIES_PATH,
            build_file_path=build_file,
            file_index=file_index,
        )
        logger.info(
            "Generated project %s with %d entities and %d files",
            project.name,
            len(self.config.entities),
            root.file_count(),
        )
        return project

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        return {
            "project_name": self.config.project_name,
            "domain": self.config.domain,
            "package": java_package(self.config.domain, self.config.project_name),
            "application_class": application_class(self.config.project_name),
            "build_tool": self.config.build_tool.value,
            "db_choice": self.config.db_choice.value,
            "database_name": f"{self.config.project_name.lower()}db",
            "settings": self.settings,
            "entities": [
                {"entity": entity, "names": EntityNames.for_entity(entity)}
                for entity in self.config.entities
            ],
        }

    # -- Per-entity rendering ----------------------------------------------

    def _render_entities(
        self, ctx: dict[str, Any], package_path: str
    ) -> tuple[FolderNode, dict[str, dict[FileCategory, str]]]:
        """Render the five category files of every entity.

        Returns the project package folder holding the category folders, and
        the entity -> category -> path index of everything rendered.
        """
        categories: dict[FileCategory, dict[str, FileNode]] = {
            category: {} for category in FileCategory
        }
        file_index: dict[str, dict[FileCategory, str]] = {}

        for item in ctx["entities"]:
            entity_ctx = {**ctx, **item}
            names: EntityNames = item["names"]
            paths: dict[FileCategory, str] = {}
            for category, template in ENTITY_TEMPLATES.items():
                file_name = names.file_name(category)
                categories[category][file_name] = FileNode(
                    content=self.renderer.render(template, entity_ctx)
                )
                paths[category] = f"{package_path}/{category.value}/{file_name}"
            file_index[names.class_name] = paths

        service = FolderNode(children={
            "impl": FolderNode(children=categories[FileCategory.SERVICE_IMPL]),
            **categories[FileCategory.SERVICE],
        })
        package_folder = FolderNode(children={
            FileCategory.MODEL.value: FolderNode(children=categories[FileCategory.MODEL]),
            FileCategory.REPOSITORY.value: FolderNode(children=categories[FileCategory.REPOSITORY]),
            FileCategory.SERVICE.value: service,
            FileCategory.CONTROLLER.value: FolderNode(children=categories[FileCategory.CONTROLLER]),
        })
        return package_folder, file_index

    # -- Per-project rendering ---------------------------------------------

    def _render_properties(self, ctx: dict[str, Any]) -> str:
        """Render ``application.properties`` for the configured database."""
        return self.renderer.render(
            f"resources/application-{ctx['db_choice']}.properties.j2", ctx
        )


def generate_project(config: ProjectConfig, settings: Settings | None = None) -> Project:
    """Generate a project with a fresh :class:`ProjectGenerator`."""
    return ProjectGenerator(config, settings).generate()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _nest(names: list[str], leaf: FolderNode) -> FolderNode:
    """Wrap *leaf* in one folder per name, outermost first.

    ``_nest(["a", "b"], leaf)`` is the folder ``{"a": {"b": leaf}}``.
    """
    node = leaf
    for name in reversed(names):
        node = FolderNode(children={name: node})
    return node
