"""Jinja2 rendering of the Spring Boot source templates.

The packaged templates live under ``springgen/scaffolder/templates/`` and are
grouped by what they produce: ``java/`` for per-entity and application
sources, ``build/`` for the Maven and Gradle descriptors, ``resources/`` for
one properties file per database.  Output is returned as strings; placing it
in the file tree is the generator's job.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
)

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".j2"


class TemplateRenderer:
    """Renders springgen's ``.j2`` templates.

    By default templates are loaded from the installed ``springgen.scaffolder``
    package; pass *template_dir* to render from a directory on disk instead.
    Undefined names raise :class:`jinja2.UndefinedError` rather than
    rendering as empty strings, since a missing identifier would otherwise
    produce Java that does not compile.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        loader: BaseLoader
        if template_dir is None:
            loader = PackageLoader("springgen.scaffolder", "templates")
        else:
            loader = FileSystemLoader(str(template_dir))
        self.env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render the template at *template_path* (e.g. ``"java/Entity.java.j2"``)."""
        logger.debug("Rendering %s", template_path)
        return self.env.get_template(template_path).render(**context)

    def render_string(self, source: str, context: dict[str, Any]) -> str:
        """Render an inline template using the same environment settings."""
        return self.env.from_string(source).render(**context)

    def list_templates(self, prefix: str = "") -> list[str]:
        """Sorted template names, optionally restricted to one group folder."""
        group = f"{prefix.strip('/')}/" if prefix else ""
        return sorted(
            name
            for name in self.env.list_templates()
            if name.endswith(TEMPLATE_SUFFIX) and name.startswith(group)
        )
