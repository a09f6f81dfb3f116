"""Command-line entry point for springgen.

Usage::

    springgen generate shop.json -o build/
    springgen tree shop.json
    springgen show shop.json src/main/resources/application.properties

Every command reads a ``ProjectConfig`` from a JSON file (snake_case or the
web UI's camelCase keys) and generates the project in memory first.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape
from rich.syntax import Syntax

from springgen import __version__
from springgen.config import Settings
from springgen.filetree import ContentType, archive_name, content_type_of, write_zip
from springgen.logging_setup import configure_logging
from springgen.scaffolder import (
    MisconfiguredProjectError,
    Project,
    generate_project,
    load_config,
)
from springgen.utils import (
    console,
    print_entries_table,
    print_error,
    print_success,
    print_summary_table,
)

# Pygments lexer per content type
_LEXERS: dict[ContentType, str] = {
    ContentType.JAVA: "java",
    ContentType.XML: "xml",
    ContentType.PROPERTIES: "properties",
    ContentType.GRADLE: "groovy",
    ContentType.MARKDOWN: "markdown",
    ContentType.PLAINTEXT: "text",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="springgen",
        description="Generate a Spring Boot backend from entity descriptions",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate the project and write a ZIP archive")
    gen.add_argument("config", type=Path, help="Project configuration JSON file")
    gen.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Archive file or directory (default: the configured output directory)",
    )

    tree = sub.add_parser("tree", help="List every generated file and folder")
    tree.add_argument("config", type=Path, help="Project configuration JSON file")

    show = sub.add_parser("show", help="Print one generated file")
    show.add_argument("config", type=Path, help="Project configuration JSON file")
    show.add_argument("path", help="Slash-delimited path inside the project")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        print_error(f"Invalid SPRINGGEN_* environment settings: {escape(_first_error(exc))}")
        return 1
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    try:
        project = generate_project(load_config(args.config), settings)
    except MisconfiguredProjectError as exc:
        print_error(f"Invalid project configuration: {escape(str(exc))}")
        return 1
    except OSError as exc:
        print_error(f"Could not read {escape(str(args.config))}: {escape(exc.strerror or str(exc))}")
        return 1

    if args.command == "generate":
        return _cmd_generate(project, args.output or settings.output_dir)
    if args.command == "tree":
        print_entries_table(project.entries(), title=project.name)
        return 0
    return _cmd_show(project, args.path)


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    return f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"


def _cmd_generate(project: Project, destination: Path) -> int:
    try:
        target = write_zip(project, destination)
    except OSError as exc:
        print_error(f"Could not write {escape(str(destination))}: {escape(str(exc))}")
        return 1

    print_summary_table(
        {
            "Project": project.name,
            "Build tool": project.build_tool.value,
            "Database": project.db_choice.value,
            "Package": project.package_path,
            "Entities": str(len(project.file_index)),
            "Files": str(project.files.file_count()),
            "Archive": str(target),
        },
        title=archive_name(project),
    )
    print_success(f"Project {escape(project.name)} generated.")
    return 0


def _cmd_show(project: Project, path: str) -> int:
    content = project.read_file(path)
    if content is None:
        print_error(f"Could not load file content for {escape(path)}")
        return 1
    lexer = _LEXERS[content_type_of(path)]
    console.print(Syntax(content, lexer, line_numbers=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
