"""ZIP serialisation of a virtual file tree.

The archive layout mirrors the tree exactly: each folder becomes a directory
entry, each file an entry at the same path holding its UTF-8 encoded content.
Entry timestamps are fixed so equal trees always produce identical bytes.
"""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING

from .accessors import flatten, get_file_by_path
from .models import EntryKind, FolderNode

if TYPE_CHECKING:
    from springgen.scaffolder.models import Project

logger = logging.getLogger(__name__)

# Earliest timestamp the ZIP format can represent.
_FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)


def archive_name(project: Project) -> str:
    """Return the download file name for *project*."""
    return f"{project.name}-project.zip"


def tree_to_zip_bytes(tree: FolderNode) -> bytes:
    """Serialise *tree* into an in-memory ZIP archive and return its bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for entry in flatten(tree):
            if entry.kind is EntryKind.FOLDER:
                info = zipfile.ZipInfo(f"{entry.path}/", date_time=_FIXED_DATE_TIME)
                info.external_attr = 0o40755 << 16
                archive.writestr(info, b"")
                continue
            content = get_file_by_path(tree, entry.path) or ""
            info = zipfile.ZipInfo(entry.path, date_time=_FIXED_DATE_TIME)
            info.external_attr = 0o644 << 16
            info.compress_type = zipfile.ZIP_DEFLATED
            archive.writestr(info, content.encode("utf-8"))
    return buffer.getvalue()


def write_zip(project: Project, destination: str | Path) -> Path:
    """Write *project*'s tree as a ZIP archive.

    Args:
        project: The generated project.
        destination: Target ``.zip`` file, or a directory in which case the
            archive is named after the project (see :func:`archive_name`).
            Missing directories are created.

    Returns:
        Path of the written archive.
    """
    target = Path(destination)
    if target.is_dir() or target.suffix.lower() != ".zip":
        target = target / archive_name(project)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(tree_to_zip_bytes(project.files))
    logger.info("Wrote %s (%d files)", target, project.files.file_count())
    return target
