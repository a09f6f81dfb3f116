"""Path-based accessors over the virtual file tree.

Every accessor addresses a node with a ``/``-delimited relative path in which
empty segments are ignored (``"src//main/"`` is ``"src/main"``).  A path that
does not resolve is not an error: reads return ``None`` and writes hand back
the original tree, leaving it to the caller to report the miss.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from .models import ContentType, EntryKind, FileNode, FolderNode, TreeEntry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

def split_path(path: str) -> list[str]:
    """Split *path* on ``/`` and drop empty segments."""
    return [segment for segment in path.split("/") if segment]


def normalize_path(path: str) -> str:
    """Collapse repeated, leading and trailing slashes in *path*.

    Examples::

        normalize_path("/src//main/java/") -> "src/main/java"
        normalize_path("") -> ""
    """
    return "/".join(split_path(path))


def _parent_folder(tree: FolderNode, segments: list[str], path: str) -> FolderNode | None:
    """Descend through *segments* and return the folder reached, or ``None``."""
    current = tree
    for segment in segments:
        node = current.child(segment)
        if node is None:
            logger.debug("Path segment not found: %s in %s", segment, path)
            return None
        if not isinstance(node, FolderNode):
            logger.debug("Path segment is a file, not a folder: %s in %s", segment, path)
            return None
        current = node
    return current


# ---------------------------------------------------------------------------
# Read / write
# ---------------------------------------------------------------------------

def get_file_by_path(tree: FolderNode, path: str) -> str | None:
    """Return the content of the file at *path*, or ``None`` if there is none.

    The lookup fails as a whole when any intermediate segment is missing or
    is a file, when the final segment is missing, or when it names a folder.
    """
    segments = split_path(path)
    if not segments:
        logger.debug("Empty path given for lookup")
        return None

    parent = _parent_folder(tree, segments[:-1], path)
    if parent is None:
        return None

    name = segments[-1]
    node = parent.child(name)
    if isinstance(node, FileNode):
        return node.content
    if node is None:
        logger.debug("File not found: %s in %s", name, path)
    else:
        logger.debug("Found item is not a file: %s in %s", name, path)
    return None


def set_file_by_path(tree: FolderNode, path: str, content: str) -> FolderNode:
    """Return a new tree in which the file at *path* holds *content*.

    Only the folders along *path* are copied; every other subtree is shared
    with *tree*, which is never modified.  When *path* does not name an
    existing file the original *tree* object is returned unchanged.
    """
    segments = split_path(path)
    if not segments:
        logger.debug("Empty path given for update")
        return tree

    # Collect the folders along the path so they can be rebuilt bottom-up.
    folders: list[FolderNode] = [tree]
    for segment in segments[:-1]:
        node = folders[-1].child(segment)
        if not isinstance(node, FolderNode):
            logger.debug("Path segment not found when updating: %s in %s", segment, path)
            return tree
        folders.append(node)

    name = segments[-1]
    if not isinstance(folders[-1].child(name), FileNode):
        logger.debug("Cannot update: %s is not a file or doesn't exist", name)
        return tree

    replacement: FileNode | FolderNode = FileNode(content=content)
    for folder, segment in zip(reversed(folders), reversed(segments)):
        replacement = folder.with_child(segment, replacement)
    return replacement


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

def flatten(tree: FolderNode, base_path: str = "") -> list[TreeEntry]:
    """Return every node below *tree* in pre-order, folders before contents.

    Entries follow the insertion order of each folder.  The result is a fully
    built list, not a lazy iterator.
    """
    entries: list[TreeEntry] = []
    for name, node in tree.children.items():
        path = f"{base_path}/{name}" if base_path else name
        if isinstance(node, FolderNode):
            entries.append(TreeEntry(path=path, kind=EntryKind.FOLDER))
            entries.extend(flatten(node, path))
        else:
            entries.append(TreeEntry(path=path, kind=EntryKind.FILE))
    return entries


# ---------------------------------------------------------------------------
# Content type
# ---------------------------------------------------------------------------

_EXTENSION_TYPES: dict[str, ContentType] = {
    ".java": ContentType.JAVA,
    ".xml": ContentType.XML,
    ".properties": ContentType.PROPERTIES,
    ".gradle": ContentType.GRADLE,
    ".md": ContentType.MARKDOWN,
}


def content_type_of(name: str) -> ContentType:
    """Map a file name (or path) to an editor content type.

    Extensions match case-sensitively.  Unknown extensions, and dot-files
    such as ``.gitignore``, are plain text.
    """
    suffix = PurePosixPath(name).suffix
    return _EXTENSION_TYPES.get(suffix, ContentType.PLAINTEXT)
