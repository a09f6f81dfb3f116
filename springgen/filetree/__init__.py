"""In-memory virtual file tree for generated projects.

Quick usage::

    from springgen.filetree import FolderNode, get_file_by_path, set_file_by_path

    tree = FolderNode.from_mapping({"src": {"App.java": "class App {}"}})
    updated = set_file_by_path(tree, "src/App.java", "class App { }")
    get_file_by_path(updated, "src/App.java")   # "class App { }"
    get_file_by_path(tree, "src/App.java")      # unchanged: "class App {}"
"""

from springgen.filetree.accessors import (
    content_type_of,
    flatten,
    get_file_by_path,
    normalize_path,
    set_file_by_path,
    split_path,
)
from springgen.filetree.archive import archive_name, tree_to_zip_bytes, write_zip
from springgen.filetree.models import (
    ContentType,
    EntryKind,
    FileNode,
    FolderNode,
    Node,
    TreeEntry,
)

__all__ = [
    "ContentType",
    "EntryKind",
    "FileNode",
    "FolderNode",
    "Node",
    "TreeEntry",
    "archive_name",
    "content_type_of",
    "flatten",
    "get_file_by_path",
    "normalize_path",
    "set_file_by_path",
    "split_path",
    "tree_to_zip_bytes",
    "write_zip",
]
