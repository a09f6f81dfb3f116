"""Pydantic v2 models for the in-memory virtual file tree.

A generated project is held as a tree of immutable nodes: a ``FolderNode``
maps child names to nodes, a ``FileNode`` carries the file content.  The two
variants are discriminated on ``kind`` so every traversal can branch on the
node type explicitly instead of guessing from the value.

Nodes are frozen and a folder's children are a read-only mapping.
"Changing" a tree always means building a new root that shares the
untouched subtrees with the old one, so earlier trees stay valid.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class EntryKind(str, Enum):
    """Kind tag of a flattened tree entry."""
    FILE = "file"
    FOLDER = "folder"


class ContentType(str, Enum):
    """Editor hint derived from a file name extension."""
    JAVA = "java"
    XML = "xml"
    PROPERTIES = "properties"
    GRADLE = "gradle"
    MARKDOWN = "markdown"
    PLAINTEXT = "plaintext"


# ---------------------------------------------------------------------------
# Tree nodes
# ---------------------------------------------------------------------------

class FileNode(BaseModel):
    """A file leaf holding its text content."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    content: str = Field(default="", description="Text content of the file")


class FolderNode(BaseModel):
    """A folder mapping child names to nodes, in insertion order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["folder"] = "folder"
    children: Mapping[str, Node] = Field(
        default_factory=dict, validate_default=True, description="Child name -> node"
    )

    @field_validator("children")
    @classmethod
    def _read_only_children(cls, value: Mapping[str, Node]) -> Mapping[str, Node]:
        # Shared between tree versions; never mutable through any of them.
        return MappingProxyType(dict(value))

    @field_serializer("children")
    def _dump_children(self, value: Mapping[str, Node]) -> dict[str, Any]:
        return dict(value)

    def child(self, name: str) -> Node | None:
        """Return the direct child called *name*, or ``None``."""
        return self.children.get(name)

    def with_child(self, name: str, node: Node) -> FolderNode:
        """Return a copy of this folder with *name* set to *node*.

        An existing child keeps its position; a new child is appended.
        """
        children = dict(self.children)
        children[name] = node
        return FolderNode(children=children)

    def file_count(self) -> int:
        """Count the file leaves below this folder."""
        total = 0
        for node in self.children.values():
            if isinstance(node, FolderNode):
                total += node.file_count()
            else:
                total += 1
        return total

    # -- Nested mapping form ------------------------------------------------

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> FolderNode:
        """Build a tree from the nested ``{name: dict | str}`` form.

        Dict values become folders and string values become files.

        Raises:
            TypeError: If a value is neither a mapping nor a string.
        """
        children: dict[str, Node] = {}
        for name, value in mapping.items():
            if isinstance(value, dict):
                children[name] = cls.from_mapping(value)
            elif isinstance(value, str):
                children[name] = FileNode(content=value)
            else:
                raise TypeError(
                    f"Unsupported tree value for {name!r}: {type(value).__name__}"
                )
        return cls(children=children)

    def to_mapping(self) -> dict[str, Any]:
        """Return the nested ``{name: dict | str}`` form of this folder."""
        result: dict[str, Any] = {}
        for name, node in self.children.items():
            if isinstance(node, FolderNode):
                result[name] = node.to_mapping()
            else:
                result[name] = node.content
        return result


Node = Annotated[Union[FileNode, FolderNode], Field(discriminator="kind")]

FolderNode.model_rebuild()


# ---------------------------------------------------------------------------
# Flattened listing
# ---------------------------------------------------------------------------

class TreeEntry(BaseModel):
    """One node of a flattened tree listing."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Full slash path from the tree root")
    kind: EntryKind = Field(..., description="Whether the node is a file or folder")
