"""
Document snapshot abstraction.
The resolver only talks to these interfaces, so it runs the same against a
live Playwright page or an in-memory element tree.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional, List

from ..models import ElementKind, ScriptClass
from ..utils.patterns import classify_script


class SnapshotElement(ABC):
    """A text-bearing (or container) element of a document snapshot."""

    kind: Optional[ElementKind] = None

    @abstractmethod
    async def read_value(self) -> str:
        """
        Read the current text value.

        Raises on a failed read (e.g. element detached); callers decide how
        to recover.
        """
        pass

    @abstractmethod
    async def ancestors(self, max_depth: int) -> List["SnapshotElement"]:
        """Return up to max_depth ancestors, nearest first."""
        pass

    @abstractmethod
    async def text_fields(self) -> List["SnapshotElement"]:
        """Return descendant text fields in document order."""
        pass

    async def script(self) -> ScriptClass:
        """Classify the script of the current value."""
        return classify_script(await self.read_value())


class DocumentSnapshot(ABC):
    """Queryable, read-only view of a rendered page."""

    @abstractmethod
    async def text_fields(self) -> List[SnapshotElement]:
        """Return all text-bearing form fields in document order."""
        pass

    @abstractmethod
    async def editable_regions(self) -> List[SnapshotElement]:
        """Return all free-form editable regions in document order."""
        pass

    @abstractmethod
    async def find_label(self, pattern: re.Pattern, timeout_ms: int) -> Optional[SnapshotElement]:
        """
        Find the first visible element whose own text matches pattern.

        Waits at most timeout_ms. Returns None if no label shows up.
        """
        pass


# ============================================================
# IN-MEMORY TREE
# ============================================================

class ReadFailure(RuntimeError):
    """Raised by a node configured to fail on read."""


class Node(SnapshotElement):
    """
    In-memory element. Nodes form a tree; text fields and editable regions
    are leaves with a value, containers carry label text and children.
    """

    def __init__(
        self,
        tag: str = "div",
        value: str = "",
        kind: Optional[ElementKind] = None,
        text: str = "",
        children: Optional[List["Node"]] = None,
        visible: bool = True,
        fail_reads: bool = False,
    ):
        self.tag = tag
        self.value = value
        self.kind = kind
        self.text = text
        self.visible = visible
        self.fail_reads = fail_reads
        self.parent: Optional[Node] = None
        self.children: List[Node] = []

        for child in children or []:
            self.append(child)

    def append(self, child: "Node") -> "Node":
        child.parent = self
        self.children.append(child)
        return child

    @property
    def is_text_field(self) -> bool:
        return self.kind in (ElementKind.TEXT_INPUT, ElementKind.READ_ONLY)

    def iter_descendants(self):
        """Walk descendants depth-first in document order."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    async def read_value(self) -> str:
        if self.fail_reads:
            raise ReadFailure(f"<{self.tag}> detached")
        if self.kind == ElementKind.EDITABLE:
            return self.value or self.text
        return self.value

    async def ancestors(self, max_depth: int) -> List[SnapshotElement]:
        result = []
        node = self.parent
        while node is not None and len(result) < max_depth:
            result.append(node)
            node = node.parent
        return result

    async def text_fields(self) -> List[SnapshotElement]:
        return [n for n in self.iter_descendants() if n.is_text_field]

    def __repr__(self):
        return f"Node(tag={self.tag!r}, kind={self.kind}, value={self.value!r})"


def textarea(value: str = "", read_only: bool = False, **kwargs) -> Node:
    """Shortcut for a textarea node."""
    kind = ElementKind.READ_ONLY if read_only else ElementKind.TEXT_INPUT
    return Node(tag="textarea", value=value, kind=kind, **kwargs)


def editable(text: str = "", **kwargs) -> Node:
    """Shortcut for a contenteditable div."""
    return Node(tag="div", text=text, kind=ElementKind.EDITABLE, **kwargs)


class TreeSnapshot(DocumentSnapshot):
    """Document snapshot over an in-memory Node tree."""

    def __init__(self, root: Node):
        self.root = root

    @classmethod
    def of_fields(cls, *values: str) -> "TreeSnapshot":
        """Build a flat document holding one textarea per value."""
        return cls(Node(tag="body", children=[textarea(v) for v in values]))

    async def text_fields(self) -> List[SnapshotElement]:
        return [n for n in self.root.iter_descendants() if n.is_text_field]

    async def editable_regions(self) -> List[SnapshotElement]:
        return [n for n in self.root.iter_descendants() if n.kind == ElementKind.EDITABLE]

    async def find_label(self, pattern: re.Pattern, timeout_ms: int) -> Optional[SnapshotElement]:
        for node in self.root.iter_descendants():
            if node.kind is None and node.visible and node.text and pattern.search(node.text):
                return node
        return None
