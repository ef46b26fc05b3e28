"""Order-preserving model of a parsed <resources> document.

The document is a flat, indexable list of root children. Mutations are
list insertions; the XML tree is rebuilt only when the document is written.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from iconpack_reconciler.domain.constants import ROOT_TAG
from iconpack_reconciler.domain.models import CommentNode, Item, StringArray


@dataclass
class RawElement:
    """Any other root child, carried through untouched."""

    element: ET.Element


Node = CommentNode | Item | StringArray | RawElement


@dataclass
class ResourceDocument:
    """Root tag plus its children in document order."""

    nodes: list[Node] = field(default_factory=list)
    root_tag: str = ROOT_TAG
    root_attrib: dict[str, str] = field(default_factory=dict)
    source: str | None = None
    # Comments outside the root element, before and after it.
    prologue: list[CommentNode] = field(default_factory=list)
    epilogue: list[CommentNode] = field(default_factory=list)
    # Prefix to namespace URI, as declared in the source.
    namespaces: dict[str, str] = field(default_factory=dict)

    def items(self) -> list[Item]:
        return [n for n in self.nodes if isinstance(n, Item)]

    def arrays(self) -> list[StringArray]:
        return [n for n in self.nodes if isinstance(n, StringArray)]

    def component_keys(self) -> set[str]:
        return {i.component for i in self.items()}

    def first_item_index(self) -> int | None:
        """Index of the first <item> node, or None if there is none."""
        for idx, node in enumerate(self.nodes):
            if isinstance(node, Item):
                return idx
        return None

    def find_array(self, name: str) -> StringArray | None:
        for arr in self.arrays():
            if arr.name == name:
                return arr
        return None

    def insert(self, index: int, node: Node) -> None:
        self.nodes.insert(index, node)

    def prepend(self, node: Node) -> None:
        self.nodes.insert(0, node)
