"""XML output generation.

Rebuilds an ElementTree from a ResourceDocument's node list and renders it
with fixed indentation behind a literal utf-8 declaration line. Comments
outside the root and the source's namespace prefixes are written back.
"""

import copy
import logging
import os
import re
import xml.etree.ElementTree as ET

from iconpack_reconciler.domain.constants import (
    COMPONENT_ATTR,
    DRAWABLE_ATTR,
    ITEM_TAG,
    MERGE_INDENT,
    NAME_ATTR,
    STRING_ARRAY_TAG,
    XML_DECLARATION,
)
from iconpack_reconciler.domain.document import CommentNode, RawElement, ResourceDocument
from iconpack_reconciler.domain.models import Item, StringArray
from iconpack_reconciler.errors import ResourceIOError

logger = logging.getLogger(__name__)

# ElementTree reserves these for prefixes it generates.
_GENERATED_PREFIX = re.compile(r'ns\d+$')


class XmlWriter:
    """Serialises ResourceDocuments.

    Args:
        indent: Number of spaces per nesting level.
    """

    def __init__(self, indent: int = MERGE_INDENT) -> None:
        self._space = ' ' * indent

    def build_tree(self, document: ResourceDocument) -> ET.Element:
        root = ET.Element(document.root_tag, dict(document.root_attrib))
        for node in document.nodes:
            if isinstance(node, CommentNode):
                root.append(ET.Comment(node.text))
            elif isinstance(node, Item):
                attrib = {COMPONENT_ATTR: node.component, DRAWABLE_ATTR: node.drawable}
                attrib.update(node.extra_attrib)
                ET.SubElement(root, ITEM_TAG, attrib)
            elif isinstance(node, StringArray):
                self._append_array(root, node)
            elif isinstance(node, RawElement):
                root.append(copy.deepcopy(node.element))
        ET.indent(root, space=self._space)
        return root

    def _append_array(self, root: ET.Element, array: StringArray) -> None:
        attrib = {NAME_ATTR: array.name}
        attrib.update(array.extra_attrib)
        elem = ET.SubElement(root, STRING_ARRAY_TAG, attrib)
        for entry in array.entries:
            if isinstance(entry, CommentNode):
                elem.append(ET.Comment(entry.text))
            else:
                ET.SubElement(elem, ITEM_TAG).text = entry

    def to_string(self, document: ResourceDocument) -> str:
        _register_namespaces(document.namespaces)
        lines = [XML_DECLARATION]
        lines.extend(_render_comment(c) for c in document.prologue)
        lines.append(ET.tostring(self.build_tree(document), encoding='unicode'))
        lines.extend(_render_comment(c) for c in document.epilogue)
        return '\n'.join(lines) + '\n'

    def to_bytes(self, document: ResourceDocument) -> bytes:
        return self.to_string(document).encode('utf-8')

    def write(self, document: ResourceDocument, path: str) -> None:
        """Write the document to path, creating parent directories."""
        data = self.to_bytes(document)
        try:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise ResourceIOError(f"Cannot write file {path}: {e}", path) from e
        logger.debug("Wrote %d bytes to %s", len(data), path)


def _render_comment(comment: CommentNode) -> str:
    return ET.tostring(ET.Comment(comment.text), encoding='unicode')


def _register_namespaces(namespaces: dict[str, str]) -> None:
    """Make ElementTree serialise each URI with the prefix the source used.

    The registry is process-wide; the default namespace is left alone.
    """
    for prefix, uri in namespaces.items():
        if not prefix or _GENERATED_PREFIX.match(prefix):
            continue
        ET.register_namespace(prefix, uri)
