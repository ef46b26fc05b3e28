"""
Base class for resource document parsers.

Handles the parts shared by every document kind: reading XML from a path,
bytes or a binary stream with comments preserved (including those
around the root), recording namespace prefixes, and checking for the
<resources> root.
"""

import logging
import os
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod

from iconpack_reconciler.domain.constants import ROOT_TAG
from iconpack_reconciler.domain.document import ResourceDocument
from iconpack_reconciler.domain.models import CommentNode, Source
from iconpack_reconciler.errors import ResourceIOError, ResourceParseError, ResourceStructureError

logger = logging.getLogger(__name__)


def describe_source(source: Source) -> str | None:
    """Return a printable path for path-like sources, None otherwise."""
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    if isinstance(source, (bytes, bytearray)):
        return None
    name = getattr(source, 'name', None)
    return name if isinstance(name, str) else None


class _ResourceTarget:
    """
    Parser target that builds the element tree with comments kept.

    Comments inside the root go into the tree. Comments before and after the
    root, which a TreeBuilder drops, are collected separately, as are the
    namespace prefixes declared anywhere in the document.
    """

    def __init__(self) -> None:
        self._builder = ET.TreeBuilder(insert_comments=True)
        self._depth = 0
        self._root_seen = False
        self.prologue: list[CommentNode] = []
        self.epilogue: list[CommentNode] = []
        self.namespaces: dict[str, str] = {}

    def start(self, tag, attrib):
        self._depth += 1
        self._root_seen = True
        return self._builder.start(tag, attrib)

    def end(self, tag):
        self._depth -= 1
        return self._builder.end(tag)

    def data(self, data):
        if self._depth:
            self._builder.data(data)

    def comment(self, text):
        if self._depth:
            return self._builder.comment(text)
        outside = self.epilogue if self._root_seen else self.prologue
        outside.append(CommentNode(text or ''))
        return None

    def start_ns(self, prefix, uri):
        self.namespaces.setdefault(prefix, uri)

    def close(self) -> ET.Element:
        return self._builder.close()


class BaseParser(ABC):
    """Common XML loading for appfilter and icon-pack parsers."""

    def _load(self, source: Source) -> tuple[ET.Element, _ResourceTarget]:
        """
        Parse the source and return its <resources> root element together
        with the target holding comments outside the root and namespaces.

        Raises:
            ResourceIOError: the path cannot be opened
            ResourceParseError: the content is not well-formed XML
            ResourceStructureError: the root element is not <resources>
        """
        path = describe_source(source)
        label = path or '<stream>'
        target = _ResourceTarget()
        parser = ET.XMLParser(target=target)
        try:
            if isinstance(source, (bytes, bytearray)):
                parser.feed(bytes(source))
                root = parser.close()
            else:
                root = ET.parse(source, parser=parser).getroot()
        except ET.ParseError as e:
            raise ResourceParseError(f"Failed to decode xml {label}: {e}", path) from e
        except OSError as e:
            raise ResourceIOError(f"Cannot open file {label}: {e}", path) from e

        if root.tag != ROOT_TAG:
            raise ResourceStructureError(
                f"No <{ROOT_TAG}> root in {label} (found <{root.tag}>)", path
            )
        logger.debug("Loaded %s with %d root children", label, len(root))
        return root, target

    def parse_document(self, source: Source) -> ResourceDocument:
        """Parse the source into an order-preserving ResourceDocument."""
        root, target = self._load(source)
        document = ResourceDocument(
            root_tag=root.tag,
            root_attrib=dict(root.attrib),
            source=describe_source(source),
            prologue=target.prologue,
            epilogue=target.epilogue,
            namespaces=target.namespaces,
        )
        self._fill_nodes(root, document)
        return document

    @abstractmethod
    def _fill_nodes(self, root: ET.Element, document: ResourceDocument) -> None:
        """Append the root's children to document.nodes in order."""

    @staticmethod
    def _is_comment(elem: ET.Element) -> bool:
        return elem.tag is ET.Comment

    @staticmethod
    def _get_text(elem: ET.Element) -> str:
        """Trimmed text content of an element, '' when absent."""
        return (elem.text or '').strip()

    @staticmethod
    def _extra_attrib(elem: ET.Element, known: tuple[str, ...]) -> dict[str, str]:
        return {k: v for k, v in elem.attrib.items() if k not in known}
