"""
Parser for appfilter documents.

An appfilter is a <resources> root holding <item component=".." drawable="..">
children. A comment directly before an item names the application:

    <!-- WhatsApp -->
    <item component="ComponentInfo{com.whatsapp/com.whatsapp.Main}" drawable="whatsapp" />
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from iconpack_reconciler.component_info import parse_comment_text
from iconpack_reconciler.domain.constants import COMPONENT_ATTR, DRAWABLE_ATTR, ITEM_TAG
from iconpack_reconciler.domain.document import CommentNode, RawElement, ResourceDocument
from iconpack_reconciler.domain.models import Item, Source
from iconpack_reconciler.parsers.base_parser import BaseParser


@dataclass(frozen=True)
class NoPendingComment:
    """No comment seen since the last item."""

    @property
    def app_name(self) -> str:
        return ''


@dataclass(frozen=True)
class PendingComment:
    """A comment was seen; it names the next item only."""

    text: str

    @property
    def app_name(self) -> str:
        return self.text


CommentState = NoPendingComment | PendingComment


class AppFilterParser(BaseParser):
    """
    Parser for appfilter documents.

    Walks the root's direct children in order. Comments move the state to
    PendingComment; an item consumes the pending name and resets the state;
    any other element also resets it.
    """

    def parse(self, source: Source) -> list[Item]:
        """Parse an appfilter and return its items in document order."""
        return self.parse_document(source).items()

    def _fill_nodes(self, root: ET.Element, document: ResourceDocument) -> None:
        state: CommentState = NoPendingComment()
        for child in root:
            if self._is_comment(child):
                document.nodes.append(CommentNode(child.text or ''))
                state = PendingComment(parse_comment_text(child.text))
            elif child.tag == ITEM_TAG:
                document.nodes.append(self._build_item(child, state.app_name))
                state = NoPendingComment()
            else:
                document.nodes.append(RawElement(child))
                state = NoPendingComment()

    def _build_item(self, elem: ET.Element, app_name: str) -> Item:
        return Item(
            component=elem.get(COMPONENT_ATTR, ''),
            drawable=elem.get(DRAWABLE_ATTR, ''),
            app_name=app_name,
            extra_attrib=self._extra_attrib(elem, (COMPONENT_ATTR, DRAWABLE_ATTR)),
        )
