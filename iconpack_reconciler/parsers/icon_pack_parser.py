"""Parser for icon-pack documents (named <string-array> lists of drawables)."""

import xml.etree.ElementTree as ET

from iconpack_reconciler.domain.constants import ITEM_TAG, NAME_ATTR, STRING_ARRAY_TAG
from iconpack_reconciler.domain.document import CommentNode, RawElement, ResourceDocument
from iconpack_reconciler.domain.models import Source, StringArray
from iconpack_reconciler.parsers.base_parser import BaseParser


class IconPackParser(BaseParser):
    """Reads every <string-array> child, keeping arrays and values in order."""

    def parse(self, source: Source) -> list[StringArray]:
        return self.parse_document(source).arrays()

    def _fill_nodes(self, root: ET.Element, document: ResourceDocument) -> None:
        for child in root:
            if self._is_comment(child):
                document.nodes.append(CommentNode(child.text or ''))
            elif child.tag == STRING_ARRAY_TAG:
                document.nodes.append(self._build_array(child))
            else:
                document.nodes.append(RawElement(child))

    def _build_array(self, elem: ET.Element) -> StringArray:
        entries: list[str | CommentNode] = []
        for leaf in elem:
            if self._is_comment(leaf):
                entries.append(CommentNode(leaf.text or ''))
            elif leaf.tag == ITEM_TAG:
                entries.append(self._get_text(leaf))
        return StringArray(
            name=elem.get(NAME_ATTR, ''),
            entries=entries,
            extra_attrib=self._extra_attrib(elem, (NAME_ATTR,)),
        )
