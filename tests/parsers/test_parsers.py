"""Tests for parser modules."""

import io

import pytest

from iconpack_reconciler.domain.document import CommentNode, RawElement
from iconpack_reconciler.domain.models import Item
from iconpack_reconciler.errors import (
    ResourceError,
    ResourceIOError,
    ResourceParseError,
    ResourceStructureError,
)
from iconpack_reconciler.parsers.appfilter_parser import AppFilterParser
from iconpack_reconciler.parsers.icon_pack_parser import IconPackParser
from conftest import (
    APPFILTER_XML, CALCULATOR, CAMERA, CLOCK, ICON_PACK_XML, MALFORMED_XML, NOT_RESOURCES_XML,
)


class TestAppFilterParser:
    """Tests for AppFilterParser."""

    def setup_method(self):
        self.parser = AppFilterParser()

    def test_parse_returns_items_in_order(self, tmp_xml):
        items = self.parser.parse(tmp_xml(APPFILTER_XML))
        assert [i.component for i in items] == [CALCULATOR, CAMERA, CLOCK]
        assert [i.drawable for i in items] == ['calculator', 'camera', 'clock']

    def test_parse_derives_package_and_activity(self, tmp_xml):
        items = self.parser.parse(tmp_xml(APPFILTER_XML))
        assert items[0].package_name == 'com.android.calculator2'
        assert items[0].activity_name == 'com.android.calculator2.Calculator'

    def test_comment_names_only_the_next_item(self, tmp_xml):
        items = self.parser.parse(tmp_xml(APPFILTER_XML))
        assert [i.app_name for i in items] == ['Calculator', '', 'Clock']

    def test_last_of_consecutive_comments_wins(self):
        xml = (b'<resources><!-- header --><!-- Maps -->'
               b'<item component="ComponentInfo{a/b}" drawable="maps"/></resources>')
        assert self.parser.parse(xml)[0].app_name == 'Maps'

    def test_other_element_clears_pending_comment(self):
        xml = (b'<resources><!-- Orphan --><scale factor="0.8"/>'
               b'<item component="ComponentInfo{a/b}" drawable="x"/></resources>')
        assert self.parser.parse(xml)[0].app_name == ''

    def test_document_keeps_comments_and_unknown_elements(self, tmp_xml):
        document = self.parser.parse_document(tmp_xml(APPFILTER_XML))
        kinds = [type(n) for n in document.nodes]
        assert kinds == [RawElement, CommentNode, Item, Item, CommentNode, Item]
        assert document.nodes[0].element.get('img1') == 'iconback'
        assert document.nodes[1].text == ' Calculator '

    def test_unparseable_component_is_kept_verbatim(self):
        xml = b'<resources><item component=":LAUNCHER_ACTION_APP_DRAWER" drawable="drawer"/></resources>'
        item = self.parser.parse(xml)[0]
        assert item.component == ':LAUNCHER_ACTION_APP_DRAWER'
        assert item.package_name == ''
        assert item.activity_name == ''

    def test_component_is_not_normalised(self):
        xml = b'<resources><item component=" ComponentInfo{a/b}" drawable="x"/></resources>'
        assert self.parser.parse(xml)[0].component == ' ComponentInfo{a/b}'

    def test_extra_attributes_are_kept(self):
        xml = b'<resources><item component="ComponentInfo{a/b}" drawable="x" tools:ignore="y" xmlns:tools="t"/></resources>'
        item = self.parser.parse(xml)[0]
        assert item.extra_attrib == {'{t}ignore': 'y'}

    def test_parse_from_stream(self):
        items = self.parser.parse(io.BytesIO(APPFILTER_XML.encode('utf-8')))
        assert len(items) == 3

    def test_parse_empty_resources(self):
        assert self.parser.parse(b'<resources/>') == []

    def test_malformed_xml_raises(self, tmp_xml):
        with pytest.raises(ResourceParseError):
            self.parser.parse(tmp_xml(MALFORMED_XML))

    def test_wrong_root_raises(self, tmp_xml):
        with pytest.raises(ResourceStructureError):
            self.parser.parse(tmp_xml(NOT_RESOURCES_XML))

    def test_missing_file_raises_with_path(self, tmp_path):
        path = str(tmp_path / 'nope.xml')
        with pytest.raises(ResourceIOError) as exc_info:
            self.parser.parse(path)
        assert exc_info.value.path == path

    def test_errors_share_a_base(self):
        with pytest.raises(ResourceError):
            self.parser.parse(MALFORMED_XML.encode('utf-8'))


class TestIconPackParser:
    """Tests for IconPackParser."""

    def setup_method(self):
        self.parser = IconPackParser()

    def test_parse_returns_arrays_in_order(self, tmp_xml):
        arrays = self.parser.parse(tmp_xml(ICON_PACK_XML))
        assert [a.name for a in arrays] == ['icon_pack', 'latest']

    def test_values_are_trimmed(self, tmp_xml):
        arrays = self.parser.parse(tmp_xml(ICON_PACK_XML))
        assert arrays[0].values == ['calculator', 'camera']
        assert arrays[1].values == ['clock']

    def test_comments_inside_arrays_are_kept(self, tmp_xml):
        arrays = self.parser.parse(tmp_xml(ICON_PACK_XML))
        assert arrays[0].entries[0] == CommentNode(' Tools ')

    def test_to_dict(self, tmp_xml):
        arrays = self.parser.parse(tmp_xml(ICON_PACK_XML))
        assert arrays[1].to_dict() == {'name': 'latest', 'items': ['clock']}

    def test_wrong_root_raises(self):
        with pytest.raises(ResourceStructureError):
            self.parser.parse(NOT_RESOURCES_XML.encode('utf-8'))
