"""Tests for the missing-icon finder."""

import pytest

from iconpack_reconciler.domain.models import Item, LocalIcon
from iconpack_reconciler.errors import ResourceIOError, ResourceStructureError
from iconpack_reconciler.operations.missing_icons import find_missing_icons, missing_package_names
from conftest import APPFILTER_XML, NOT_RESOURCES_XML, appfilter_with


def _icon(package: str) -> LocalIcon:
    return LocalIcon(file_name=f'{package}.png', package_name=package, file_path=f'/icons/{package}.png')


class TestMissingPackageNames:
    """Tests for missing_package_names."""

    def test_fully_covered_is_empty(self):
        items = [Item(component='ComponentInfo{foo/Main}', drawable='foo')]
        assert missing_package_names([_icon('foo')], items) == []

    def test_disjoint_returns_deduplicated_icons(self):
        items = [Item(component='ComponentInfo{foo/Main}', drawable='foo')]
        icons = [_icon('bar'), _icon('baz'), _icon('bar')]
        assert sorted(missing_package_names(icons, items)) == ['bar', 'baz']

    def test_appfilter_entries_without_icons_are_ignored(self):
        items = [
            Item(component='ComponentInfo{foo/Main}', drawable='foo'),
            Item(component='ComponentInfo{unused/Main}', drawable='unused'),
        ]
        assert missing_package_names([_icon('foo')], items) == []


class TestFindMissingIcons:
    """Tests for find_missing_icons."""

    def test_reports_icon_not_in_appfilter(self, icon_dir, tmp_xml):
        directory = icon_dir('foo.png', 'bar.png')
        appfilter = tmp_xml(appfilter_with(['ComponentInfo{foo/foo.Main}']))
        assert find_missing_icons(directory, appfilter) == ['bar']

    def test_matches_on_package_name(self, icon_dir, tmp_xml):
        directory = icon_dir('com.android.camera.png', 'com.android.deskclock.png')
        assert find_missing_icons(directory, tmp_xml(APPFILTER_XML)) == []

    def test_missing_directory_raises(self, tmp_path, tmp_xml):
        with pytest.raises(ResourceIOError):
            find_missing_icons(str(tmp_path / 'missing'), tmp_xml(APPFILTER_XML))

    def test_bad_appfilter_raises(self, icon_dir, tmp_xml):
        with pytest.raises(ResourceStructureError):
            find_missing_icons(icon_dir('foo.png'), tmp_xml(NOT_RESOURCES_XML))
