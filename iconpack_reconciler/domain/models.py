"""Shared data models used across parser and operation modules."""

import os
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Union

from iconpack_reconciler.component_info import parse_component_info
from iconpack_reconciler.domain.enums import MergeMode

# Anything a document can be read from: a path, raw bytes or a binary stream.
Source = Union[str, os.PathLike, bytes, BinaryIO]


@dataclass(frozen=True)
class Item:
    """One <item> entry of an appfilter document.

    Identity for diff, merge and dedup is the exact ``component`` string.
    """

    component: str
    drawable: str
    app_name: str = ''
    # Attributes other than component/drawable, re-emitted on write-back.
    extra_attrib: dict[str, str] = field(default_factory=dict, compare=False, repr=False)

    @property
    def package_name(self) -> str:
        return parse_component_info(self.component)[0]

    @property
    def activity_name(self) -> str:
        return parse_component_info(self.component)[1]

    def to_dict(self) -> dict[str, str]:
        return {
            'component': self.component,
            'drawable': self.drawable,
            'app_name': self.app_name,
            'package_name': self.package_name,
            'activity_name': self.activity_name,
        }


@dataclass(frozen=True)
class CommentNode:
    """An XML comment, text kept verbatim (including padding spaces)."""

    text: str


@dataclass
class StringArray:
    """A named <string-array> of an icon-pack document.

    ``entries`` holds the array children in order: leaf values as plain
    strings, interleaved comments as CommentNode.
    """

    name: str
    entries: list[str | CommentNode] = field(default_factory=list)
    extra_attrib: dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def values(self) -> list[str]:
        return [e for e in self.entries if isinstance(e, str)]

    def to_dict(self) -> dict[str, Any]:
        return {'name': self.name, 'items': list(self.values)}


@dataclass(frozen=True)
class LocalIcon:
    """A PNG file found directly inside an icon directory."""

    file_name: str
    package_name: str
    file_path: str

    def to_dict(self) -> dict[str, str]:
        return {
            'file_name': self.file_name,
            'package_name': self.package_name,
            'file_path': self.file_path,
        }


@dataclass
class DiffResult:
    """Key-based partition of two item collections."""

    only_in_first: list[Item] = field(default_factory=list)
    only_in_second: list[Item] = field(default_factory=list)
    common: list[Item] = field(default_factory=list)
    first_count: int = 0
    second_count: int = 0

    def summary(self) -> dict[str, int]:
        return {
            'first_count': self.first_count,
            'second_count': self.second_count,
            'only_first_count': len(self.only_in_first),
            'only_second_count': len(self.only_in_second),
            'common_count': len(self.common),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            'only_in_first': [i.to_dict() for i in self.only_in_first],
            'only_in_second': [i.to_dict() for i in self.only_in_second],
            'common': [i.to_dict() for i in self.common],
            'summary': self.summary(),
        }


@dataclass
class MergeRequest:
    """Options controlling a merge of two appfilter documents.

    ``merge_into_first`` picks the direction: True merges the second file's
    items into the first file, False the reverse. ``output_file`` defaults
    to rewriting the target file in place.
    """

    first_file: Source
    second_file: Source
    output_file: str | None = None
    mode: MergeMode = MergeMode.ALL
    selected_components: list[str] = field(default_factory=list)
    merge_into_first: bool = True

    @property
    def target_file(self) -> Source:
        return self.first_file if self.merge_into_first else self.second_file

    @property
    def source_file(self) -> Source:
        return self.second_file if self.merge_into_first else self.first_file


@dataclass
class MergeResult:
    """Result summary of a merge operation."""

    items_merged: int = 0
    # Source items whose component already existed in the target.
    failed_items: list[Item] = field(default_factory=list)
    total_items: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            'items_merged': self.items_merged,
            'failed_items': [i.to_dict() for i in self.failed_items],
            'total_items': self.total_items,
        }


@dataclass
class SyncResult:
    """Result summary of an icon directory to appfilter sync."""

    missing: list[str] = field(default_factory=list)
    inserted: list[Item] = field(default_factory=list)
    renamed: list[LocalIcon] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            'missing': list(self.missing),
            'inserted': [i.to_dict() for i in self.inserted],
            'renamed': [i.to_dict() for i in self.renamed],
        }
