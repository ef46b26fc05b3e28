"""Reconciliation of Android icon-pack resource files.

Parses appfilter and icon-pack XML documents, diffs and merges appfilters,
finds icons missing from an appfilter, and inserts drawables into
string-arrays while keeping document order and comments.
"""

from iconpack_reconciler.component_info import parse_component_info
from iconpack_reconciler.domain.enums import MergeMode, ResourceType
from iconpack_reconciler.domain.models import (
    DiffResult,
    Item,
    LocalIcon,
    MergeRequest,
    MergeResult,
    StringArray,
    SyncResult,
)
from iconpack_reconciler.errors import (
    ResourceError,
    ResourceIOError,
    ResourceParseError,
    ResourceStructureError,
)
from iconpack_reconciler.icon_scanner import scan_icon_directory
from iconpack_reconciler.operations.array_insert import insert_items_to_icon_pack
from iconpack_reconciler.operations.diff import diff_appfilters, diff_items
from iconpack_reconciler.operations.merge import merge_appfilters, merge_appfilters_in_memory
from iconpack_reconciler.operations.missing_icons import find_missing_icons, missing_package_names
from iconpack_reconciler.operations.sync import clean_icon_file_names, sync_icons_to_appfilter
from iconpack_reconciler.reader import read_resource_file

__all__ = [
    'parse_component_info', 'MergeMode', 'ResourceType',
    'DiffResult', 'Item', 'LocalIcon', 'MergeRequest', 'MergeResult',
    'StringArray', 'SyncResult',
    'ResourceError', 'ResourceIOError', 'ResourceParseError', 'ResourceStructureError',
    'scan_icon_directory', 'insert_items_to_icon_pack',
    'diff_appfilters', 'diff_items', 'merge_appfilters', 'merge_appfilters_in_memory',
    'find_missing_icons', 'missing_package_names',
    'clean_icon_file_names', 'sync_icons_to_appfilter', 'read_resource_file',
]
