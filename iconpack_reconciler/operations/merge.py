"""
Merging of appfilter documents.

The target document keeps its original nodes and order. New items from the
source document are inserted as one block above the target's first
<item>, in source order, each preceded by its app-name comment when it has
one.

The block deliberately does not go directly before the first <item>
element: it goes above that item's app-name comment, so the comment stays
attached to the item it names instead of moving onto the last merged item
the next time the file is read. Components already present in the target
are reported, never written.
"""

import dataclasses
import logging
import os
import tempfile
from typing import Iterable

from iconpack_reconciler.domain.constants import MERGE_INDENT
from iconpack_reconciler.domain.document import CommentNode, ResourceDocument
from iconpack_reconciler.domain.enums import MergeMode
from iconpack_reconciler.domain.models import Item, MergeRequest, MergeResult
from iconpack_reconciler.errors import ResourceIOError
from iconpack_reconciler.output.xml_writer import XmlWriter
from iconpack_reconciler.parsers.appfilter_parser import AppFilterParser

logger = logging.getLogger(__name__)


def merge_items_into(
    target: ResourceDocument,
    source_items: Iterable[Item],
    mode: MergeMode = MergeMode.ALL,
    selected_components: Iterable[str] = (),
) -> MergeResult:
    """Insert eligible, non-duplicate source items into target in place."""
    known = target.component_keys()
    selection = set(selected_components)
    result = MergeResult()

    cursor = target.first_item_index()
    if cursor is None:
        cursor = len(target.nodes)
    elif cursor > 0 and isinstance(target.nodes[cursor - 1], CommentNode):
        # Keep the first item together with its app-name comment.
        cursor -= 1

    for item in source_items:
        if item.component in known:
            logger.debug("Skipping duplicate component %s", item.component)
            result.failed_items.append(item)
            continue

        if mode is MergeMode.SELECTED and item.component not in selection:
            continue

        if item.app_name:
            target.insert(cursor, CommentNode(f" {item.app_name} "))
            cursor += 1
        target.insert(cursor, Item(
            component=item.component,
            drawable=item.drawable,
            app_name=item.app_name,
        ))
        cursor += 1

        known.add(item.component)
        result.items_merged += 1

    result.total_items = len(known)
    return result


def merge_appfilters(request: MergeRequest, indent: int = MERGE_INDENT) -> MergeResult:
    """
    Merge two appfilter documents according to the request.

    Both documents are parsed before anything is written, and the output is
    written once at the end, so a failed merge leaves every file untouched.

    Raises:
        ResourceError: a document cannot be read, parsed or written
        ValueError: no output_file while the target is not a file path
    """
    output_file = request.output_file or request.target_file
    if not isinstance(output_file, (str, os.PathLike)):
        raise ValueError("output_file is required when the target is not a file path")

    parser = AppFilterParser()
    first = parser.parse_document(request.first_file)
    second = parser.parse_document(request.second_file)
    target, source = (first, second) if request.merge_into_first else (second, first)

    result = merge_items_into(
        target,
        source.items(),
        mode=request.mode,
        selected_components=request.selected_components,
    )

    XmlWriter(indent).write(target, os.fspath(output_file))
    logger.info(
        "Merged %d items into %s (%d duplicates, %d total)",
        result.items_merged, output_file, len(result.failed_items), result.total_items,
    )
    return result


def merge_appfilters_in_memory(
    request: MergeRequest, indent: int = MERGE_INDENT
) -> tuple[MergeResult, bytes]:
    """
    Run a merge against a private temporary file and return its content.

    The request's own output_file is ignored; input files are only read.
    """
    with tempfile.TemporaryDirectory(prefix='merge_') as temp_dir:
        output_file = os.path.join(temp_dir, 'output.xml')
        result = merge_appfilters(dataclasses.replace(request, output_file=output_file), indent=indent)
        try:
            with open(output_file, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise ResourceIOError(f"Cannot read merged file {output_file}: {e}", output_file) from e
    return result, content
