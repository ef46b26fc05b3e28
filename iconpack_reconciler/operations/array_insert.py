"""Insertion of drawable names into a named <string-array> of an icon pack."""

import logging
from typing import Iterable

from iconpack_reconciler.domain.constants import REWRITE_INDENT
from iconpack_reconciler.domain.document import ResourceDocument
from iconpack_reconciler.domain.models import StringArray
from iconpack_reconciler.output.xml_writer import XmlWriter
from iconpack_reconciler.parsers.icon_pack_parser import IconPackParser

logger = logging.getLogger(__name__)


def insert_into_array(document: ResourceDocument, array_name: str, new_items: Iterable[str]) -> list[str]:
    """
    Prepend new values to the array named array_name, creating it if absent.

    Values already in the array are skipped. Surviving values end up at the
    top of the array in the caller's order. Returns the inserted values.
    """
    target = document.find_array(array_name)
    if target is None:
        target = StringArray(name=array_name)
        document.prepend(target)
        logger.debug("Created string-array %s", array_name)

    existing = set(target.values)
    inserted: list[str] = []
    # First occurrence wins when the caller repeats a value.
    for value in reversed(list(dict.fromkeys(new_items))):
        if value in existing:
            continue
        target.entries.insert(0, value)
        inserted.append(value)

    inserted.reverse()
    return inserted


def insert_items_to_icon_pack(
    icon_pack_path: str,
    array_name: str,
    new_items: Iterable[str],
    indent: int = REWRITE_INDENT,
) -> list[str]:
    """Insert drawable names into an icon-pack file and rewrite it in place."""
    document = IconPackParser().parse_document(icon_pack_path)
    inserted = insert_into_array(document, array_name, new_items)
    XmlWriter(indent).write(document, icon_pack_path)
    logger.info("Inserted %d items into %s in %s", len(inserted), array_name, icon_pack_path)
    return inserted
