"""
Icon directory to appfilter synchronisation.

Icons whose package name is absent from the appfilter get a placeholder
item ``ComponentInfo{<package>/TODO}``, and every icon is copied under an
underscore-safe file name into a ``renamed`` sub-directory.
"""

import logging
import os
import shutil

from iconpack_reconciler.component_info import build_component_info
from iconpack_reconciler.domain.constants import PLACEHOLDER_ACTIVITY, RENAMED_DIR_NAME, REWRITE_INDENT
from iconpack_reconciler.domain.models import Item, LocalIcon, SyncResult
from iconpack_reconciler.errors import ResourceIOError
from iconpack_reconciler.icon_scanner import scan_icon_directory
from iconpack_reconciler.operations.missing_icons import find_missing_icons
from iconpack_reconciler.output.xml_writer import XmlWriter
from iconpack_reconciler.parsers.appfilter_parser import AppFilterParser

logger = logging.getLogger(__name__)


def sanitize_resource_name(name: str) -> str:
    """Android resource names cannot contain dots."""
    return name.replace('.', '_')


def _copy_file(src: str, dst: str) -> None:
    with open(src, 'rb') as fin, open(dst, 'wb') as fout:
        shutil.copyfileobj(fin, fout)
        fout.flush()
        os.fsync(fout.fileno())


def clean_icon_file_names(src_dir: str, dst_dir: str) -> list[LocalIcon]:
    """
    Copy every PNG in src_dir to dst_dir with dots in the basename replaced.

    ``com.example.app.png`` becomes ``com_example_app.png``. Each copy is
    synced to disk before the next one starts.

    Raises:
        ResourceIOError: a directory or file cannot be read or written
    """
    try:
        os.makedirs(dst_dir, exist_ok=True)
    except OSError as e:
        raise ResourceIOError(f"Cannot create destination dir {dst_dir}: {e}", dst_dir) from e

    results: list[LocalIcon] = []
    for icon in scan_icon_directory(src_dir):
        base, ext = os.path.splitext(icon.file_name)
        cleaned = sanitize_resource_name(base)
        new_name = cleaned + ext
        dst_path = os.path.join(dst_dir, new_name)
        try:
            _copy_file(icon.file_path, dst_path)
        except OSError as e:
            raise ResourceIOError(f"Cannot copy {icon.file_path} to {dst_path}: {e}", dst_path) from e
        results.append(LocalIcon(file_name=new_name, package_name=cleaned, file_path=dst_path))

    logger.debug("Copied %d icons from %s to %s", len(results), src_dir, dst_dir)
    return results


def sync_icons_to_appfilter(
    icon_dir: str,
    appfilter_path: str,
    renamed_dir_name: str = RENAMED_DIR_NAME,
    indent: int = REWRITE_INDENT,
) -> SyncResult:
    """
    Add placeholder items for icons missing from the appfilter.

    New items are prepended to the appfilter root in the order the missing
    packages were found. Does nothing when no icon is missing.
    """
    missing = find_missing_icons(icon_dir, appfilter_path)
    if not missing:
        logger.info("No missing icons in %s", icon_dir)
        return SyncResult()

    renamed = clean_icon_file_names(icon_dir, os.path.join(icon_dir, renamed_dir_name))

    document = AppFilterParser().parse_document(appfilter_path)
    existing = document.component_keys()
    inserted: list[Item] = []
    for package in reversed(missing):
        component = build_component_info(package, PLACEHOLDER_ACTIVITY)
        if component in existing:
            continue
        item = Item(component=component, drawable=sanitize_resource_name(package))
        document.prepend(item)
        existing.add(component)
        inserted.append(item)
    inserted.reverse()

    XmlWriter(indent).write(document, appfilter_path)
    logger.info("Added %d placeholder items to %s", len(inserted), appfilter_path)
    return SyncResult(missing=missing, inserted=inserted, renamed=renamed)
