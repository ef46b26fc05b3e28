"""Icons present on disk but not referenced by an appfilter."""

import logging
from typing import Iterable

from iconpack_reconciler.domain.models import Item, LocalIcon, Source
from iconpack_reconciler.icon_scanner import scan_icon_directory
from iconpack_reconciler.parsers.appfilter_parser import AppFilterParser

logger = logging.getLogger(__name__)


def missing_package_names(icons: Iterable[LocalIcon], items: Iterable[Item]) -> list[str]:
    """Package names of icons absent from the items' package-name set.

    Duplicates are reported once. Items without an icon file are not
    considered.
    """
    known = {item.package_name for item in items}
    missing: dict[str, None] = {}
    for icon in icons:
        if icon.package_name not in known:
            missing.setdefault(icon.package_name, None)
    return list(missing)


def find_missing_icons(icon_dir: str, appfilter: Source) -> list[str]:
    """Scan icon_dir and return icon package names missing from the appfilter."""
    icons = scan_icon_directory(icon_dir)
    items = AppFilterParser().parse(appfilter)
    missing = missing_package_names(icons, items)
    logger.info(
        "%d of %d icons in %s are missing from the appfilter",
        len(missing), len(icons), icon_dir,
    )
    return missing
