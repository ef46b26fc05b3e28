"""Discovery of local PNG icons in a flat icon directory."""

import logging
import os

from iconpack_reconciler.domain.constants import ICON_EXTENSION
from iconpack_reconciler.domain.models import LocalIcon
from iconpack_reconciler.errors import ResourceIOError

logger = logging.getLogger(__name__)


def _raise_scan_error(err: OSError) -> None:
    raise ResourceIOError(f"Error scanning directory {err.filename}: {err}", err.filename) from err


def scan_icon_directory(directory: str) -> list[LocalIcon]:
    """
    List PNG files directly inside ``directory``.

    Sub-directories are never descended into. Each icon's package name is
    its file name without the extension.

    Raises:
        ResourceIOError: the directory is missing or unreadable
    """
    icons: list[LocalIcon] = []
    for root, dirs, files in os.walk(directory, onerror=_raise_scan_error):
        dirs[:] = []
        for name in files:
            path = os.path.join(root, name)
            if not name.lower().endswith(ICON_EXTENSION) or not os.path.isfile(path):
                continue
            icons.append(LocalIcon(
                file_name=name,
                package_name=os.path.splitext(name)[0],
                file_path=path,
            ))
    logger.debug("Found %d icons in %s", len(icons), directory)
    return icons
