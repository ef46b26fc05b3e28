"""Key-based comparison of appfilter item collections."""

import logging
from typing import Iterable

from iconpack_reconciler.domain.models import DiffResult, Item, Source
from iconpack_reconciler.parsers.appfilter_parser import AppFilterParser

logger = logging.getLogger(__name__)


def diff_items(first: Iterable[Item], second: Iterable[Item]) -> DiffResult:
    """
    Partition two item collections by exact component string.

    ``common`` holds the first collection's items; differing drawables or
    app names for a shared component are not reported.
    """
    first = list(first)
    second = list(second)
    first_keys = {item.component for item in first}
    second_keys = {item.component for item in second}

    result = DiffResult(first_count=len(first), second_count=len(second))
    for item in first:
        if item.component in second_keys:
            result.common.append(item)
        else:
            result.only_in_first.append(item)
    result.only_in_second = [item for item in second if item.component not in first_keys]

    logger.debug("Diff summary: %s", result.summary())
    return result


def diff_appfilters(first: Source, second: Source) -> DiffResult:
    """Parse two appfilter documents (paths, bytes or streams) and diff them."""
    parser = AppFilterParser()
    first_items = parser.parse(first)
    second_items = parser.parse(second)
    return diff_items(first_items, second_items)
