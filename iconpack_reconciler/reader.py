"""Single-document reading for previews: appfilter items or icon-pack arrays."""

from typing import Any

from iconpack_reconciler.domain.enums import ResourceType
from iconpack_reconciler.domain.models import Source
from iconpack_reconciler.parsers.appfilter_parser import AppFilterParser
from iconpack_reconciler.parsers.icon_pack_parser import IconPackParser


def read_resource_file(source: Source, resource_type: ResourceType = ResourceType.APPFILTER) -> dict[str, Any]:
    """Parse one document and return it as JSON-ready data.

    Appfilters yield ``{'items': [...]}``, icon packs
    ``{'icon_pack': {'arrays': [...]}}``.
    """
    if resource_type is ResourceType.ICON_PACK:
        arrays = IconPackParser().parse(source)
        return {'icon_pack': {'arrays': [a.to_dict() for a in arrays]}}
    items = AppFilterParser().parse(source)
    return {'items': [i.to_dict() for i in items]}
