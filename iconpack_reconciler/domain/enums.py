"""Domain enums for resource reconciliation."""
from enum import Enum


class MergeMode(Enum):
    """Which source items are merge candidates."""
    ALL = "ALL"
    SELECTED = "SELECTED"


class ResourceType(Enum):
    """Kinds of resource document understood by the reader."""
    APPFILTER = "appfilter"
    ICON_PACK = "icon_pack"
