"""Resource document parsers."""

from iconpack_reconciler.parsers.base_parser import BaseParser
from iconpack_reconciler.parsers.appfilter_parser import AppFilterParser
from iconpack_reconciler.parsers.icon_pack_parser import IconPackParser

__all__ = ['BaseParser', 'AppFilterParser', 'IconPackParser']
