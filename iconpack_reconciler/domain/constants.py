"""Fixed names and defaults shared by parsers, writers and operations."""

ROOT_TAG = 'resources'
ITEM_TAG = 'item'
STRING_ARRAY_TAG = 'string-array'

COMPONENT_ATTR = 'component'
DRAWABLE_ATTR = 'drawable'
NAME_ATTR = 'name'

COMPONENT_PREFIX = 'ComponentInfo{'
COMPONENT_SUFFIX = '}'

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

# Indentation widths: merge output vs. in-place rewrites (insert / sync).
MERGE_INDENT = 2
REWRITE_INDENT = 4

RENAMED_DIR_NAME = 'renamed'
PLACEHOLDER_ACTIVITY = 'TODO'
ICON_EXTENSION = '.png'
