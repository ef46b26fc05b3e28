"""Parsing of appfilter component keys.

A component key looks like ``ComponentInfo{com.example/com.example.Main}``.
Anything else is still a valid key; it just has no package or activity.
"""

from iconpack_reconciler.domain.constants import COMPONENT_PREFIX, COMPONENT_SUFFIX


def parse_component_info(component: str) -> tuple[str, str]:
    """Split a component key into ``(package_name, activity_name)``.

    Returns ``('', '')`` when the string is not ``ComponentInfo{...}``.
    The interior is split on the first ``/`` only, so activity names may
    themselves contain slashes.
    """
    if not component.startswith(COMPONENT_PREFIX) or not component.endswith(COMPONENT_SUFFIX):
        return '', ''

    inner = component[len(COMPONENT_PREFIX):len(component) - len(COMPONENT_SUFFIX)]
    package, _, activity = inner.partition('/')
    return package.strip(), activity.strip()


def build_component_info(package_name: str, activity_name: str) -> str:
    """Inverse of parse_component_info for synthesised items."""
    return f"{COMPONENT_PREFIX}{package_name}/{activity_name}{COMPONENT_SUFFIX}"


def parse_comment_text(comment: str | None) -> str:
    """Turn raw XML comment text into an application name."""
    return (comment or '').strip()
