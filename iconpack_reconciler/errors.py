"""Error taxonomy for resource reconciliation.

Only conditions that stop an operation outright are raised. Duplicate keys,
ineligible selections and missing icons are reported in result objects.
"""


class ResourceError(Exception):
    """Base error for resource documents and icon directories."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ResourceParseError(ResourceError):
    """The document is not well-formed XML."""
    pass


class ResourceStructureError(ResourceError):
    """The document has no <resources> root element."""
    pass


class ResourceIOError(ResourceError):
    """A file or directory could not be read or written."""
    pass
