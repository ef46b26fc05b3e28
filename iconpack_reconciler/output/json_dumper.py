"""JSON output generation for operation results."""

import json
import os
from typing import Any


class JSONDumper:
    """Renders result dictionaries as JSON text or files.

    Args:
        pretty: Whether to pretty-print JSON (default True).
    """

    def __init__(self, pretty: bool = True) -> None:
        self._indent = 2 if pretty else None

    def dumps(self, data: Any) -> str:
        return json.dumps(data, indent=self._indent, ensure_ascii=False, default=str)

    def write(self, path: str, data: Any) -> None:
        """Write data as JSON to a file."""
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=self._indent, ensure_ascii=False, default=str)
