"""No-op configuration: always empty, accepts any source information."""

from typing import Any, Dict

from .configuration import Configuration


class NoopConfig(Configuration):
    """Placeholder configuration used when a real source is disabled."""

    def import_config(self, source_info: Any) -> Dict[str, Any]:
        return {}


__all__ = ["NoopConfig"]
