"""
Configuration Contract
======================

``Configurable`` is the read-only capability every source exposes.
``Configuration`` implements it once on top of a store that is loaded a
single time, during construction, by the source specific ``import_config``.

The loaded store is read-only: the top level and each section are exposed
through ``MappingProxyType`` views.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Protocol, Tuple, runtime_checkable

from ..utils.logger import ConfigLogger, Loggable, LogLevel
from .exceptions import ContractViolationError


@runtime_checkable
class Configurable(Protocol):
    """Read access to ``section -> key -> value`` configuration data."""

    def get(self, section: str, key: str, default: Any = None) -> Any:
        ...

    def get_section(self, section: str, default: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
        ...

    def has_section(self, section: str) -> bool:
        ...

    def has(self, section: str, key: str) -> bool:
        ...

    def get_all(self) -> Mapping[str, Any]:
        ...

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        ...


def _freeze(data: Mapping[str, Any]) -> Mapping[str, Any]:
    frozen = {}
    for section, values in data.items():
        frozen[section] = MappingProxyType(dict(values)) if isinstance(values, Mapping) else values
    return MappingProxyType(frozen)


class Configuration(ABC):
    """
    Abstract configuration loaded once at construction.

    Subclasses only implement ``import_config``; every read operation lives
    here and works on the stored mapping.
    """

    def __init__(self, source_info: Any = None, logger: Optional[Loggable] = None):
        """
        Initialize and load configuration.

        Args:
            source_info: Source specific loading information, e.g.
                ``{'file': 'settings.yaml'}`` or an environment schema
            logger: ``log(message, level)`` collaborator

        Raises:
            ConfigError: Configuration cannot be built from the source
            FileAccessError: A referenced file is missing or unreadable
            ContractViolationError: ``import_config`` returned a non-mapping
        """
        self._logger = logger if logger is not None else ConfigLogger(__name__)

        data = self.import_config(source_info)
        if not isinstance(data, Mapping):
            raise ContractViolationError(
                f"{type(self).__name__}.import_config() must return a mapping, "
                f"got {type(data).__name__}"
            )

        self._data = _freeze(data)
        self._logger.log(
            f"{type(self).__name__} loaded {len(self._data)} section(s): {list(self._data)}",
            LogLevel.DEBUG
        )

    @abstractmethod
    def import_config(self, source_info: Any) -> Mapping[str, Any]:
        """
        Import configuration from the source.

        Args:
            source_info: Source specific loading information

        Returns:
            Parsed configuration: ``{'section': {'key': value}}``

        Raises:
            ConfigError: If configuration cannot be loaded or parsed
        """

    # ------------------------------------------------------------------
    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a value by section and key.

        A stored ``None`` counts as absent. No casting happens here; values
        were typed when the source was imported.
        """
        values = self._data.get(section)
        if not isinstance(values, Mapping):
            return default
        value = values.get(key)
        return default if value is None else value

    def get_section(self, section: str, default: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
        """Get an entire section, or ``default`` (empty mapping) when absent."""
        values = self._data.get(section)
        if isinstance(values, Mapping):
            return values
        return {} if default is None else default

    def has_section(self, section: str) -> bool:
        """A section stored as ``None`` counts as absent."""
        return self._data.get(section) is not None

    def has(self, section: str, key: str) -> bool:
        values = self._data.get(section)
        return isinstance(values, Mapping) and values.get(key) is not None

    def get_all(self) -> Mapping[str, Any]:
        """Complete, read-only configuration mapping (same view on every call)."""
        return self._data

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(self._data.items())

    def __contains__(self, section: object) -> bool:
        return section in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sections={list(self._data)})"


__all__ = ["Configurable", "Configuration"]
