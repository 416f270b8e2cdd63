"""
Environment Variable Configuration
==================================

Reads configuration from environment variables named
``[PREFIX_]SECTION_KEY`` (upper-case).

Schema shapes per section:
- mapping of key -> default: optional keys, the raw string is cast to the
  default's type; absent or empty variables give the default
- list/tuple of key names: required keys, stored as raw strings
- ``REQUIRED`` as a value inside a mapping: a required key mixed with
  optional ones

Example::

    config = EnvConfig({
        'database': {
            'host': 'localhost',    # DATABASE_HOST
            'port': 3306,           # DATABASE_PORT, cast to int
            'debug': False,         # DATABASE_DEBUG, cast to bool
            'password': REQUIRED,   # DATABASE_PASSWORD, must be set
        },
        'app': ['name'],            # APP_NAME, must be set
    }, prefix='myapp')              # MYAPP_DATABASE_HOST, ...

Reading ``os.environ`` is not synchronized against other threads mutating
it; pass a ``MappingEnvironmentProvider`` for a fixed snapshot.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

from dotenv import dotenv_values

from ..utils.logger import Loggable
from ..utils.values import cast
from .configuration import Configuration
from .exceptions import ConfigError


class _Required:
    """Marker for a schema key without default."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED = _Required()


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Source of raw environment values."""

    def get(self, name: str) -> Optional[str]:
        ...


class OsEnvironmentProvider:
    """Reads the live process environment."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class MappingEnvironmentProvider:
    """Fixed set of variables, independent of the process environment."""

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._variables = dict(variables or {})

    def get(self, name: str) -> Optional[str]:
        return self._variables.get(name)


class DotenvEnvironmentProvider:
    """
    Variables from a ``.env`` file layered over the process environment.
    """

    def __init__(self, path: Union[str, os.PathLike] = ".env", override: bool = False):
        """
        Args:
            path: Path to the dotenv file; a missing file contributes nothing
            override: When True the file wins over the process environment
        """
        self.path = Path(path)
        self.override = override
        # Keys declared without a value (``KEY``) load as None and are skipped
        self._values = {
            name: value
            for name, value in dotenv_values(self.path).items()
            if value is not None
        }

    def get(self, name: str) -> Optional[str]:
        file_value = self._values.get(name)
        if self.override and file_value is not None:
            return file_value
        value = os.environ.get(name)
        return value if value is not None else file_value


class EnvConfig(Configuration):
    """Configuration resolved from environment variables."""

    def __init__(
        self,
        schema: Mapping[str, Any],
        prefix: str = "",
        provider: Optional[EnvironmentProvider] = None,
        logger: Optional[Loggable] = None
    ):
        """
        Initialize environment configuration.

        Args:
            schema: Sections to retrieve with their keys and optional defaults
            prefix: Optional prefix for every variable name
            provider: Environment source, the process environment by default
            logger: ``log(message, level)`` collaborator
        """
        self.prefix = f"{prefix.rstrip('_').upper()}_" if prefix else ""
        self.provider = provider if provider is not None else OsEnvironmentProvider()
        super().__init__(schema, logger=logger)

    def import_config(self, source_info: Any) -> Dict[str, Dict[str, Any]]:
        if not isinstance(source_info, Mapping):
            raise ConfigError(
                f"Environment schema must be a mapping of sections, got {type(source_info).__name__}"
            )

        config: Dict[str, Dict[str, Any]] = {}
        for section, keys in source_info.items():
            section_data: Dict[str, Any] = {}
            for key, default in self._iter_entries(section, keys):
                env_name = self.build_env_name(section, key)
                value = self.provider.get(env_name)

                if default is REQUIRED:
                    if value is None:
                        raise ConfigError(f"Missing required environment variable: {env_name}")
                elif value is None or value == '':
                    value = default
                else:
                    value = cast(value, default)

                section_data[key] = value
            config[section] = section_data

        return config

    def build_env_name(self, section: str, key: str) -> str:
        """
        Build environment variable name from section and key.

        Args:
            section: Section name
            key: Key name

        Returns:
            Environment variable name (e.g., "PREFIX_SECTION_KEY")
        """
        return self.prefix + f"{section}_{key}".upper()

    @staticmethod
    def _iter_entries(section: str, keys: Any) -> Iterator[Tuple[str, Any]]:
        if isinstance(keys, Mapping):
            return iter(keys.items())
        if isinstance(keys, (list, tuple)):
            return ((key, REQUIRED) for key in keys)
        raise ConfigError(f"Section '{section}' must be a mapping or a list of keys")


__all__ = [
    "REQUIRED",
    "EnvironmentProvider",
    "OsEnvironmentProvider",
    "MappingEnvironmentProvider",
    "DotenvEnvironmentProvider",
    "EnvConfig",
]
