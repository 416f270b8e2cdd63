"""
File Configuration
==================

Reads configuration from a declarative file selected by suffix:

- ``.py``: executed with ``runpy``; the module must bind ``CONFIG``
- ``.yaml`` / ``.yml``: ``yaml.safe_load``
- ``.json``: ``json.load``

WARNING: ``.py`` files run arbitrary code. Only point this source at
trusted paths that users cannot control.

Example ``settings.py``::

    CONFIG = {'database': {'host': 'localhost'}, 'app': {'debug': True}}
"""

import json
import runpy
from pathlib import Path
from typing import Any, Mapping

import yaml

from .configuration import Configuration
from .exceptions import ConfigError, FileAccessError

PYTHON_SUFFIXES = {'.py'}
YAML_SUFFIXES = {'.yaml', '.yml'}
JSON_SUFFIXES = {'.json'}

CONFIG_VARIABLE = 'CONFIG'


class FileConfig(Configuration):
    """Configuration loaded from a single file given as ``{'file': path}``."""

    def import_config(self, source_info: Any) -> Mapping[str, Any]:
        if not isinstance(source_info, Mapping) or not source_info.get('file'):
            raise ConfigError('file parameter required')

        config_path = Path(source_info['file'])
        if not config_path.is_file():
            raise FileAccessError(str(config_path), "Config file not found")

        suffix = config_path.suffix.lower()
        if suffix in PYTHON_SUFFIXES:
            data = self._load_python(config_path)
        elif suffix in YAML_SUFFIXES:
            try:
                data = yaml.safe_load(self._read_text(config_path))
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in config file {config_path}: {e}") from e
        elif suffix in JSON_SUFFIXES:
            try:
                data = json.loads(self._read_text(config_path))
            except ValueError as e:
                raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e
        else:
            raise ConfigError(f"Unsupported config format '{config_path.suffix}': {config_path}")

        if not isinstance(data, Mapping):
            raise ConfigError(f"Config file must return a mapping: {config_path}")

        for section, values in data.items():
            if not isinstance(values, Mapping):
                raise ConfigError(f"Section '{section}' must be a mapping in config file: {config_path}")

        return data

    @staticmethod
    def _read_text(config_path: Path) -> str:
        try:
            return config_path.read_text(encoding='utf-8')
        except OSError as e:
            raise FileAccessError(str(config_path), "Config file could not be read") from e

    def _load_python(self, config_path: Path) -> Any:
        # Read first so permission problems surface as FileAccessError
        self._read_text(config_path)
        namespace = runpy.run_path(str(config_path))
        return namespace.get(CONFIG_VARIABLE)


__all__ = ["FileConfig"]
