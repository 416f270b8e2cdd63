"""
confsource
==========

Load-once, read-many configuration from environment variables, declarative
files or nothing at all, with string-to-type coercion shared by all sources.
"""

from .config import (
    REQUIRED,
    ConfigError,
    Configurable,
    Configuration,
    ContractViolationError,
    EnvConfig,
    FileAccessError,
    FileConfig,
    NoopConfig,
    SourceKind,
    create_config,
)
from .utils import cast, infer_type, to_array

__version__ = "1.0.0"

__all__ = [
    'REQUIRED',
    'ConfigError',
    'Configurable',
    'Configuration',
    'ContractViolationError',
    'EnvConfig',
    'FileAccessError',
    'FileConfig',
    'NoopConfig',
    'SourceKind',
    'create_config',
    'cast',
    'infer_type',
    'to_array',
]
