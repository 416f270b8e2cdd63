"""Configuration package.

Provides the Configurable contract, the load-once Configuration base and its
environment, file and no-op sources.
"""
from .configuration import Configurable, Configuration  # noqa: F401
from .env_config import (  # noqa: F401
    REQUIRED,
    DotenvEnvironmentProvider,
    EnvConfig,
    EnvironmentProvider,
    MappingEnvironmentProvider,
    OsEnvironmentProvider,
)
from .exceptions import ConfigError, ContractViolationError, FileAccessError  # noqa: F401
from .factory import SourceKind, create_config  # noqa: F401
from .file_config import FileConfig  # noqa: F401
from .noop_config import NoopConfig  # noqa: F401
