"""
Configuration Factory
=====================

Selects a configuration source from an explicit ``SourceKind``.
"""

from enum import Enum
from typing import Any, Optional, Union

from ..utils.logger import Loggable
from .configuration import Configuration
from .env_config import EnvConfig
from .file_config import FileConfig
from .noop_config import NoopConfig


class SourceKind(Enum):
    """Available configuration sources."""
    ENV = "env"
    FILE = "file"
    NOOP = "noop"


def create_config(
    kind: Union[SourceKind, str],
    source_info: Any = None,
    logger: Optional[Loggable] = None,
    **options: Any
) -> Configuration:
    """
    Build a configuration for the requested source.

    Args:
        kind: Source kind, or its string value ('env', 'file', 'noop')
        source_info: ENV: the schema. FILE: hints such as ``{'file': path}``.
            NOOP: ignored.
        logger: ``log(message, level)`` collaborator passed to the source
        **options: ENV: ``prefix``, ``provider``. FILE: ``file`` as a
            shorthand for ``{'file': path}``.

    Returns:
        Loaded configuration

    Raises:
        ValueError: Unknown kind or options the source does not accept
    """
    try:
        kind = SourceKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown configuration source: {kind!r}. "
            f"Must be one of: {', '.join(k.value for k in SourceKind)}"
        ) from None

    if kind is SourceKind.ENV:
        unexpected = set(options) - {'prefix', 'provider'}
        if unexpected:
            raise ValueError(f"Unexpected options for env source: {sorted(unexpected)}")
        return EnvConfig(
            source_info if source_info is not None else {},
            prefix=options.get('prefix', ''),
            provider=options.get('provider'),
            logger=logger
        )

    if kind is SourceKind.FILE:
        unexpected = set(options) - {'file'}
        if unexpected:
            raise ValueError(f"Unexpected options for file source: {sorted(unexpected)}")
        hints = source_info
        if 'file' in options:
            hints = {**(source_info or {}), 'file': options['file']}
        return FileConfig(hints, logger=logger)

    return NoopConfig(source_info, logger=logger)


__all__ = ["SourceKind", "create_config"]
