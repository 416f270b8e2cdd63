"""
Utilities Module
================

Value coercion and logging helpers.
"""

from .logger import setup_logging, ConfigLogger, NullLogger, LogLevel, Loggable
from .values import cast, infer_type, to_array, TargetType, target_type_of

__all__ = [
    'setup_logging',
    'ConfigLogger',
    'NullLogger',
    'LogLevel',
    'Loggable',
    'cast',
    'infer_type',
    'to_array',
    'TargetType',
    'target_type_of',
]
