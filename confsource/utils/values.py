"""
Value Coercion
==============

Conversion of raw configuration strings into typed values.

Two entry points:
- ``cast``: target type taken from a caller supplied default, which is also
  the fallback on failure.
- ``infer_type``: target type guessed from the shape of the string alone.

The order in which ``infer_type`` tries each strategy is part of the public
behaviour; ambiguous tokens such as ``"1"`` or ``"3.0"`` depend on it.
"""

import ast
import json
import math
import re
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union


_INT_PATTERN = re.compile(r'^[+-]?(?:0|[1-9][0-9]*)$')
_FLOAT_PATTERN = re.compile(r'^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$')

TRUE_TOKENS = frozenset({'true', '1', 'yes', 'on'})
FALSE_TOKENS = frozenset({'false', '0', 'no', 'off'})

Structured = Union[Dict[Any, Any], List[Any]]


class TargetType(Enum):
    """Coercion target derived from a default value."""
    STRUCTURED = "structured"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    UNSUPPORTED = "unsupported"


def target_type_of(default: Any) -> TargetType:
    """
    Derive the coercion target from a default value.

    Args:
        default: Default value whose runtime type selects the target

    Returns:
        Matching TargetType
    """
    # bool first: bool is a subclass of int
    if isinstance(default, bool):
        return TargetType.BOOLEAN
    if isinstance(default, int):
        return TargetType.INTEGER
    if isinstance(default, float):
        return TargetType.FLOAT
    if isinstance(default, str):
        return TargetType.STRING
    if isinstance(default, (Mapping, list, tuple)):
        return TargetType.STRUCTURED
    return TargetType.UNSUPPORTED


def parse_int(value: str) -> Optional[int]:
    """Strict integer literal, or None."""
    text = value.strip()
    if not _INT_PATTERN.match(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit
        return None


def parse_float(value: str) -> Optional[float]:
    """Strict floating point literal (scientific notation allowed), or None."""
    text = value.strip()
    if not _FLOAT_PATTERN.match(text):
        return None
    try:
        parsed = float(text)
    except ValueError:
        return None
    # Overflowing literals such as 1e999 become inf
    return parsed if math.isfinite(parsed) else None


def parse_bool(value: str) -> Optional[bool]:
    """Canonical boolean token (true/false, 1/0, yes/no, on/off), or None."""
    token = value.strip().lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None


def _decode_json(value: str) -> Optional[Structured]:
    try:
        decoded = json.loads(value)
    except (ValueError, RecursionError):
        return None
    if isinstance(decoded, (dict, list)):
        return decoded
    return None


def _decode_literal(value: str) -> Optional[Structured]:
    # Python literal syntax is the legacy serialized form: {'a': 1}, [1, 2], (1, 2)
    try:
        decoded = ast.literal_eval(value.strip())
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError):
        return None
    if isinstance(decoded, tuple):
        return list(decoded)
    if isinstance(decoded, (dict, list)):
        return decoded
    return None


def decode_structured(value: str) -> Optional[Structured]:
    """
    Decode a string into a mapping or sequence.

    JSON is tried first, then Python literal syntax. Scalars decoded by
    either step are rejected.

    Args:
        value: Raw string

    Returns:
        Decoded dict or list, or None when neither decoder yields a container
    """
    decoded = _decode_json(value)
    if decoded is not None:
        return decoded
    return _decode_literal(value)


def to_array(value: str, default: Optional[Any] = None) -> Any:
    """
    Convert a string to a dict or list.

    Args:
        value: Raw string
        default: Returned when the string is not a structured value
            (an empty dict when omitted)

    Returns:
        Decoded container or the default
    """
    decoded = decode_structured(value)
    if decoded is not None:
        return decoded
    return {} if default is None else default


def _cast_structured(value: str, default: Any) -> Any:
    decoded = decode_structured(value)
    if isinstance(default, Mapping):
        return decoded if isinstance(decoded, dict) else default
    if isinstance(decoded, list):
        return tuple(decoded) if isinstance(default, tuple) else decoded
    return default


def cast(value: str, default: Any) -> Any:
    """
    Cast a string to the type of ``default``.

    Casting rules by default type:
    1. dict/list/tuple: structured decode, JSON first then literal syntax;
       a mapping default only accepts a decoded dict, a list or tuple
       default only a decoded sequence (returned as a tuple for a tuple)
    2. bool: canonical boolean tokens
    3. int: strict integer literal
    4. float: strict float literal
    5. str: empty string gives the default, anything else is returned as-is
    6. anything else: the default, no casting attempted

    Args:
        value: Raw string
        default: Default value (selects target type and is the fallback)

    Returns:
        Casted value matching the default's type
    """
    target = target_type_of(default)

    if target is TargetType.STRUCTURED:
        return _cast_structured(value, default)
    if target is TargetType.BOOLEAN:
        parsed = parse_bool(value)
    elif target is TargetType.INTEGER:
        parsed = parse_int(value)
    elif target is TargetType.FLOAT:
        parsed = parse_float(value)
    elif target is TargetType.STRING:
        return default if value == '' else value
    else:
        return default

    return default if parsed is None else parsed


def infer_type(value: str) -> Any:
    """
    Detect the type of a string and return the converted value.

    Strategies, first match wins: empty string, JSON container, literal
    container, integer, float, boolean, plain string.

    Args:
        value: Raw string

    Returns:
        Converted value
    """
    if value == '':
        return value

    for strategy in (_decode_json, _decode_literal, parse_int, parse_float, parse_bool):
        detected = strategy(value)
        if detected is not None:
            return detected

    return value


__all__ = [
    "TargetType",
    "target_type_of",
    "parse_int",
    "parse_float",
    "parse_bool",
    "decode_structured",
    "to_array",
    "cast",
    "infer_type",
]
