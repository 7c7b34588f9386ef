"""Condition Key Codec — (property, value) pairs as single set-friendly tokens.

Invariants:
    - decode(encode(p, v)) == (p, v) whenever p contains no delimiter
    - decode splits on the FIRST delimiter, so values may contain it freely
    - decode of a key without the delimiter raises MalformedConditionKeyError

Design Decisions:
    - Value stringification is a caller-provided convention (stringify_value is
      only the default): keys and item values must be stringified the same way,
      e.g. True -> "True"
"""

from collections.abc import Callable

from item_list.core.domain_types import CONDITION_KEY_DELIMITER, ConditionKey
from item_list.core.errors import MalformedConditionKeyError


def stringify_value(value: object) -> str:
    """Default stringifier shared by condition keys and item property values."""
    if isinstance(value, str):
        return value
    return str(value)


def encode(property_name: str, value: str) -> ConditionKey:
    """Join property name and value into one condition key. Pure, total."""
    return ConditionKey(f"{property_name}{CONDITION_KEY_DELIMITER}{value}")


def decode(key: str) -> tuple[str, str]:
    """Split a condition key back into (property_name, value)."""
    property_name, sep, value = key.partition(CONDITION_KEY_DELIMITER)
    if not sep:
        raise MalformedConditionKeyError(key)
    return property_name, value


def condition_key(
    property_name: str,
    value: object,
    stringify: Callable[[object], str] = stringify_value,
) -> ConditionKey:
    """Encode a key for a value of any type using the given stringifier."""
    return encode(property_name, stringify(value))
