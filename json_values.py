# json_values.py
# Value model for parsed JSON trees.
#
# Parsed trees are built from Python natives: None, bool, float, str, list
# and dict. Every JSON number becomes a float, so there is no separate
# integer variant.

from enum import Enum
from typing import Dict, List, Union

Value = Union[None, bool, float, str, List["Value"], Dict[str, "Value"]]


class ValueKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value) -> ValueKind:
    """
    Classify one node of a parsed tree.

    bool is tested before float because bool is an int subclass. Ints are
    accepted as numbers so hand-built trees compare naturally.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


__all__ = ["Value", "ValueKind", "kind_of"]
