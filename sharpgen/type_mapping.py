"""Mapping from Python types to C# type names.

Builders accept either a C# type name (``"string"``) or a Python type
(``str``); the latter is translated here.
"""

from __future__ import annotations

import datetime
import decimal
import uuid
from typing import Union

TypeLike = Union[str, type]

_PYTHON_TO_CSHARP: dict[type, str] = {
    bool: "bool",
    int: "int",
    float: "double",
    str: "string",
    bytes: "byte[]",
    object: "object",
    decimal.Decimal: "decimal",
    datetime.datetime: "DateTime",
    datetime.date: "DateOnly",
    datetime.time: "TimeOnly",
    datetime.timedelta: "TimeSpan",
    uuid.UUID: "Guid",
}


def csharp_type_name(value: TypeLike) -> str:
    """Return the C# spelling of *value*.

    Strings pass through unchanged. Known Python types map to their C#
    keyword or BCL counterpart; any other class maps to its ``__name__``.

    Examples::

        csharp_type_name("List<int>") -> "List<int>"
        csharp_type_name(str) -> "string"
        csharp_type_name(uuid.UUID) -> "Guid"
    """
    if isinstance(value, str):
        return value
    if isinstance(value, type):
        return _PYTHON_TO_CSHARP.get(value, value.__name__)
    raise TypeError(f"Expected a type name or a type, got {type(value).__name__}")
