"""Enumerations for EJSONParser type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LiteralTag(StrEnum):
    """Tag text of a tagged literal: TAG("payload").

    StrEnum provides automatic string conversion: str(LiteralTag.DATE) == "DATE"
    """

    TIMESTAMP = "TIMESTAMP"
    """UTC timestamp: TIMESTAMP("2021-01-02T03:04:05Z")"""

    TIME = "TIME"
    """Time of day: TIME("03:04:05")"""

    DATE = "DATE"
    """Calendar date: DATE("2021-01-02")"""

    INTERVAL = "INTERVAL"
    """Opaque interval: INTERVAL("P1D")"""

    OID = "OID"
    """Opaque object identifier: OID("5f1d...")"""


class LayerKind(StrEnum):
    """Kind of a single EJSON tree layer.

    StrEnum provides automatic string conversion: str(LayerKind.MAP) == "map"
    """

    NULL = "null"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    INTEGER = "integer"
    STRING = "string"
    TIMESTAMP = "timestamp"
    TIME = "time"
    DATE = "date"
    INTERVAL = "interval"
    OBJECT_ID = "object_id"
    ARRAY = "array"
    MAP = "map"


__all__ = [
    "LayerKind",
    "LiteralTag",
]
