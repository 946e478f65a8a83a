"""
Shared constants and enums for model generation.
"""

from enum import IntEnum

# Package name used for generated model files
DEFAULT_MODEL_PKG = "model"


class Status(IntEnum):
    """Kinds of sections found in a templated SQL comment."""

    UNKNOWN = 0
    SQL = 1
    DATA = 2
    VARIABLE = 3
    IF = 4
    ELSE = 5
    WHERE = 6
    SET = 7
    FOR = 8
    END = 9
    TRIM = 10


class SourceCode(IntEnum):
    """Where a generated model definition comes from."""

    STRUCT = 0  # existing Go struct
    TABLE = 1  # introspected database table
    OBJECT = 2  # user supplied object description
