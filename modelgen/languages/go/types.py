"""
Database column type -> Go type mapping.

The mapping is an extensible registry: every schema type name is bound to
a function that receives the column's detail type (``tinyint(1) unsigned``,
``varchar(255)``, ...) and returns the Go type. Unknown schema types
resolve to ``DEFAULT_DATA_TYPE`` instead of failing, so a single odd
column never aborts generation of a whole schema.

Registration is expected to happen during setup, before lookups start;
the registry does no locking.
"""

from typing import Callable, Dict, Iterator, List, Mapping, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

DataTypeMapping = Callable[[str], str]

DEFAULT_DATA_TYPE = "string"


def _fixed(go_type: str) -> DataTypeMapping:
    """Mapping that ignores the detail type."""

    def mapping(detail_type: str) -> str:
        return go_type

    mapping.__name__ = f"fixed_{go_type}"
    return mapping


def _tinyint(detail_type: str) -> str:
    # tinyint(1) is the conventional boolean column
    if detail_type.strip().startswith("tinyint(1)"):
        return "bool"
    return "int32"


BUILTIN_DATA_TYPES: Dict[str, DataTypeMapping] = {
    "numeric": _fixed("int32"),
    "integer": _fixed("int32"),
    "int": _fixed("int32"),
    "smallint": _fixed("int32"),
    "mediumint": _fixed("int32"),
    "bigint": _fixed("int64"),
    "float": _fixed("float32"),
    "real": _fixed("float64"),
    "double": _fixed("float64"),
    "decimal": _fixed("float64"),
    "char": _fixed("string"),
    "varchar": _fixed("string"),
    "tinytext": _fixed("string"),
    "mediumtext": _fixed("string"),
    "longtext": _fixed("string"),
    "binary": _fixed("[]byte"),
    "varbinary": _fixed("[]byte"),
    "tinyblob": _fixed("[]byte"),
    "blob": _fixed("[]byte"),
    "mediumblob": _fixed("[]byte"),
    "longblob": _fixed("[]byte"),
    "text": _fixed("string"),
    "json": _fixed("string"),
    "enum": _fixed("string"),
    "time": _fixed("time.Time"),
    "date": _fixed("time.Time"),
    "datetime": _fixed("time.Time"),
    "timestamp": _fixed("time.Time"),
    "year": _fixed("int32"),
    "bit": _fixed("[]uint8"),
    "boolean": _fixed("bool"),
    "tinyint": _tinyint,
}


class DataTypeMap:
    """Registry of schema type name -> Go type mapping functions."""

    def __init__(self, mappings: Optional[Mapping[str, DataTypeMapping]] = None):
        self._mappings: Dict[str, DataTypeMapping] = {}
        source = BUILTIN_DATA_TYPES if mappings is None else mappings
        for data_type, mapping in source.items():
            self.set(data_type, mapping)

    def get(self, data_type: str, detail_type: str = "") -> str:
        """
        Resolve the Go type for a column.

        Args:
            data_type: Schema type name, matched case-insensitively
            detail_type: Full column type including size/flags

        Returns:
            Go type, or DEFAULT_DATA_TYPE for unmapped schema types
        """
        mapping = self._mappings.get(data_type.lower())
        if mapping is None:
            logger.debug(
                "No mapping for data type %r, using %s", data_type, DEFAULT_DATA_TYPE
            )
            return DEFAULT_DATA_TYPE
        return mapping(detail_type)

    def set(self, data_type: str, mapping: Union[DataTypeMapping, str]) -> None:
        """
        Register or replace the mapping for a schema type.

        A plain string is registered as a fixed Go type.
        """
        if isinstance(mapping, str):
            mapping = _fixed(mapping)
        key = data_type.lower()
        if key in self._mappings:
            logger.debug("Overriding mapping for data type %r", key)
        self._mappings[key] = mapping

    def copy(self) -> "DataTypeMap":
        return DataTypeMap(self._mappings)

    def names(self) -> List[str]:
        return sorted(self._mappings)

    def __contains__(self, data_type: object) -> bool:
        return isinstance(data_type, str) and data_type.lower() in self._mappings

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._mappings)


# Process-wide registry used by the module level helpers
DEFAULT_TYPE_MAP = DataTypeMap()


def get_data_type(sql_data_type: str) -> str:
    """Return the Go type for a schema type name, without detail type."""
    return DEFAULT_TYPE_MAP.get(sql_data_type, "")


def set_data_type(db_type: str, mapping: Union[DataTypeMapping, str]) -> None:
    """Register a mapping on the process-wide registry."""
    DEFAULT_TYPE_MAP.set(db_type, mapping)


def new_type_map(overrides: Optional[Mapping[str, Union[DataTypeMapping, str]]] = None) -> DataTypeMap:
    """
    Build a fresh registry from the built-in table plus overrides.

    Args:
        overrides: Schema type -> Go type (string) or mapping function

    Returns:
        New DataTypeMap independent of DEFAULT_TYPE_MAP
    """
    type_map = DataTypeMap()
    for data_type, mapping in (overrides or {}).items():
        type_map.set(data_type, mapping)
    return type_map
