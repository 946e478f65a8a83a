"""
modelgen - Go model generation core.

Turns relational column metadata into Go struct field descriptors:
type mapping, struct tags, keyword escaping and SQL text normalization.
"""

from .core import (
    DO_KEYWORDS,
    GEN_KEYWORDS,
    GORM_KEYWORDS,
    ConfigError,
    GeneratorConfig,
    KeywordSet,
    SQLBuffer,
    load_config,
    normalize_sql,
)
from .languages.go import (
    DEFAULT_TYPE_MAP,
    Column,
    DataTypeMap,
    Field,
    GormTag,
    Relation,
    RelationshipType,
    Tag,
    get_data_type,
    new_type_map,
    set_data_type,
)

__version__ = "0.1.0"


def type_map_from_config(config: GeneratorConfig) -> DataTypeMap:
    """Build a type registry with the config's data type overrides applied."""
    return new_type_map(config.data_type_overrides)


__all__ = [
    "KeywordSet",
    "GORM_KEYWORDS",
    "DO_KEYWORDS",
    "GEN_KEYWORDS",
    "SQLBuffer",
    "normalize_sql",
    "GeneratorConfig",
    "ConfigError",
    "load_config",
    "DataTypeMap",
    "DEFAULT_TYPE_MAP",
    "get_data_type",
    "set_data_type",
    "new_type_map",
    "type_map_from_config",
    "Field",
    "Relation",
    "RelationshipType",
    "Column",
    "Tag",
    "GormTag",
]
