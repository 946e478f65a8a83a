"""
Go model generation module.

Maps schema column types to Go types and builds struct field
descriptors with json/gorm tags.
"""

from .column import Column, Index, columns_to_fields
from .field import Field, Relation, RelationshipType
from .render import collect_imports, render_model, render_query_fields
from .tags import TAG_KEY_GORM, TAG_KEY_JSON, GormTag, Tag
from .types import (
    DEFAULT_DATA_TYPE,
    DEFAULT_TYPE_MAP,
    DataTypeMap,
    get_data_type,
    new_type_map,
    set_data_type,
)

__all__ = [
    # Field descriptors
    "Field",
    "Relation",
    "RelationshipType",
    "Column",
    "Index",
    "columns_to_fields",
    # Tags
    "Tag",
    "GormTag",
    "TAG_KEY_GORM",
    "TAG_KEY_JSON",
    # Type mapping
    "DataTypeMap",
    "DEFAULT_DATA_TYPE",
    "DEFAULT_TYPE_MAP",
    "get_data_type",
    "set_data_type",
    "new_type_map",
    # Rendering
    "collect_imports",
    "render_model",
    "render_query_fields",
]
