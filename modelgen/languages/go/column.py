"""
Build field descriptors from introspected column metadata.

Column and index metadata is produced by schema introspection, which
happens elsewhere; this module only turns it into ``Field`` values.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ...core.config import GeneratorConfig
from ...core.naming import convert_case, to_pascal_case
from ...logging_config import get_logger
from .field import POINTER_MARKER, Field
from .tags import (
    TAG_KEY_GORM_AUTO_INCREMENT,
    TAG_KEY_GORM_COLUMN,
    TAG_KEY_GORM_COMMENT,
    TAG_KEY_GORM_DEFAULT,
    TAG_KEY_GORM_INDEX,
    TAG_KEY_GORM_NOT_NULL,
    TAG_KEY_GORM_PRIMARY_KEY,
    TAG_KEY_GORM_TYPE,
    TAG_KEY_GORM_UNIQUE_INDEX,
    TAG_KEY_JSON,
    GormTag,
    Tag,
)
from .types import DEFAULT_TYPE_MAP, DataTypeMap

logger = get_logger(__name__)

SOFT_DELETE_COLUMN = "deleted_at"
SOFT_DELETE_TYPE = "gorm.DeletedAt"


@dataclass
class Index:
    """Index a column takes part in."""

    name: str
    primary_key: bool = False
    unique: bool = False
    priority: int = 1


@dataclass
class Column:
    """Introspected column metadata."""

    name: str
    data_type: str  # e.g. "tinyint"
    column_type: str = ""  # e.g. "tinyint(1) unsigned"
    nullable: Optional[bool] = None
    primary_key: bool = False
    auto_increment: Optional[bool] = None
    default: Optional[str] = None
    comment: str = ""
    indexes: List[Index] = field(default_factory=list)

    @property
    def multiline_comment(self) -> bool:
        return "\n" in self.comment

    def go_type(self, type_map: DataTypeMap) -> str:
        return type_map.get(self.data_type, self.column_type or self.data_type)

    def default_tag_value(self) -> str:
        if self.default is None:
            return ""
        # Whitespace-only defaults must stay visible in the tag
        if self.default and not self.default.strip():
            return f"'{self.default}'"
        return self.default

    def need_default_tag(self, go_type: str, value: str) -> bool:
        """Whether ``value`` differs from the Go zero value of ``go_type``."""
        if not value:
            return False

        base = go_type.lstrip(POINTER_MARKER)
        if base == "bool":
            return value not in ("false", "0")
        if base.startswith(("int", "uint", "float")):
            return value != "0"
        if base == "string":
            return True
        if base == "time.Time":
            return value.strip("'0:- ") != ""
        return value.upper() != "NULL"

    def build_gorm_tag(self, go_type: str, config: GeneratorConfig) -> GormTag:
        tag = GormTag()
        tag.set(TAG_KEY_GORM_COLUMN, self.name)
        tag.set(TAG_KEY_GORM_TYPE, self.column_type or self.data_type)

        if self.primary_key:
            tag.set(TAG_KEY_GORM_PRIMARY_KEY, "")
            if self.auto_increment is not None:
                tag.set(TAG_KEY_GORM_AUTO_INCREMENT, str(self.auto_increment).lower())
        elif self.nullable is False:
            tag.set(TAG_KEY_GORM_NOT_NULL, "")

        for index in self.indexes:
            if index.primary_key:
                continue
            key = TAG_KEY_GORM_UNIQUE_INDEX if index.unique else TAG_KEY_GORM_INDEX
            tag.append(key, f"{index.name},priority:{index.priority}")

        default_value = self.default_tag_value()
        if config.field_with_default_tag and self.need_default_tag(go_type, default_value):
            tag.set(TAG_KEY_GORM_DEFAULT, default_value)

        if self.comment:
            comment = self.comment
            if self.multiline_comment:
                comment = comment.replace("\n", "\\n")
            tag.set(TAG_KEY_GORM_COMMENT, comment)

        return tag

    def to_field(
        self,
        config: Optional[GeneratorConfig] = None,
        type_map: Optional[DataTypeMap] = None,
    ) -> Field:
        """
        Build the struct field for this column.

        Args:
            config: Generator settings (defaults apply when omitted)
            type_map: Type registry (process-wide registry when omitted)

        Returns:
            Field with resolved type, json tag and gorm tag
        """
        config = config or GeneratorConfig()
        type_map = type_map or DEFAULT_TYPE_MAP

        base_type = self.go_type(type_map)
        field_type = base_type
        if (
            config.field_signable
            and "unsigned" in self.column_type
            and field_type.startswith("int")
        ):
            field_type = f"u{field_type}"

        if self.name == SOFT_DELETE_COLUMN and field_type == "time.Time":
            field_type = SOFT_DELETE_TYPE
        elif config.field_coverable and self.need_default_tag(
            field_type, self.default_tag_value()
        ):
            field_type = POINTER_MARKER + field_type
        elif config.field_nullable and self.nullable:
            field_type = POINTER_MARKER + field_type

        logger.debug(
            "Column %s (%s) -> %s", self.name, self.column_type or self.data_type, field_type
        )

        return Field(
            name=to_pascal_case(self.name),
            type=field_type,
            column_name=self.name,
            column_comment=self.comment,
            multiline_comment=self.multiline_comment,
            tag=Tag({TAG_KEY_JSON: convert_case(self.name, config.json_naming)}),
            gorm_tag=self.build_gorm_tag(base_type, config),
        )


def columns_to_fields(
    columns: List[Column],
    config: Optional[GeneratorConfig] = None,
    type_map: Optional[DataTypeMap] = None,
) -> List[Field]:
    """Convert a table's columns into fields, in column order."""
    return [column.to_field(config, type_map) for column in columns]
