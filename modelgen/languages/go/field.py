"""
Field descriptor for generated Go model structs.

A ``Field`` carries everything the templates need for one struct field:
its Go name and type, column provenance, struct tags and an optional
relation to another generated model.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ...core.keywords import GORM_KEYWORDS, KeywordSet
from .tags import TAG_KEY_GORM, GormTag, Tag


class RelationshipType(Enum):
    """Association kinds between generated models."""

    HAS_ONE = "HasOne"
    HAS_MANY = "HasMany"
    BELONGS_TO = "BelongsTo"
    MANY_TO_MANY = "Many2Many"


@dataclass
class Relation:
    """Association from one model to another."""

    name: str
    type: str  # associated Go type, e.g. "[]Order" or "User"
    relationship: RelationshipType = RelationshipType.HAS_ONE
    path: str = ""
    child_relations: List["Relation"] = field(default_factory=list)

    def relationship_name(self) -> str:
        return self.relationship.value


# Leading marker of a nullable Go type
POINTER_MARKER = "*"

_INT_TYPES = {
    "int", "int8", "int16", "int32", "int64",
    "uint", "uint8", "uint16", "uint32", "uint64",
}
_FLOAT_TYPES = {"float32", "float64"}


@dataclass
class Field:
    """One generated struct field."""

    name: str
    type: str
    column_name: str = ""
    column_comment: str = ""
    multiline_comment: bool = False
    tag: Tag = field(default_factory=Tag)
    gorm_tag: GormTag = field(default_factory=GormTag)
    custom_gen_type: str = ""
    relation: Optional[Relation] = None

    def __post_init__(self):
        if not isinstance(self.tag, Tag):
            self.tag = Tag(self.tag or {})
        if not isinstance(self.gorm_tag, GormTag):
            self.gorm_tag = GormTag(self.gorm_tag or {})

    def tags(self) -> str:
        """
        Render the struct tag.

        A ``gorm`` entry set by the caller wins; otherwise the gorm tag is
        built from ``gorm_tag`` and stored under ``gorm`` the first time.
        """
        if TAG_KEY_GORM in self.tag:
            return self.tag.build()

        gorm_tag = self.gorm_tag.build().strip()
        if gorm_tag:
            self.tag.set(TAG_KEY_GORM, gorm_tag)
        return self.tag.build()

    def is_relation(self) -> bool:
        return self.relation is not None

    def gen_type(self) -> str:
        """Name of the query helper type (``field.<GenType>``) for this field."""
        if self.is_relation():
            return self.type
        if self.custom_gen_type:
            return self.custom_gen_type

        typ = self.type
        if typ.startswith(POINTER_MARKER):
            typ = typ[len(POINTER_MARKER):]
        if typ in ("string", "bytes"):
            return typ.title()
        if typ in _INT_TYPES or typ in _FLOAT_TYPES:
            return typ.title()
        if typ == "bool":
            return typ.title()
        if typ == "time.Time":
            return "Time"
        if typ in ("json.RawMessage", "[]byte"):
            return "Bytes"
        if typ == "serializer":
            return "Serializer"
        return "Field"

    def escape_keyword(self) -> "Field":
        """Rename the field if it collides with a query API method."""
        return self.escape_keyword_for(GORM_KEYWORDS)

    def escape_keyword_for(self, keywords: KeywordSet) -> "Field":
        if keywords.full_match(self.name):
            self.name += "_"
        return self
