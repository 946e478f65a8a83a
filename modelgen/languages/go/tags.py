"""
Go struct tag builders.

``Tag`` renders the full backtick tag (``json:"id" gorm:"..."``) and
``GormTag`` renders the semicolon separated value stored under the
``gorm`` key.
"""

from typing import Dict, Iterable, List

TAG_KEY_GORM = "gorm"
TAG_KEY_JSON = "json"

# gorm tag keys
TAG_KEY_GORM_COLUMN = "column"
TAG_KEY_GORM_TYPE = "type"
TAG_KEY_GORM_PRIMARY_KEY = "primaryKey"
TAG_KEY_GORM_AUTO_INCREMENT = "autoIncrement"
TAG_KEY_GORM_NOT_NULL = "not null"
TAG_KEY_GORM_UNIQUE_INDEX = "uniqueIndex"
TAG_KEY_GORM_INDEX = "index"
TAG_KEY_GORM_DEFAULT = "default"
TAG_KEY_GORM_COMMENT = "comment"

TAG_KEY_PRIORITIES: Dict[str, int] = {
    TAG_KEY_GORM: 100,
    TAG_KEY_JSON: 99,
    TAG_KEY_GORM_COLUMN: 10,
    TAG_KEY_GORM_TYPE: 9,
    TAG_KEY_GORM_PRIMARY_KEY: 8,
    TAG_KEY_GORM_AUTO_INCREMENT: 7,
    TAG_KEY_GORM_NOT_NULL: 6,
    TAG_KEY_GORM_UNIQUE_INDEX: 5,
    TAG_KEY_GORM_INDEX: 4,
    TAG_KEY_GORM_DEFAULT: 3,
    TAG_KEY_GORM_COMMENT: 0,
}


def sorted_tag_keys(keys: Iterable[str]) -> List[str]:
    """Order keys by priority (highest first), then alphabetically."""
    return sorted(keys, key=lambda k: (-TAG_KEY_PRIORITIES.get(k, 0), k))


class Tag(Dict[str, str]):
    """Struct tag entries keyed by library name (json, gorm, ...)."""

    def set(self, key: str, value: str) -> "Tag":
        self[key] = value
        return self

    def remove(self, key: str) -> "Tag":
        self.pop(key, None)
        return self

    def build(self) -> str:
        """Render as ``key:"value"`` pairs joined by spaces."""
        if not self:
            return ""

        parts = []
        for key in sorted_tag_keys(self.keys()):
            value = self[key]
            if not key or not value:
                continue
            parts.append(f'{key}:"{value}"')
        return " ".join(parts)


class GormTag(Dict[str, List[str]]):
    """gorm tag settings; a key may carry several values (e.g. indexes)."""

    def set(self, key: str, value: str) -> "GormTag":
        self[key] = [value]
        return self

    def append(self, key: str, *values: str) -> "GormTag":
        self.setdefault(key, []).extend(values)
        return self

    def remove(self, key: str) -> "GormTag":
        self.pop(key, None)
        return self

    def build(self) -> str:
        """Render as ``key:value`` settings joined by semicolons."""
        if not self:
            return ""

        parts = []
        for key in sorted_tag_keys(self.keys()):
            values = self[key]
            if not values:
                if key:
                    parts.append(key)
                continue
            for value in values:
                if not key and not value:
                    continue
                parts.append(":".join(p for p in (key, value) if p))
        return ";".join(parts)
