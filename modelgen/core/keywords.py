"""
Reserved method names of the generated query API.

Generated identifiers that collide with one of these names must be
renamed, otherwise the generated code would shadow API methods.
"""

from typing import Iterable, Iterator, Tuple


class KeywordSet:
    """Immutable list of reserved words."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]):
        self._words: Tuple[str, ...] = tuple(words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def full_match(self, word: str) -> bool:
        """Return True if ``word`` is exactly one of the reserved words."""
        for item in self._words:
            if word == item:
                return True
        return False

    def contain(self, text: str) -> bool:
        """Return True if any reserved word appears anywhere inside ``text``."""
        for item in self._words:
            if item in text:
                return True
        return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.full_match(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"KeywordSet({len(self._words)} words)"


# Methods of the generated query builder
GORM_KEYWORDS = KeywordSet(
    [
        "UnderlyingDB", "UseDB", "UseModel", "UseTable", "Quote", "Debug", "TableName", "WithContext",
        "As", "Not", "Or", "Build", "Columns", "Hints",
        "Distinct", "Omit",
        "Select", "Where", "Order", "Group", "Having", "Limit", "Offset",
        "Join", "LeftJoin", "RightJoin",
        "Save", "Create", "CreateInBatches",
        "Update", "Updates", "UpdateColumn", "UpdateColumns",
        "Find", "FindInBatches", "First", "Take", "Last", "Pluck", "Count",
        "Scan", "ScanRows", "Row", "Rows",
        "Delete", "Unscoped",
        "Scopes",
    ]
)

# Methods of the generated data object
DO_KEYWORDS = KeywordSet(["Alias", "TableName", "WithContext"])

# Helper names used inside generated method bodies
GEN_KEYWORDS = KeywordSet(["generateSQL", "whereClause", "setClause"])

KEYWORD_SETS = {
    "gorm": GORM_KEYWORDS,
    "do": DO_KEYWORDS,
    "gen": GEN_KEYWORDS,
}
