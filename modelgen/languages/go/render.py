"""
Render field descriptors into Go source snippets.

Output is returned as text; writing files is left to the caller.
"""

import copy
from typing import Iterable, List, Optional

from ...core.constants import DEFAULT_MODEL_PKG
from ...core.keywords import KeywordSet
from ...core.naming import to_pascal_case
from ...core.templates import TemplateEngine, get_default_template_engine
from ...logging_config import get_logger
from .field import POINTER_MARKER, Field

logger = get_logger(__name__)

# Go type prefix -> import path
TYPE_IMPORTS = {
    "time.": "time",
    "json.": "encoding/json",
    "gorm.": "gorm.io/gorm",
    "datatypes.": "gorm.io/datatypes",
}


def collect_imports(fields: Iterable[Field]) -> List[str]:
    """Import paths needed by the field types."""
    imports = set()
    for f in fields:
        if f.is_relation():
            continue
        base = f.type.lstrip(POINTER_MARKER)
        for prefix, path in TYPE_IMPORTS.items():
            if base.startswith(prefix):
                imports.add(path)
    return sorted(imports)


def render_model(
    table_name: str,
    fields: List[Field],
    struct_name: Optional[str] = None,
    model_pkg: str = DEFAULT_MODEL_PKG,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """
    Render the Go model struct for one table.

    Args:
        table_name: Database table name
        fields: Struct fields in declaration order
        struct_name: Go struct name (derived from the table name if omitted)
        model_pkg: Go package of the model file
        engine: Template engine (the built-in one by default)

    Returns:
        Go source of the model file
    """
    engine = engine or get_default_template_engine()
    struct_name = struct_name or to_pascal_case(table_name)

    logger.debug("Rendering model %s (%d fields)", struct_name, len(fields))
    return engine.render_template(
        "model.go.j2",
        {
            "model_pkg": model_pkg,
            "imports": collect_imports(fields),
            "struct_name": struct_name,
            "table_name": table_name,
            "fields": fields,
        },
    )


def render_query_fields(
    query_struct_name: str,
    fields: List[Field],
    keywords: Optional[KeywordSet] = None,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """
    Render the typed column declarations of a query struct.

    Field names are escaped against the query API keywords (or ``keywords``)
    on copies, so the caller's descriptors keep their names.
    """
    engine = engine or get_default_template_engine()

    escaped = []
    for f in fields:
        f = copy.copy(f)
        if keywords is None:
            f.escape_keyword()
        else:
            f.escape_keyword_for(keywords)
        escaped.append(f)

    return engine.render_template(
        "query_fields.go.j2",
        {"query_struct_name": query_struct_name, "fields": escaped},
    )
