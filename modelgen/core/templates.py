"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for Go code generation.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, FileSystemLoader, StrictUndefined

from .naming import to_camel_case, to_pascal_case, to_snake_case


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        # Generated Go source must never be HTML-escaped
        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._env.filters["snake_case"] = to_snake_case
        self._env.filters["camel_case"] = to_camel_case
        self._env.filters["pascal_case"] = to_pascal_case
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    def template_exists(self, name: str) -> bool:
        return name in self._env.list_templates()

    def _indent_filter(self, value: str, width: int = 1, char: str = "\t") -> str:
        """Indent all non-blank lines in a string."""
        indent = char * width
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else style for line in lines)


# Built-in templates for generated Go code
GO_MODEL_TEMPLATE = """\
// Code generated by modelgen. DO NOT EDIT.

package {{ model_pkg }}
{% if imports %}

import (
{% for imp in imports %}
	"{{ imp }}"
{% endfor %}
)
{% endif %}

const TableName{{ struct_name }} = "{{ table_name }}"

// {{ struct_name }} mapped from table <{{ table_name }}>
type {{ struct_name }} struct {
{% for f in fields %}
{% if f.multiline_comment and f.column_comment %}
	/*
{{ f.column_comment | indent(2) }}
	*/
{% endif %}
{% set tags = f.tags() %}
	{{ f.name }} {{ f.type }}{% if tags %} `{{ tags }}`{% endif %}{% if f.column_comment and not f.multiline_comment %} {{ f.column_comment | comment }}{% endif %}

{% endfor %}
}

// TableName {{ struct_name }}'s table name
func (*{{ struct_name }}) TableName() string {
	return TableName{{ struct_name }}
}
"""

GO_QUERY_FIELDS_TEMPLATE = """\
type {{ query_struct_name }} struct {
	ALL field.Asterisk
{% for f in fields %}
{% if f.is_relation() %}
	{{ f.name }} {{ f.gen_type() }}
{% else %}
	{{ f.name }} field.{{ f.gen_type() }}
{% endif %}
{% endfor %}
}
"""

# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()

        _default_engine.add_template("model.go.j2", GO_MODEL_TEMPLATE)
        _default_engine.add_template("query_fields.go.j2", GO_QUERY_FIELDS_TEMPLATE)

    return _default_engine
