"""
Core model generation components.

Language-agnostic pieces shared by the target language generators.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .constants import DEFAULT_MODEL_PKG, SourceCode, Status
from .keywords import DO_KEYWORDS, GEN_KEYWORDS, GORM_KEYWORDS, KeywordSet
from .naming import NamingCase
from .sql_buffer import SQLBuffer, normalize_sql
from .templates import TemplateEngine, TemplateError, get_default_template_engine

__all__ = [
    # Reserved names
    "KeywordSet",
    "GORM_KEYWORDS",
    "DO_KEYWORDS",
    "GEN_KEYWORDS",
    # SQL text
    "SQLBuffer",
    "normalize_sql",
    # Constants
    "DEFAULT_MODEL_PKG",
    "Status",
    "SourceCode",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "get_default_template_engine",
]
