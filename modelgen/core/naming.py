"""
Naming utilities for generated identifiers.

Handles case conversions from database column names to Go field names
and to serialized (json tag) names.
"""

import re
from enum import Enum
from typing import Set


class NamingCase(Enum):
    """Different naming case styles."""
    ORIGINAL = "original"  # user_name (as stored in the schema)
    SNAKE_CASE = "snake"   # user_name
    CAMEL_CASE = "camel"   # userName
    PASCAL_CASE = "pascal" # UserName


# Abbreviations kept upper-case in Go identifiers (user_id -> UserID)
COMMON_INITIALISMS: Set[str] = {
    "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTP", "HTTPS",
    "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC", "SLA", "SMTP", "SSH",
    "TLS", "TTL", "UID", "UI", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XSRF", "XSS",
}


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    # Replace hyphens and spaces with underscores
    name = re.sub(r'[-\s]+', '_', name)

    # Insert underscore before uppercase letters
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

    # Convert to lowercase and clean up multiple underscores
    name = name.lower()
    name = re.sub(r'_+', '_', name)

    return name.strip('_')


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = to_snake_case(name).split('_')

    # First part lowercase, rest title case
    return parts[0] + ''.join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str, initialisms: bool = True) -> str:
    """
    Convert to PascalCase.

    Args:
        name: Original name (typically a column name)
        initialisms: Keep common abbreviations upper-case (``ID``, ``URL``)

    Returns:
        Exported Go identifier
    """
    parts = []
    for part in to_snake_case(name).split('_'):
        if not part:
            continue
        if initialisms and part.upper() in COMMON_INITIALISMS:
            parts.append(part.upper())
        else:
            parts.append(part.capitalize())

    result = ''.join(parts)
    # Go identifiers cannot start with a digit
    if result and result[0].isdigit():
        result = f"_{result}"
    return result


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert name to target case style."""
    if target_case == NamingCase.SNAKE_CASE:
        return to_snake_case(name)
    elif target_case == NamingCase.CAMEL_CASE:
        return to_camel_case(name)
    elif target_case == NamingCase.PASCAL_CASE:
        return to_pascal_case(name, initialisms=False)
    return name
