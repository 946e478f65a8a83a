"""
Shared fixtures for the modelgen test suite.
"""

from __future__ import annotations

from typing import List

import pytest

from modelgen.core.config import GeneratorConfig
from modelgen.languages.go.column import Column, Index
from modelgen.languages.go.types import DataTypeMap


@pytest.fixture()
def type_map() -> DataTypeMap:
    """Fresh registry so tests can register mappings freely."""
    return DataTypeMap()


@pytest.fixture()
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture()
def user_columns() -> List[Column]:
    """Columns of a typical ``users`` table."""
    return [
        Column(
            name="id",
            data_type="bigint",
            column_type="bigint unsigned",
            nullable=False,
            primary_key=True,
            auto_increment=True,
        ),
        Column(
            name="name",
            data_type="varchar",
            column_type="varchar(64)",
            nullable=False,
            comment="display name",
            indexes=[Index(name="idx_name")],
        ),
        Column(
            name="email",
            data_type="varchar",
            column_type="varchar(255)",
            nullable=True,
            indexes=[Index(name="uk_email", unique=True)],
        ),
        Column(
            name="is_admin",
            data_type="tinyint",
            column_type="tinyint(1)",
            nullable=False,
            default="0",
        ),
        Column(
            name="created_at",
            data_type="datetime",
            column_type="datetime(3)",
            nullable=True,
        ),
        Column(
            name="deleted_at",
            data_type="datetime",
            column_type="datetime(3)",
            nullable=True,
        ),
    ]
