"""Shared fixtures for registry tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from job_registry.registry import Registry
from job_registry.storage import Database

ADMIN = "0xadmin"


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "registry.db"


@pytest.fixture
def database(db_path: Path) -> Database:
    return Database(str(db_path))


@pytest.fixture
def registry(database: Database) -> Registry:
    return Registry(database, ADMIN)
