"""The Alembic revision builds the same tables the ORM models declare."""
from __future__ import annotations

import importlib.util
from pathlib import Path

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

from linkup.database import Base

VERSIONS_DIR = Path(__file__).resolve().parents[1] / "alembic" / "versions"


def _load_revision():
    path = VERSIONS_DIR / "20261016_create_linkup_schema.py"
    spec = importlib.util.spec_from_file_location("linkup_schema_revision", path)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


def test_upgrade_then_downgrade_on_sqlite():
    revision = _load_revision()
    engine = create_engine("sqlite://")

    with engine.begin() as connection:
        with Operations.context(MigrationContext.configure(connection)):
            revision.upgrade()
        tables = set(inspect(connection).get_table_names())

        assert tables == set(Base.metadata.tables)
        likes_constraints = inspect(connection).get_unique_constraints("post_likes")
        assert {"post_id", "user_id"} == set(likes_constraints[0]["column_names"])

        with Operations.context(MigrationContext.configure(connection)):
            revision.downgrade()
        assert inspect(connection).get_table_names() == []
