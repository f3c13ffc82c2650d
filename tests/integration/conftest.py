import os
import uuid
from collections.abc import Generator

import pytest
from psycopg import sql
from psycopg_pool import ConnectionPool

from filecatalog.config.settings import Settings
from filecatalog.database.connection import create_pool
from filecatalog.database.repositories.catalog_repository import CatalogRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "filecatalog_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[ConnectionPool, None, None]:
    pool = create_pool(test_settings)
    try:
        pool.wait(timeout=5)
    except Exception as e:
        pool.close()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. Set DB_* env to point at a test database"
        )
    try:
        yield pool
    finally:
        pool.close()


@pytest.fixture
def catalog_repo(integration_pool: ConnectionPool) -> Generator[CatalogRepository, None, None]:
    table = f"file_metadata_test_{uuid.uuid4().hex[:8]}"
    repo = CatalogRepository(integration_pool, table=table)
    repo.create_table()
    try:
        yield repo
    finally:
        with integration_pool.connection() as conn:
            conn.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(sql.Identifier(table)))
            conn.commit()
