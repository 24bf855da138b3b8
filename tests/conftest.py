import asyncio
import sys
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.database import create_tables
from app.services.product_service import ProductService
from app.services.seed_service import SeedService


@pytest.fixture
def engine(tmp_path):
    # Отдельный файл SQLite на тест; NullPool, т.к. каждый asyncio.run — свой event loop
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        poolclass=NullPool,
    )
    asyncio.run(create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def product_service(session_factory):
    return ProductService(session_factory)


@pytest.fixture
def seed_service(product_service):
    return SeedService(product_service)
