# app/core/database.py
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings

engine = create_async_engine(settings.database_url, echo=settings.DB_ECHO)

# expire_on_commit=False: объекты остаются читаемыми после закрытия сессии
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


async def create_tables(bind=None):
    """Создать все таблицы моделей (если их ещё нет)"""
    # Регистрируем модели в metadata
    from app import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
