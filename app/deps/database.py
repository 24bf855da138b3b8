# app/deps/database.py
from app.core.database import AsyncSessionLocal


def get_session_factory():
    """Фабрика сессий; в тестах подменяется через dependency_overrides"""
    return AsyncSessionLocal
