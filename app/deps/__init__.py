from .database import get_session_factory
from .services import get_product_service, get_seed_service

__all__ = [
    "get_session_factory",
    "get_product_service",
    "get_seed_service",
]
