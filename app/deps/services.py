# app/deps/services.py
import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.deps.database import get_session_factory
from app.services.product_service import ProductService
from app.services.seed_service import SeedService


def get_product_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> ProductService:
    return ProductService(session_factory, logger=logging.getLogger("ProductService"))


def get_seed_service(
    product_service: ProductService = Depends(get_product_service),
) -> SeedService:
    return SeedService(product_service, logger=logging.getLogger("SeedService"))
