"""
ProductService — CRUD продуктов и их изображений.

Каждая операция открывает собственную сессию (unit of work), поэтому
параллельные вызовы (например, из сида) не делят одну AsyncSession.
"""

import logging
from contextlib import asynccontextmanager
from typing import List, NoReturn, Optional, Union

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.core.exceptions import raise_400, raise_404, raise_500
from app.models import Product, ProductImage
from app.schemas.lookup import LookupKind, ProductLookup
from app.schemas.pagination import PaginationParams
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate

UNIQUE_VIOLATION = "23505"


class ProductService:

    def __init__(
        self,
        session_factory: async_sessionmaker,
        logger: Optional[logging.Logger] = None,
    ):
        self.session_factory = session_factory
        self.logger = logger or logging.getLogger("ProductService")

    @asynccontextmanager
    async def _unit_of_work(self):
        """Сессия на одну операцию: commit при успехе, rollback при ошибке, close всегда"""
        session: AsyncSession = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    # ---------------------- CREATE ----------------------

    async def create(self, product_in: ProductCreate) -> ProductResponse:
        product_details = product_in.model_dump(exclude={"images"})
        images = list(product_in.images)

        try:
            async with self._unit_of_work() as session:
                product = Product(
                    **product_details,
                    images=[ProductImage(url=url) for url in images],
                )
                session.add(product)
        except SQLAlchemyError as e:
            self._handle_db_exceptions(e)

        self.logger.info("Создан продукт %s (%s), изображений: %d", product.slug, product.id, len(images))
        # Отдаём исходный список URL, без повторного чтения из БД
        return ProductResponse.model_validate(product).model_copy(update={"images": images})

    # ---------------------- READ ----------------------

    async def find_all(self, pagination: Optional[PaginationParams] = None) -> List[ProductResponse]:
        pagination = pagination or PaginationParams()

        async with self._unit_of_work() as session:
            result = await session.execute(
                select(Product)
                .options(selectinload(Product.images))
                .limit(pagination.limit)
                .offset(pagination.offset)
            )
            products = result.scalars().all()

        return [ProductResponse.model_validate(p) for p in products]

    async def find_one(self, term: Union[str, ProductLookup]) -> Product:
        lookup = term if isinstance(term, ProductLookup) else ProductLookup.from_term(term)
        async with self._unit_of_work() as session:
            return await self._find_one(session, lookup)

    async def find_one_plain(self, term: Union[str, ProductLookup]) -> ProductResponse:
        product = await self.find_one(term)
        return ProductResponse.model_validate(product)

    async def _find_one(self, session: AsyncSession, lookup: ProductLookup) -> Product:
        if lookup.kind == LookupKind.IDENTIFIER:
            query = select(Product).where(Product.id == lookup.value)
        else:
            # Название без учёта регистра, slug строго как есть
            query = select(Product).where(
                or_(
                    func.upper(Product.title) == lookup.value.upper(),
                    Product.slug == lookup.value,
                )
            )

        result = await session.execute(query.options(selectinload(Product.images)))
        product = result.scalars().first()

        if not product:
            raise_404(entity="Product", id=lookup.value)
        return product

    # ---------------------- UPDATE ----------------------

    async def update(self, product_id: str, changes: ProductUpdate) -> Product:
        product_id = str(product_id)
        to_update = changes.model_dump(exclude_unset=True)
        images = to_update.pop("images", None)

        try:
            async with self._unit_of_work() as session:
                # Текущие изображения загружаются вместе с продуктом
                result = await session.execute(
                    select(Product)
                    .where(Product.id == product_id)
                    .options(selectinload(Product.images))
                )
                product = result.scalar_one_or_none()
                if not product:
                    raise_404(f"Product with id: {product_id} not found")

                for field, value in to_update.items():
                    setattr(product, field, value)

                if images is not None:
                    # Старые изображения становятся сиротами и удаляются каскадом delete-orphan
                    product.images = [ProductImage(url=url) for url in images]

                await session.flush()
        except SQLAlchemyError as e:
            self._handle_db_exceptions(e)

        self.logger.info(
            "Обновлён продукт %s: поля=%s, изображения %s",
            product_id,
            sorted(to_update),
            "заменены" if images is not None else "без изменений",
        )
        return product

    # ---------------------- DELETE ----------------------

    async def remove(self, product_id: str) -> None:
        lookup = ProductLookup.from_term(str(product_id))
        async with self._unit_of_work() as session:
            product = await self._find_one(session, lookup)
            # Изображения удаляются каскадом
            await session.delete(product)
        self.logger.info("Удалён продукт %s", product_id)

    async def delete_all_products(self) -> int:
        try:
            async with self._unit_of_work() as session:
                await session.execute(delete(ProductImage))
                result = await session.execute(delete(Product))
        except SQLAlchemyError as e:
            self._handle_db_exceptions(e)

        self.logger.info("Удалены все продукты: %s", result.rowcount)
        return result.rowcount

    # ---------------------- ERRORS ----------------------

    def _handle_db_exceptions(self, error: SQLAlchemyError) -> NoReturn:
        detail = unique_violation_detail(error)
        if detail is not None:
            self.logger.warning("Нарушение уникальности: %s", detail)
            raise_400(detail)

        self.logger.error("Ошибка БД: %s", error, exc_info=error)
        raise_500("Unexpected error, check server logs")


def unique_violation_detail(error: SQLAlchemyError) -> Optional[str]:
    """
    Возвращает текст ошибки, если это нарушение уникальности, иначе None.

    PostgreSQL (asyncpg) отдаёт SQLSTATE 23505, SQLite — "UNIQUE constraint failed".
    """
    if not isinstance(error, IntegrityError):
        return None

    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION:
        cause = getattr(orig, "__cause__", None)
        return getattr(cause, "detail", None) or str(orig)

    if "UNIQUE constraint failed" in str(orig):
        return str(orig)
    return None
