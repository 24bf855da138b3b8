import asyncio
import logging
from typing import Optional

from app.schemas.product import ProductCreate
from app.services.product_service import ProductService
from app.services.seed_data import INITIAL_DATA


class SeedService:

    def __init__(self, product_service: ProductService, logger: Optional[logging.Logger] = None):
        self.product_service = product_service
        self.logger = logger or logging.getLogger("SeedService")

    async def run_seed(self) -> str:
        await self._insert_new_products()
        return "Seed executed"

    async def _insert_new_products(self) -> None:
        """
        Полностью заменяет каталог стартовыми данными.

        Вставки идут параллельно; первая ошибка пробрасывается наружу,
        уже созданные продукты при этом остаются в БД.
        """
        await self.product_service.delete_all_products()

        products = [ProductCreate(**item) for item in INITIAL_DATA["products"]]
        await asyncio.gather(*(self.product_service.create(p) for p in products))

        self.logger.info("Сид выполнен: создано %d продуктов", len(products))
