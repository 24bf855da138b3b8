from fastapi import APIRouter

from app.api.v1.products import router as products_router
from app.api.v1.seed import router as seed_router
from app.api.v1.files import router as files_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(seed_router, prefix="/seed", tags=["Seed"])
api_router.include_router(files_router, prefix="/files", tags=["Files"])
