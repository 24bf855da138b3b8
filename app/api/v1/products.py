# app/api/v1/products.py
import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from app.deps import get_product_service
from app.schemas.pagination import PaginationParams
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.product_service import ProductService

router = APIRouter()


@router.post("/", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    return await service.create(product)


@router.get("/", response_model=List[ProductResponse])
async def list_products(
    pagination: PaginationParams = Depends(),
    service: ProductService = Depends(get_product_service),
):
    return await service.find_all(pagination)


@router.get("/{term}", response_model=ProductResponse)
async def get_product(
    term: str,
    service: ProductService = Depends(get_product_service),
):
    """Поиск по UUID, названию (без учёта регистра) или slug"""
    return await service.find_one_plain(term)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: uuid.UUID,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    product = await service.update(str(product_id), product_data)
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: uuid.UUID,
    service: ProductService = Depends(get_product_service),
):
    await service.remove(str(product_id))
