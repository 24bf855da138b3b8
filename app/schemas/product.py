# app/schemas/product.py
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from app.utils.text_utils import generate_slug, normalize_slug


class ProductBase(BaseModel):
    title: str = Field(..., min_length=1)
    price: float = Field(default=0, ge=0)
    description: Optional[str] = None
    stock: int = Field(default=0, ge=0)
    sizes: List[str] = []
    gender: Optional[str] = None
    tags: List[str] = []


class ProductCreate(ProductBase):
    slug: Optional[str] = None
    images: List[str] = []

    @model_validator(mode="after")
    def fill_slug(self):
        # Переданный slug только нормализуем; без slug строим его из названия
        self.slug = normalize_slug(self.slug) if self.slug else generate_slug(self.title)
        return self


class ProductUpdate(BaseModel):
    """Частичное обновление: применяются только переданные поля"""
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    stock: Optional[int] = Field(default=None, ge=0)
    sizes: Optional[List[str]] = None
    gender: Optional[str] = None
    tags: Optional[List[str]] = None
    images: Optional[List[str]] = None

    @field_validator("title", "slug", "price", "stock")
    @classmethod
    def reject_null(cls, v):
        # Поле можно не передавать, но явный null для NOT NULL колонок недопустим
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("slug")
    @classmethod
    def clean_slug(cls, v):
        return normalize_slug(v)


class ProductResponse(ProductBase):
    """Продукт наружу: изображения только списком URL"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    images: List[str] = []

    @field_validator("images", mode="before")
    @classmethod
    def collapse_images(cls, v):
        return [getattr(image, "url", image) for image in v or []]
