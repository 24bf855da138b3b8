# app/models/__init__.py

"""
Импорт всех моделей для правильной работы SQLAlchemy
"""

from .product import Product
from .product_image import ProductImage

__all__ = [
    "Product",
    "ProductImage",
]
