"""
Products services - Business logic layer.

- Product CRUD and moderation status changes
- Category management
- Product search
"""

from .product_management import (
    create_product,
    get_product,
    update_product,
    delete_product,
    set_product_status,
    list_categories,
    create_category,
)
from .product_search import search_products
from .exceptions import (
    ProductsServiceError,
    ProductNotFoundError,
    InvalidCategoryError,
    ProductPermissionError,
)

__all__ = [
    'create_product',
    'get_product',
    'update_product',
    'delete_product',
    'set_product_status',
    'list_categories',
    'create_category',
    'search_products',
    'ProductsServiceError',
    'ProductNotFoundError',
    'InvalidCategoryError',
    'ProductPermissionError',
]
