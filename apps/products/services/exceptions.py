"""Domain-specific exceptions for products services."""

from apps.core.exceptions import ForbiddenError, InvalidStateError, NotFoundError


class ProductsServiceError(Exception):
    """Base exception for products services."""
    pass


class ProductNotFoundError(ProductsServiceError, NotFoundError):
    """Raised when product does not exist or is not visible."""
    default_detail = 'Product not found'


class InvalidCategoryError(ProductsServiceError, InvalidStateError):
    """Raised when the referenced category does not exist."""
    default_detail = 'Invalid category_id'


class ProductPermissionError(ProductsServiceError, ForbiddenError):
    """Raised when a non-owner tries to change a product."""
    default_detail = 'Not authorized to update this product'
