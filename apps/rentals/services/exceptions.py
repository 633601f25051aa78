"""Domain-specific exceptions for rental services."""

from apps.core.exceptions import ConflictError, ForbiddenError, InvalidStateError, NotFoundError


class RentalsServiceError(Exception):
    """Base exception for rental services."""
    pass


class RentalNotFoundError(RentalsServiceError, NotFoundError):
    default_detail = 'Rental not found'


class RentalProductNotFoundError(RentalsServiceError, NotFoundError):
    default_detail = 'Product not found'


class ProductNotRentableError(RentalsServiceError, InvalidStateError):
    default_detail = 'Product is not available for rental'


class OwnProductRentalError(RentalsServiceError, InvalidStateError):
    default_detail = 'Cannot rent your own product'


class InvalidRentalPeriodError(RentalsServiceError, InvalidStateError):
    default_detail = 'rental_period_end must be after rental_period_start'


class RentalConflictError(RentalsServiceError, ConflictError):
    default_detail = 'Product is not available for the selected dates'


class RentalPermissionError(RentalsServiceError, ForbiddenError):
    default_detail = 'Only product owner can update rental status'


class InvalidStatusTransitionError(RentalsServiceError, InvalidStateError):
    default_detail = 'Invalid status transition'
