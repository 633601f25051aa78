"""Rental services."""

from .availability import (
    validate_period,
    find_conflicting_rentals,
    check_availability,
)
from .rental_management import (
    create_rental,
    get_rental,
    get_user_rentals,
    update_rental,
)
from .exceptions import (
    RentalsServiceError,
    RentalNotFoundError,
    RentalProductNotFoundError,
    ProductNotRentableError,
    OwnProductRentalError,
    InvalidRentalPeriodError,
    RentalConflictError,
    RentalPermissionError,
    InvalidStatusTransitionError,
)

__all__ = [
    'validate_period',
    'find_conflicting_rentals',
    'check_availability',
    'create_rental',
    'get_rental',
    'get_user_rentals',
    'update_rental',
    'RentalsServiceError',
    'RentalNotFoundError',
    'RentalProductNotFoundError',
    'ProductNotRentableError',
    'OwnProductRentalError',
    'InvalidRentalPeriodError',
    'RentalConflictError',
    'RentalPermissionError',
    'InvalidStatusTransitionError',
]
