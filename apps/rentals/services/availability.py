"""Calendar overlap checks for products."""

from datetime import datetime
from uuid import UUID

from django.db.models import QuerySet

from apps.products.models import Product, ProductStatus
from ..models import BLOCKING_STATUSES, Rental
from .exceptions import InvalidRentalPeriodError, RentalProductNotFoundError


def validate_period(start: datetime, end: datetime) -> None:
    """
    Raises:
        InvalidRentalPeriodError: If end is not strictly after start
    """
    if end <= start:
        raise InvalidRentalPeriodError()


def find_conflicting_rentals(
    *,
    product_id: UUID,
    start: datetime,
    end: datetime
) -> QuerySet[Rental]:
    """
    Blocking rentals of a product whose period overlaps ``[start, end]``.

    Boundaries are inclusive: a rental ending exactly when the candidate
    starts is a conflict.
    """
    return Rental.objects.filter(
        product_id=product_id,
        status__in=BLOCKING_STATUSES,
        rental_period_start__lte=end,
        rental_period_end__gte=start,
    ).order_by('rental_period_start')


def check_availability(*, product_id: UUID, start: datetime, end: datetime) -> dict:
    """
    Check whether a product can be booked for a period.

    Args:
        product_id: Product UUID
        start: Candidate period start
        end: Candidate period end

    Returns:
        ``{'available': bool, 'conflicting_rentals': [Rental, ...]}``.
        A product that is not active is never available and reports no
        conflicts.

    Raises:
        InvalidRentalPeriodError: If end is not after start
        RentalProductNotFoundError: If product doesn't exist
    """
    validate_period(start, end)

    product_status = (
        Product.objects
        .filter(id=product_id)
        .values_list('status', flat=True)
        .first()
    )
    if product_status is None:
        raise RentalProductNotFoundError()

    if product_status != ProductStatus.ACTIVE:
        return {'available': False, 'conflicting_rentals': []}

    conflicts = list(find_conflicting_rentals(product_id=product_id, start=start, end=end))
    return {'available': not conflicts, 'conflicting_rentals': conflicts}
