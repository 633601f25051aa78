"""Rental booking and lifecycle services."""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Q, QuerySet
from django.contrib.auth import get_user_model

from apps.notifications.models import NotificationCategory
from apps.notifications.services import notify
from apps.products.models import Product, ProductStatus
from apps.subscriptions.models import UsageType
from apps.subscriptions.services import record_usage
from ..models import Rental, RentalStatus
from .availability import find_conflicting_rentals, validate_period
from .exceptions import (
    InvalidStatusTransitionError,
    OwnProductRentalError,
    ProductNotRentableError,
    RentalConflictError,
    RentalNotFoundError,
    RentalPermissionError,
    RentalProductNotFoundError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def create_rental(
    *,
    renter: User,
    product_id: UUID,
    rental_period_start: datetime,
    rental_period_end: datetime,
    pickup_notes: Optional[str] = None,
    return_notes: Optional[str] = None
) -> Rental:
    """
    Request a rental of a product.

    The product row is locked for the rest of the transaction, so
    concurrent requests for the same product run the availability check
    one at a time and overlapping bookings cannot both be inserted.

    Args:
        renter: User making the request
        product_id: Product UUID
        rental_period_start: Period start
        rental_period_end: Period end (after start)
        pickup_notes: Optional pickup instructions
        return_notes: Optional return instructions

    Returns:
        Created Rental in ``requested`` status

    Raises:
        InvalidRentalPeriodError: If end is not after start
        RentalProductNotFoundError: If product doesn't exist
        ProductNotRentableError: If product is not active
        OwnProductRentalError: If renter owns the product
        RentalConflictError: If the period overlaps a blocking rental
    """
    validate_period(rental_period_start, rental_period_end)

    try:
        product = (
            Product.objects
            .select_for_update()
            .select_related('owner')
            .get(id=product_id)
        )
    except Product.DoesNotExist:
        raise RentalProductNotFoundError()

    if product.status != ProductStatus.ACTIVE:
        raise ProductNotRentableError()

    if product.owner_id == renter.id:
        raise OwnProductRentalError()

    if find_conflicting_rentals(
        product_id=product.id,
        start=rental_period_start,
        end=rental_period_end,
    ).exists():
        raise RentalConflictError()

    rental = Rental.objects.create(
        product=product,
        renter=renter,
        rental_period_start=rental_period_start,
        rental_period_end=rental_period_end,
        pickup_notes=pickup_notes,
        return_notes=return_notes,
    )

    record_usage(user=renter, usage_type=UsageType.RENTALS)
    notify(
        user=product.owner,
        title='New rental request',
        message=f'{renter.get_full_name()} requested to rent {product.name}',
        category=NotificationCategory.RENTAL,
        data={'rental_id': str(rental.id), 'product_id': str(product.id)},
    )

    logger.info("Rental %s requested for product %s by %s", rental.id, product.id, renter.id)
    return rental


def _visible_rentals(user: User) -> QuerySet[Rental]:
    return (
        Rental.objects
        .filter(Q(renter=user) | Q(product__owner=user))
        .select_related('product', 'renter')
    )


def get_rental(*, rental_id: UUID, user: User) -> Rental:
    """
    Get a rental visible to the user as renter or product owner.

    Raises:
        RentalNotFoundError: If it doesn't exist or the user is not a party
    """
    try:
        return _visible_rentals(user).get(id=rental_id)
    except Rental.DoesNotExist:
        raise RentalNotFoundError()


def get_user_rentals(*, user: User, status: Optional[str] = None) -> QuerySet[Rental]:
    """Rentals where the user is renter or owner, newest first."""
    queryset = _visible_rentals(user)
    if status:
        queryset = queryset.filter(status=status)
    return queryset.order_by('-created_at')


@transaction.atomic
def update_rental(
    *,
    rental_id: UUID,
    user: User,
    status: Optional[str] = None,
    pickup_notes: Optional[str] = None,
    return_notes: Optional[str] = None
) -> Rental:
    """
    Update a rental's status and/or notes.

    Only the product owner may change the status, and only along the
    lifecycle. Either party may edit notes. Setting the current status
    again is accepted and changes nothing.

    Raises:
        RentalNotFoundError: If the user is not a party to the rental
        RentalPermissionError: If a renter tries to change the status
        InvalidStatusTransitionError: If the lifecycle forbids the change
    """
    try:
        rental = (
            _visible_rentals(user)
            .select_for_update(of=('self',))
            .get(id=rental_id)
        )
    except Rental.DoesNotExist:
        raise RentalNotFoundError()

    update_fields = []
    previous_status = rental.status

    if status is not None:
        if rental.product.owner_id != user.id:
            raise RentalPermissionError()
        if not rental.can_transition_to(status):
            raise InvalidStatusTransitionError(
                f'Invalid status transition from {rental.status} to {status}'
            )
        if status != rental.status:
            rental.status = status
            update_fields.append('status')

    if pickup_notes is not None:
        rental.pickup_notes = pickup_notes
        update_fields.append('pickup_notes')
    if return_notes is not None:
        rental.return_notes = return_notes
        update_fields.append('return_notes')

    if update_fields:
        rental.save(update_fields=update_fields + ['updated_at'])

    if 'status' in update_fields:
        notify(
            user=rental.renter,
            title='Rental status updated',
            message=f'Your rental of {rental.product.name} is now {rental.status}',
            category=NotificationCategory.RENTAL,
            data={'rental_id': str(rental.id), 'status': rental.status},
        )
        logger.info("Rental %s: %s -> %s", rental.id, previous_status, rental.status)

    return rental
