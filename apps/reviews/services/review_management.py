"""Review management service - creating product and user reviews."""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Avg, Count, QuerySet
from django.contrib.auth import get_user_model

from apps.notifications.models import NotificationCategory
from apps.notifications.services import notify
from apps.products.models import Product, ProductStatus
from apps.rentals.models import Rental
from apps.reviews.models import ProductReview, ReviewStatus, UserReview, UserReviewType
from .exceptions import (
    DuplicateReviewError,
    InvalidRatingError,
    InvalidReviewTypeError,
    ReviewedProductNotFoundError,
    ReviewedRentalNotFoundError,
    UnauthorizedReviewError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


def _validate_rating(rating: int) -> None:
    if not (1 <= rating <= 5):
        raise InvalidRatingError()


def refresh_user_rating(user: User) -> None:
    """Recompute a user's ``avg_rating`` / ``total_reviews`` from active reviews."""
    aggregates = UserReview.objects.filter(
        reviewed_user=user,
        status=ReviewStatus.ACTIVE,
    ).aggregate(avg=Avg('rating'), count=Count('id'))

    user.avg_rating = Decimal(str(round(aggregates['avg'] or 0, 2)))
    user.total_reviews = aggregates['count']
    user.save(update_fields=['avg_rating', 'total_reviews', 'updated_at'])


@transaction.atomic
def create_product_review(
    *,
    reviewer: User,
    product_id: UUID,
    rating: int,
    rental_id: Optional[UUID] = None,
    title: Optional[str] = None,
    content: Optional[str] = None
) -> ProductReview:
    """
    Review a product.

    This operation:
    1. Validates the rating and that the product is active
    2. Marks the review as verified if ``rental_id`` is the reviewer's
       rental of this product
    3. Creates the review (one per reviewer and product)
    4. Recomputes the product's aggregate rating
    5. Notifies the product owner

    Args:
        reviewer: User writing the review
        product_id: UUID of the product
        rating: 1 to 5
        rental_id: Optional rental backing the review
        title: Optional headline
        content: Optional text

    Returns:
        Created ProductReview

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        ReviewedProductNotFoundError: If product doesn't exist or isn't active
        DuplicateReviewError: If user already reviewed this product
    """
    _validate_rating(rating)

    try:
        product = Product.objects.select_for_update().select_related('owner').get(
            id=product_id,
            status=ProductStatus.ACTIVE,
        )
    except Product.DoesNotExist:
        raise ReviewedProductNotFoundError()

    is_verified_rental = bool(rental_id) and Rental.objects.filter(
        id=rental_id,
        product=product,
        renter=reviewer,
    ).exists()

    if ProductReview.objects.filter(product=product, reviewer=reviewer).exists():
        raise DuplicateReviewError()

    try:
        review = ProductReview.objects.create(
            product=product,
            reviewer=reviewer,
            rental_id=rental_id if is_verified_rental else None,
            rating=rating,
            title=title,
            content=content,
            is_verified_rental=is_verified_rental,
        )
    except IntegrityError:
        # Unique constraint caught a concurrent duplicate
        raise DuplicateReviewError()

    product.update_aggregate_rating()

    if product.owner_id != reviewer.id:
        notify(
            user=product.owner,
            title='New product review',
            message=f'{product.name} received a {rating}/5 review',
            category=NotificationCategory.REVIEW,
            data={'review_id': str(review.id), 'product_id': str(product.id)},
        )

    logger.info("Product %s reviewed by %s (%d)", product.id, reviewer.id, rating)
    return review


@transaction.atomic
def create_user_review(
    *,
    reviewer: User,
    reviewed_user_id: UUID,
    rental_id: UUID,
    review_type: str,
    rating: int,
    title: Optional[str] = None,
    content: Optional[str] = None
) -> UserReview:
    """
    Review the other party of a rental.

    ``review_type`` is the role of the reviewed user: the product owner
    writes ``renter`` reviews about the renter, the renter writes
    ``owner`` reviews about the product owner.

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        InvalidReviewTypeError: If review_type is not renter/owner
        ReviewedRentalNotFoundError: If rental doesn't exist
        UnauthorizedReviewError: If the reviewer/reviewed pair doesn't match the rental
        DuplicateReviewError: If this review was already written
    """
    _validate_rating(rating)

    if review_type not in UserReviewType.values:
        raise InvalidReviewTypeError()

    try:
        rental = Rental.objects.select_related('product').get(id=rental_id)
    except Rental.DoesNotExist:
        raise ReviewedRentalNotFoundError()

    owner_id = rental.product.owner_id
    if review_type == UserReviewType.RENTER:
        can_review = reviewer.id == owner_id and reviewed_user_id == rental.renter_id
    else:
        can_review = reviewer.id == rental.renter_id and reviewed_user_id == owner_id

    if not can_review:
        raise UnauthorizedReviewError()

    duplicate_message = 'You have already reviewed this user for this rental'
    if UserReview.objects.filter(rental=rental, reviewer=reviewer, review_type=review_type).exists():
        raise DuplicateReviewError(duplicate_message)

    reviewed_user = User.objects.select_for_update().get(id=reviewed_user_id)

    try:
        review = UserReview.objects.create(
            reviewed_user=reviewed_user,
            reviewer=reviewer,
            rental=rental,
            review_type=review_type,
            rating=rating,
            title=title,
            content=content,
        )
    except IntegrityError:
        raise DuplicateReviewError(duplicate_message)

    refresh_user_rating(reviewed_user)

    notify(
        user=reviewed_user,
        title='New review',
        message=f'{reviewer.get_full_name()} rated you {rating}/5',
        category=NotificationCategory.REVIEW,
        data={'review_id': str(review.id), 'rental_id': str(rental.id)},
    )
    return review


def get_product_reviews(
    *,
    product_id: Optional[UUID] = None,
    reviewer_id: Optional[UUID] = None,
    rating: Optional[int] = None,
    status: Optional[str] = None
) -> QuerySet[ProductReview]:
    """Filter product reviews, newest first. Status defaults to active."""
    queryset = ProductReview.objects.select_related('reviewer').filter(
        status=status or ReviewStatus.ACTIVE
    )
    if product_id:
        queryset = queryset.filter(product_id=product_id)
    if reviewer_id:
        queryset = queryset.filter(reviewer_id=reviewer_id)
    if rating:
        queryset = queryset.filter(rating=rating)
    return queryset.order_by('-created_at')
