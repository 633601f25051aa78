"""
Reviews service layer.

Exports:
- Review management: create_product_review, create_user_review, get_product_reviews
- Statistics: get_product_review_stats, refresh_user_rating
"""

from .review_management import (
    create_product_review,
    create_user_review,
    get_product_reviews,
    refresh_user_rating,
)
from .statistics import get_product_review_stats
from .exceptions import (
    ReviewsServiceError,
    InvalidRatingError,
    InvalidReviewTypeError,
    ReviewedProductNotFoundError,
    ReviewedRentalNotFoundError,
    DuplicateReviewError,
    UnauthorizedReviewError,
)

__all__ = [
    'create_product_review',
    'create_user_review',
    'get_product_reviews',
    'refresh_user_rating',
    'get_product_review_stats',
    'ReviewsServiceError',
    'InvalidRatingError',
    'InvalidReviewTypeError',
    'ReviewedProductNotFoundError',
    'ReviewedRentalNotFoundError',
    'DuplicateReviewError',
    'UnauthorizedReviewError',
]
