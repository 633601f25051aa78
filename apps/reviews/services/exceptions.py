"""Domain exceptions for reviews app."""

from apps.core.exceptions import ConflictError, ForbiddenError, InvalidStateError, NotFoundError


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class InvalidRatingError(ReviewsServiceError, InvalidStateError):
    default_detail = 'Rating must be between 1 and 5'


class InvalidReviewTypeError(ReviewsServiceError, InvalidStateError):
    default_detail = "Review type must be 'renter' or 'owner'"


class ReviewedProductNotFoundError(ReviewsServiceError, NotFoundError):
    """Product does not exist or is not active."""
    default_detail = 'Product not found'


class ReviewedRentalNotFoundError(ReviewsServiceError, NotFoundError):
    default_detail = 'Rental not found'


class DuplicateReviewError(ReviewsServiceError, ConflictError):
    """User already reviewed this product."""
    default_detail = 'You have already reviewed this product'


class UnauthorizedReviewError(ReviewsServiceError, ForbiddenError):
    """User was not a party to the rental in the claimed role."""
    default_detail = 'You are not authorized to review this user'
