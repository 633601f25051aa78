"""Statistics service - review aggregations."""

from uuid import UUID

from django.db.models import Avg, Count, Q

from apps.reviews.models import ProductReview, ReviewStatus


def get_product_review_stats(*, product_id: UUID) -> dict:
    """
    Rating summary of a product's active reviews.

    Unknown products simply have no reviews.

    Returns:
        Dictionary with:
        - product_id: UUID
        - average_rating: float, 0.0 without reviews
        - total_reviews: int
        - rating_distribution: dict mapping "1".."5" to counts

    Example:
        >>> get_product_review_stats(product_id=product.id)['rating_distribution']
        {'1': 0, '2': 0, '3': 1, '4': 2, '5': 7}
    """
    stars = range(1, 6)
    aggregates = ProductReview.objects.filter(
        product_id=product_id,
        status=ReviewStatus.ACTIVE,
    ).aggregate(
        avg=Avg('rating'),
        total=Count('id'),
        **{f'rating_{i}': Count('id', filter=Q(rating=i)) for i in stars},
    )

    return {
        'product_id': product_id,
        'average_rating': round(float(aggregates['avg'] or 0), 2),
        'total_reviews': aggregates['total'],
        'rating_distribution': {str(i): aggregates[f'rating_{i}'] for i in stars},
    }
