"""Product search and filtering service."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db.models import Q, QuerySet

from ..models import Product, ProductStatus


def search_products(
    *,
    search: Optional[str] = None,
    category_id: Optional[UUID] = None,
    owner_id: Optional[UUID] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None
) -> QuerySet[Product]:
    """
    Search and filter active products, newest first.

    Args:
        search: Matched against name and description
        category_id: Filter by category
        owner_id: Filter by owner
        min_price: Minimum daily price (inclusive)
        max_price: Maximum daily price (inclusive)

    Returns:
        Filtered QuerySet of Product
    """
    queryset = (
        Product.objects
        .filter(status=ProductStatus.ACTIVE)
        .select_related('owner', 'category')
        .prefetch_related('tags', 'images')
    )

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(description__icontains=search)
        )

    if category_id:
        queryset = queryset.filter(category_id=category_id)

    if owner_id:
        queryset = queryset.filter(owner_id=owner_id)

    if min_price is not None:
        queryset = queryset.filter(daily_price__gte=min_price)

    if max_price is not None:
        queryset = queryset.filter(daily_price__lte=max_price)

    return queryset.order_by('-created_at')
