"""Product CRUD operations service."""

import logging
from decimal import Decimal
from typing import Optional, Any
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.subscriptions.models import UsageType
from apps.subscriptions.services import record_usage
from ..models import Category, Product, ProductImage, ProductStatus, Tag
from .exceptions import InvalidCategoryError, ProductNotFoundError, ProductPermissionError

User = get_user_model()
logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'name', 'description', 'daily_price', 'deposit_amount',
    'insurance_required', 'specifications', 'address',
]


def _get_category(category_id: UUID) -> Category:
    try:
        return Category.objects.get(id=category_id)
    except Category.DoesNotExist:
        raise InvalidCategoryError()


def _set_tags(product: Product, tag_names: list[str]) -> None:
    """Attach tags by name, creating missing ones."""
    tags = []
    for raw in tag_names:
        name = raw.strip().lower()
        if not name:
            continue
        tag, _ = Tag.objects.get_or_create(name=name)
        tags.append(tag)
    product.tags.set(tags)


def _set_images(product: Product, image_urls: list[str]) -> None:
    product.images.all().delete()
    ProductImage.objects.bulk_create([
        ProductImage(product=product, image_url=url, position=position)
        for position, url in enumerate(image_urls)
    ])


@transaction.atomic
def create_product(
    *,
    owner: User,
    name: str,
    category_id: UUID,
    daily_price: Decimal,
    description: str = '',
    deposit_amount: Decimal = Decimal('0.00'),
    insurance_required: bool = False,
    specifications: Optional[dict] = None,
    address: Optional[dict] = None,
    tags: Optional[list[str]] = None,
    images: Optional[list[str]] = None
) -> Product:
    """
    Create a new product listing.

    Args:
        owner: User listing the product
        name: Product name
        category_id: Category UUID (must exist)
        daily_price: Price per rental day
        description: Free-text description
        deposit_amount: Refundable deposit
        insurance_required: Whether renters must be insured
        specifications: Arbitrary JSON attributes
        address: Pickup address as JSON
        tags: Tag names (created on demand)
        images: Image URLs in display order

    Returns:
        Created Product instance

    Raises:
        InvalidCategoryError: If category doesn't exist
    """
    category = _get_category(category_id)

    product = Product.objects.create(
        owner=owner,
        category=category,
        name=name,
        description=description,
        daily_price=daily_price,
        deposit_amount=deposit_amount,
        insurance_required=insurance_required,
        specifications=specifications or {},
        address=address or {},
        status=ProductStatus.ACTIVE,
    )

    if tags:
        _set_tags(product, tags)
    if images:
        _set_images(product, images)

    record_usage(user=owner, usage_type=UsageType.LISTINGS)

    logger.info("Product %s listed by user %s", product.id, owner.id)
    return product


def get_product(*, product_id: UUID, viewer: Optional[User] = None) -> Product:
    """
    Retrieve a product by ID.

    Deleted products are never returned. Products that are not active are
    only visible to their owner and to staff.

    Raises:
        ProductNotFoundError: If product doesn't exist or isn't visible
    """
    try:
        product = (
            Product.objects
            .select_related('owner', 'category')
            .prefetch_related('tags', 'images')
            .exclude(status=ProductStatus.DELETED)
            .get(id=product_id)
        )
    except Product.DoesNotExist:
        raise ProductNotFoundError()

    if product.status != ProductStatus.ACTIVE:
        is_owner = viewer is not None and viewer.is_authenticated and viewer.id == product.owner_id
        is_staff = viewer is not None and viewer.is_authenticated and viewer.is_staff
        if not (is_owner or is_staff):
            raise ProductNotFoundError()

    return product


def _get_owned_product_for_update(product_id: UUID, user: User, message: str) -> Product:
    try:
        product = (
            Product.objects
            .select_for_update()
            .exclude(status=ProductStatus.DELETED)
            .get(id=product_id)
        )
    except Product.DoesNotExist:
        raise ProductNotFoundError()

    if product.owner_id != user.id:
        raise ProductPermissionError(message)

    return product


@transaction.atomic
def update_product(
    *,
    product_id: UUID,
    user: User,
    data: dict[str, Any]
) -> Product:
    """
    Partially update a product. Only the owner may do this.

    Args:
        product_id: Product UUID
        user: User performing the update
        data: Fields to update; ``category_id``, ``tags``, ``images`` and
            ``status`` (active/inactive) are handled specially

    Returns:
        Updated Product instance

    Raises:
        ProductNotFoundError: If product doesn't exist
        ProductPermissionError: If user is not the owner
        InvalidCategoryError: If the new category doesn't exist
    """
    product = _get_owned_product_for_update(
        product_id, user, 'Not authorized to update this product'
    )

    for field in UPDATABLE_FIELDS:
        if field in data:
            setattr(product, field, data[field])

    if 'category_id' in data:
        product.category = _get_category(data['category_id'])

    # Owners can pause and resume their listing, not un-reject it
    if 'status' in data and product.status in (ProductStatus.ACTIVE, ProductStatus.INACTIVE):
        product.status = data['status']

    product.save()

    if 'tags' in data:
        _set_tags(product, data['tags'])
    if 'images' in data:
        _set_images(product, data['images'])

    return product


@transaction.atomic
def delete_product(*, product_id: UUID, user: User) -> None:
    """
    Soft delete a product (status becomes ``deleted``).

    Raises:
        ProductNotFoundError: If product doesn't exist
        ProductPermissionError: If user is not the owner
    """
    product = _get_owned_product_for_update(
        product_id, user, 'Not authorized to delete this product'
    )
    product.status = ProductStatus.DELETED
    product.save(update_fields=['status', 'updated_at'])
    logger.info("Product %s deleted by owner", product.id)


@transaction.atomic
def set_product_status(*, product_id: UUID, status: str) -> Product:
    """
    Moderation: force a product's status.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError()

    product.status = status
    product.save(update_fields=['status', 'updated_at'])
    logger.info("Product %s status set to %s", product.id, status)
    return product


def list_categories():
    return Category.objects.select_related('parent_category').order_by('name')


@transaction.atomic
def create_category(
    *,
    name: str,
    description: str = '',
    parent_category_id: Optional[UUID] = None
) -> Category:
    """
    Create a category.

    Raises:
        InvalidCategoryError: If the parent category doesn't exist
    """
    parent = None
    if parent_category_id:
        try:
            parent = Category.objects.get(id=parent_category_id)
        except Category.DoesNotExist:
            raise InvalidCategoryError('Invalid parent_category_id')

    return Category.objects.create(
        name=name,
        description=description,
        parent_category=parent,
    )
