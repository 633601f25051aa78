from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class ProductStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    INACTIVE = 'inactive', 'Inactive'
    REJECTED = 'rejected', 'Rejected'
    DELETED = 'deleted', 'Deleted'


class Category(models.Model):
    """Product category, optionally nested under a parent."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    parent_category = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='subcategories'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name


class Tag(models.Model):
    """Free-form product tag, stored lowercased."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50, unique=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'tags'
        ordering = ['name']

    def __str__(self):
        return self.name


class Product(models.Model):
    """An item an owner offers for rent at a daily price."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='products'
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name='products'
    )
    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField(blank=True)

    # Pricing
    daily_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    deposit_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    insurance_required = models.BooleanField(default=False)

    specifications = models.JSONField(default=dict, blank=True)
    address = models.JSONField(default=dict, blank=True)
    tags = models.ManyToManyField(Tag, related_name='products', blank=True)

    # Reputation (denormalized from product reviews)
    avg_rating = models.DecimalField(max_digits=3, decimal_places=2, default=Decimal('0.00'))
    total_reviews = models.PositiveIntegerField(default=0)

    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices,
        default=ProductStatus.ACTIVE,
        db_index=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='products_status_created_idx'),
            models.Index(fields=['category', 'status'], name='products_category_idx'),
            models.Index(fields=['owner'], name='products_owner_idx'),
            models.Index(fields=['daily_price'], name='products_price_idx'),
        ]

    def __str__(self):
        return self.name

    @property
    def is_rentable(self):
        return self.status == ProductStatus.ACTIVE

    def update_aggregate_rating(self):
        from django.db.models import Avg, Count
        aggregates = self.reviews.filter(status='active').aggregate(avg=Avg('rating'), count=Count('id'))
        self.avg_rating = Decimal(str(round(aggregates['avg'] or 0, 2)))
        self.total_reviews = aggregates['count']
        self.save(update_fields=['avg_rating', 'total_reviews', 'updated_at'])


class ProductImage(models.Model):
    """Image URL attached to a product, in display order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='images')
    image_url = models.URLField(max_length=500)
    position = models.PositiveSmallIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_images'
        ordering = ['position', 'created_at']

    def __str__(self):
        return f"{self.product.name} #{self.position}"
