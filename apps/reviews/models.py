from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class ReviewStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    HIDDEN = 'hidden', 'Hidden'


class UserReviewType(models.TextChoices):
    """Role of the reviewed user in the rental."""
    RENTER = 'renter', 'Renter'
    OWNER = 'owner', 'Owner'


class ProductReview(models.Model):
    """A user's rating of a product, optionally backed by a rental."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='reviews'
    )
    reviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='product_reviews'
    )
    rental = models.ForeignKey(
        'rentals.Rental',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='product_reviews'
    )
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    title = models.CharField(max_length=200, blank=True, null=True)
    content = models.TextField(blank=True, null=True)
    is_verified_rental = models.BooleanField(default=False)
    status = models.CharField(
        max_length=20,
        choices=ReviewStatus.choices,
        default=ReviewStatus.ACTIVE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'product_reviews'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['product', 'reviewer'],
                name='unique_product_review_per_user'
            ),
        ]
        indexes = [
            models.Index(fields=['product', 'status'], name='prodreviews_product_idx'),
            models.Index(fields=['reviewer', '-created_at'], name='prodreviews_reviewer_idx'),
        ]

    def __str__(self):
        return f"{self.reviewer} - {self.product} ({self.rating}★)"


class UserReview(models.Model):
    """Rating one rental party gives the other."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    reviewed_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='received_reviews'
    )
    reviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='given_user_reviews'
    )
    rental = models.ForeignKey(
        'rentals.Rental',
        on_delete=models.CASCADE,
        related_name='user_reviews'
    )
    review_type = models.CharField(max_length=20, choices=UserReviewType.choices)
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    title = models.CharField(max_length=200, blank=True, null=True)
    content = models.TextField(blank=True, null=True)
    status = models.CharField(
        max_length=20,
        choices=ReviewStatus.choices,
        default=ReviewStatus.ACTIVE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'user_reviews'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['rental', 'reviewer', 'review_type'],
                name='unique_user_review_per_rental'
            ),
        ]
        indexes = [
            models.Index(fields=['reviewed_user', 'status'], name='userreviews_reviewed_idx'),
        ]

    def __str__(self):
        return f"{self.reviewer} -> {self.reviewed_user} ({self.rating}★)"
