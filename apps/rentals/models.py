from django.db import models
from django.conf import settings
import uuid


class RentalStatus(models.TextChoices):
    REQUESTED = 'requested', 'Requested'
    CONFIRMED = 'confirmed', 'Confirmed'
    ACTIVE = 'active', 'Active'
    COMPLETED = 'completed', 'Completed'
    CANCELLED = 'cancelled', 'Cancelled'


# Rentals in these states occupy the product's calendar
BLOCKING_STATUSES = [
    RentalStatus.REQUESTED,
    RentalStatus.CONFIRMED,
    RentalStatus.ACTIVE,
]

ALLOWED_TRANSITIONS = {
    RentalStatus.REQUESTED: {RentalStatus.CONFIRMED, RentalStatus.CANCELLED},
    RentalStatus.CONFIRMED: {RentalStatus.ACTIVE, RentalStatus.CANCELLED},
    RentalStatus.ACTIVE: {RentalStatus.COMPLETED, RentalStatus.CANCELLED},
    RentalStatus.COMPLETED: set(),
    RentalStatus.CANCELLED: set(),
}


class Rental(models.Model):
    """
    A renter's booking of one product for ``[rental_period_start, rental_period_end)``.

    The product owner moves it through the lifecycle; both parties may
    edit the pickup and return notes.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        related_name='rentals'
    )
    renter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='rentals'
    )
    rental_period_start = models.DateTimeField()
    rental_period_end = models.DateTimeField()
    status = models.CharField(
        max_length=20,
        choices=RentalStatus.choices,
        default=RentalStatus.REQUESTED
    )
    pickup_notes = models.TextField(blank=True, null=True)
    return_notes = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rentals'
        ordering = ['-created_at']
        indexes = [
            models.Index(
                fields=['product', 'status', 'rental_period_start'],
                name='rentals_product_period_idx'
            ),
            models.Index(fields=['renter', '-created_at'], name='rentals_renter_idx'),
        ]

    def __str__(self):
        return f"{self.product} for {self.renter} ({self.status})"

    def can_transition_to(self, new_status):
        if new_status == self.status:
            return True
        return new_status in ALLOWED_TRANSITIONS.get(self.status, set())
