from rest_framework import serializers
from apps.products.models import Product
from .models import Rental, RentalStatus


class RentalProductSerializer(serializers.ModelSerializer):
    """Product summary embedded in rental responses."""

    product_id = serializers.UUIDField(source='id', read_only=True)
    owner_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Product
        fields = ['product_id', 'name', 'daily_price', 'owner_id']
        read_only_fields = fields


class RentalSerializer(serializers.ModelSerializer):
    rental_id = serializers.UUIDField(source='id', read_only=True)
    product_id = serializers.UUIDField(read_only=True)
    renter_id = serializers.UUIDField(read_only=True)
    product = RentalProductSerializer(read_only=True)

    class Meta:
        model = Rental
        fields = [
            'rental_id',
            'product_id',
            'renter_id',
            'rental_period_start',
            'rental_period_end',
            'status',
            'pickup_notes',
            'return_notes',
            'created_at',
            'updated_at',
            'product',
        ]
        read_only_fields = fields


class RentalCreateSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    rental_period_start = serializers.DateTimeField()
    rental_period_end = serializers.DateTimeField()
    pickup_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    return_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class RentalUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RentalStatus.choices, required=False)
    pickup_notes = serializers.CharField(required=False, allow_blank=True)
    return_notes = serializers.CharField(required=False, allow_blank=True)


class RentalFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RentalStatus.choices, required=False)


class AvailabilityRequestSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()


class RentalConflictSerializer(serializers.ModelSerializer):
    rental_id = serializers.UUIDField(source='id', read_only=True)
    start_date = serializers.DateTimeField(source='rental_period_start', read_only=True)
    end_date = serializers.DateTimeField(source='rental_period_end', read_only=True)

    class Meta:
        model = Rental
        fields = ['rental_id', 'start_date', 'end_date', 'status']
        read_only_fields = fields


class AvailabilityResponseSerializer(serializers.Serializer):
    available = serializers.BooleanField()
    conflicting_rentals = RentalConflictSerializer(many=True)
