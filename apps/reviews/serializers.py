from rest_framework import serializers
from .models import ProductReview, ReviewStatus, UserReview


class ProductReviewSerializer(serializers.ModelSerializer):
    """Product review as listed, with the reviewer's display name."""

    product_id = serializers.UUIDField(read_only=True)
    reviewer_id = serializers.UUIDField(read_only=True)
    rental_id = serializers.UUIDField(read_only=True, allow_null=True)
    reviewer_name = serializers.SerializerMethodField()

    class Meta:
        model = ProductReview
        fields = [
            'id',
            'product_id',
            'reviewer_id',
            'reviewer_name',
            'rental_id',
            'rating',
            'title',
            'content',
            'is_verified_rental',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_reviewer_name(self, obj) -> str:
        return obj.reviewer.get_full_name()


class UserReviewSerializer(serializers.ModelSerializer):
    reviewed_user_id = serializers.UUIDField(read_only=True)
    reviewer_id = serializers.UUIDField(read_only=True)
    rental_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = UserReview
        fields = [
            'id',
            'reviewed_user_id',
            'reviewer_id',
            'rental_id',
            'review_type',
            'rating',
            'title',
            'content',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ProductReviewCreateSerializer(serializers.Serializer):
    """Input for reviewing a product. Rating range is checked by the service."""

    product_id = serializers.UUIDField()
    rental_id = serializers.UUIDField(required=False, allow_null=True)
    rating = serializers.IntegerField()
    title = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True)
    content = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class UserReviewCreateSerializer(serializers.Serializer):
    reviewed_user_id = serializers.UUIDField()
    rental_id = serializers.UUIDField()
    review_type = serializers.CharField(max_length=20)
    rating = serializers.IntegerField()
    title = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True)
    content = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class ProductReviewFilterSerializer(serializers.Serializer):
    product_id = serializers.UUIDField(required=False)
    reviewer_id = serializers.UUIDField(required=False)
    rating = serializers.IntegerField(required=False, min_value=1, max_value=5)
    status = serializers.ChoiceField(choices=ReviewStatus.choices, required=False)


class ProductReviewStatsSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    average_rating = serializers.FloatField()
    total_reviews = serializers.IntegerField()
    rating_distribution = serializers.DictField(child=serializers.IntegerField())
