from rest_framework import serializers
from .models import Category, Product, ProductStatus


class CategorySerializer(serializers.ModelSerializer):
    category_id = serializers.UUIDField(source='id', read_only=True)
    parent_category_id = serializers.UUIDField(allow_null=True, required=False)

    class Meta:
        model = Category
        fields = ['category_id', 'name', 'description', 'parent_category_id', 'created_at']
        read_only_fields = ['category_id', 'created_at']


class ProductSerializer(serializers.ModelSerializer):
    """Full product representation."""

    product_id = serializers.UUIDField(source='id', read_only=True)
    owner_id = serializers.UUIDField(read_only=True)
    category_id = serializers.UUIDField(read_only=True)
    category_name = serializers.CharField(source='category.name', read_only=True)
    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field='name')
    images = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'product_id',
            'owner_id',
            'category_id',
            'category_name',
            'name',
            'description',
            'daily_price',
            'deposit_amount',
            'insurance_required',
            'specifications',
            'address',
            'tags',
            'images',
            'avg_rating',
            'total_reviews',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_images(self, obj) -> list[str]:
        return [image.image_url for image in obj.images.all()]


class ProductCreateSerializer(serializers.Serializer):
    """Input serializer for product creation."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    category_id = serializers.UUIDField()
    daily_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    deposit_amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, default=0)
    insurance_required = serializers.BooleanField(required=False, default=False)
    specifications = serializers.JSONField(required=False, default=dict)
    address = serializers.JSONField(required=False, default=dict)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False, default=list)
    images = serializers.ListField(child=serializers.URLField(max_length=500), required=False, default=list)


class ProductUpdateSerializer(serializers.Serializer):
    """Input serializer for product updates. Every field is optional."""

    name = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    category_id = serializers.UUIDField(required=False)
    daily_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    deposit_amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    insurance_required = serializers.BooleanField(required=False)
    specifications = serializers.JSONField(required=False)
    address = serializers.JSONField(required=False)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    images = serializers.ListField(child=serializers.URLField(max_length=500), required=False)
    status = serializers.ChoiceField(
        choices=[ProductStatus.ACTIVE, ProductStatus.INACTIVE],
        required=False,
    )


class ProductFilterSerializer(serializers.Serializer):
    """Query parameters for product listing."""

    search = serializers.CharField(required=False, allow_blank=True)
    category_id = serializers.UUIDField(required=False)
    owner_id = serializers.UUIDField(required=False)
    min_price = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    max_price = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)

    def validate(self, attrs):
        min_price = attrs.get('min_price')
        max_price = attrs.get('max_price')
        if min_price is not None and max_price is not None and min_price > max_price:
            raise serializers.ValidationError('min_price must not exceed max_price')
        return attrs
