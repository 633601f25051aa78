from rest_framework import generics, viewsets, status
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from apps.core.pagination import PagePagination
from .serializers import (
    CategorySerializer,
    ProductSerializer,
    ProductCreateSerializer,
    ProductUpdateSerializer,
    ProductFilterSerializer,
)
from .services import (
    create_product,
    get_product,
    update_product,
    delete_product,
    search_products,
    list_categories,
    create_category,
)


class ProductPagination(PagePagination):
    results_key = 'products'


@extend_schema_view(
    list=extend_schema(
        parameters=[
            OpenApiParameter('search', str, description='Match name or description'),
            OpenApiParameter('category_id', str),
            OpenApiParameter('owner_id', str),
            OpenApiParameter('min_price', float),
            OpenApiParameter('max_price', float),
            OpenApiParameter('page', int),
            OpenApiParameter('per_page', int, description='Max 100'),
        ],
        description="List active products, newest first.",
    ),
    create=extend_schema(request=ProductCreateSerializer, responses={201: ProductSerializer}),
    update=extend_schema(request=ProductUpdateSerializer, responses={200: ProductSerializer}),
    partial_update=extend_schema(request=ProductUpdateSerializer, responses={200: ProductSerializer}),
)
@extend_schema(tags=['products'])
class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for product listings.

    list: Active products (public)
    create: List a new product
    retrieve: Get one product (public)
    update/partial_update: Owner only
    destroy: Soft delete, owner only
    """

    serializer_class = ProductSerializer
    pagination_class = ProductPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_permissions(self):
        """Reads are public, writes need a logged-in user."""
        if self.action in ['list', 'retrieve']:
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_queryset(self):
        """Filter products using input serializer validation."""
        filter_serializer = ProductFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return search_products(**filter_serializer.validated_data)

    def retrieve(self, request, pk=None):
        product = get_product(product_id=pk, viewer=request.user)
        return Response(ProductSerializer(product).data)

    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = create_product(owner=request.user, **serializer.validated_data)

        return Response(
            ProductSerializer(get_product(product_id=product.id, viewer=request.user)).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, pk=None, partial=False):
        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        update_product(product_id=pk, user=request.user, data=serializer.validated_data)

        return Response(ProductSerializer(get_product(product_id=pk, viewer=request.user)).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        delete_product(product_id=pk, user=request.user)
        return Response({
            'product_id': pk,
            'message': 'Product deleted successfully',
        })


@extend_schema_view(
    get=extend_schema(description="List all categories ordered by name."),
    post=extend_schema(description="Create a category (staff only)."),
)
@extend_schema(tags=['products'])
class CategoryListCreateView(generics.ListCreateAPIView):
    """Categories are public to read and managed by staff."""

    serializer_class = CategorySerializer
    pagination_class = None

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAdminUser()]
        return [AllowAny()]

    def get_queryset(self):
        return list_categories()

    def perform_create(self, serializer):
        serializer.instance = create_category(**serializer.validated_data)
