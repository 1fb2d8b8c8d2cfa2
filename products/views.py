from django.urls import reverse
from rest_framework import viewsets, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse

from .exceptions import ProductIdMismatch, ProductNotFound
from .serializers import ProductSerializer
from .services import get_product_service


@extend_schema_view(
    list=extend_schema(
        tags=['Products'],
        summary='List all products',
        description='Retrieve every product in insertion order.',
        responses={200: ProductSerializer(many=True)},
    ),
    retrieve=extend_schema(
        tags=['Products'],
        summary='Get product details',
        description='Retrieve a single product by id.',
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(description='Product not found'),
        },
    ),
    create=extend_schema(
        tags=['Products'],
        summary='Create a new product',
        description='Create a product. The id is assigned by the server and returned in the Location header.',
        request=ProductSerializer,
        responses={201: ProductSerializer},
    ),
    update=extend_schema(
        tags=['Products'],
        summary='Update product',
        description='Replace a product. The payload id must match the id in the URL.',
        request=ProductSerializer,
        responses={
            204: OpenApiResponse(description='Product updated'),
            400: OpenApiResponse(description='Payload id does not match the URL'),
            404: OpenApiResponse(description='Product not found'),
        },
    ),
    destroy=extend_schema(
        tags=['Products'],
        summary='Delete product',
        description='Delete a product by id.',
        responses={
            204: OpenApiResponse(description='Product deleted'),
            404: OpenApiResponse(description='Product not found'),
        },
    ),
)
class ProductViewSet(viewsets.ViewSet):
    """
    ViewSet for Product CRUD operations.

    Handlers are bound to verbs explicitly in products/urls.py:
    - list: GET /products
    - retrieve: GET /products/{id}
    - create: POST /products
    - update: PUT /products/{id}
    - destroy: DELETE /products/{id}
    """
    serializer_class = ProductSerializer

    def get_service(self):
        return get_product_service()

    def list(self, request):
        products = self.get_service().list_products()
        serializer = self.serializer_class(products, many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        try:
            product = self.get_service().get_product(pk)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)

        serializer = self.serializer_class(product)
        return Response(serializer.data)

    def create(self, request):
        """
        Create a product and point the caller at its Get address.
        """
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = self.get_service().create_product(serializer.validated_data)

        location = request.build_absolute_uri(
            reverse('products:product-detail', kwargs={'pk': product.pk})
        )
        return Response(
            self.serializer_class(product).data,
            status=status.HTTP_201_CREATED,
            headers={'Location': location}
        )

    def update(self, request, pk=None):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        # ConcurrencyConflict propagates as a server error
        try:
            self.get_service().update_product(pk, serializer.validated_data)
        except ProductIdMismatch:
            return Response(status=status.HTTP_400_BAD_REQUEST)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request, pk=None):
        try:
            self.get_service().delete_product(pk)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
