from django.urls import path

from .views import ProductViewSet

app_name = 'products'

# Verb-to-handler tables, bound once at import
product_list = ProductViewSet.as_view({
    'get': 'list',
    'post': 'create',
})
product_detail = ProductViewSet.as_view({
    'get': 'retrieve',
    'put': 'update',
    'delete': 'destroy',
})

urlpatterns = [
    path('products', product_list, name='product-list'),
    path('products/<int:pk>', product_detail, name='product-detail'),
]

"""
Available endpoints:

PRODUCTS:
- GET    /products        - List all products
- POST   /products        - Create a new product
- GET    /products/{id}   - Get product details
- PUT    /products/{id}   - Replace a product (payload id must match)
- DELETE /products/{id}   - Delete a product

DOCUMENTATION:
- GET    /api/schema/             - OpenAPI schema
- GET    /api/schema/swagger-ui/  - Swagger UI
- GET    /api/schema/redoc/       - ReDoc
"""
