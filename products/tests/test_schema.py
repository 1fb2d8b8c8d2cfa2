from django.test import TestCase
from rest_framework import status


class APIDocumentationTest(TestCase):
    """Test cases for the generated API documentation"""

    def test_schema_lists_product_paths(self):
        response = self.client.get('/api/schema/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        content = response.content.decode()
        self.assertIn('/products/{id}', content)
        self.assertIn('Product Catalog API', content)

    def test_swagger_ui(self):
        response = self.client.get('/api/schema/swagger-ui/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_redoc(self):
        response = self.client.get('/api/schema/redoc/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
