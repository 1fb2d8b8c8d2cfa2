from decimal import Decimal

from django.test import TestCase

from products.models import Product


class ProductModelTest(TestCase):
    """Test cases for Product model"""

    def setUp(self):
        self.product = Product.objects.create(
            name="Widget",
            price=Decimal("9.99")
        )

    def test_product_creation(self):
        """Test product is created with a database-assigned id"""
        self.assertIsNotNone(self.product.id)
        self.assertEqual(self.product.name, "Widget")
        self.assertEqual(self.product.price, Decimal("9.99"))

    def test_product_str(self):
        """Test product string representation"""
        self.assertEqual(str(self.product), "Widget (9.99)")

    def test_defaults(self):
        """Test name and price defaults"""
        product = Product.objects.create()
        product.refresh_from_db()
        self.assertEqual(product.name, "")
        self.assertEqual(product.price, Decimal("0.00"))

    def test_price_is_exact(self):
        """Test decimal prices survive a round trip without drift"""
        product = Product.objects.create(name="Gadget", price=Decimal("0.10") + Decimal("0.20"))
        product.refresh_from_db()
        self.assertEqual(product.price, Decimal("0.30"))

    def test_ordering_by_insertion(self):
        """Test products are listed in insertion order"""
        second = Product.objects.create(name="Second", price=Decimal("1.00"))
        third = Product.objects.create(name="Third", price=Decimal("2.00"))
        self.assertEqual(
            list(Product.objects.all()),
            [self.product, second, third]
        )
