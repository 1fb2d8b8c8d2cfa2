from decimal import Decimal

from django.db import models


class Product(models.Model):
    """
    Product in the catalog.
    The id is assigned by the database; price is fixed-point to keep
    monetary values exact.
    """
    name = models.TextField(
        blank=True,
        default='',
        help_text="Product name"
    )
    price = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Product price"
    )

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.price})"
