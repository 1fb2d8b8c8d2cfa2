"""
Persistence for products.

ProductStore is the capability the service depends on; DjangoProductStore
implements it on top of the Django ORM. A store reports a write that hit
no row by raising ConcurrencyConflict instead of failing silently.
"""

from abc import ABC, abstractmethod

from django.db import transaction

from .exceptions import ConcurrencyConflict
from .models import Product


class ProductStore(ABC):
    """Abstract store for Product records."""

    @abstractmethod
    def all(self):
        """Return every product in insertion order."""

    @abstractmethod
    def get(self, product_id):
        """Return the product with this id, or None if it does not exist."""

    @abstractmethod
    def exists(self, product_id):
        """Return True if a product with this id is stored."""

    @abstractmethod
    def add(self, product):
        """Persist a new product and return it with its assigned id."""

    @abstractmethod
    def update(self, product):
        """Replace the stored record with ``product``; raise ConcurrencyConflict if it is gone."""

    @abstractmethod
    def remove(self, product):
        """Delete the stored record; raise ConcurrencyConflict if it is gone."""


class DjangoProductStore(ProductStore):
    """ProductStore backed by the default database through the ORM."""

    def __init__(self, using=None):
        self.using = using

    @property
    def queryset(self):
        return Product.objects.using(self.using).all()

    def all(self):
        return list(self.queryset)

    def get(self, product_id):
        return self.queryset.filter(pk=product_id).first()

    def exists(self, product_id):
        return self.queryset.filter(pk=product_id).exists()

    def add(self, product):
        # The database assigns the id
        product.pk = None
        product.save(using=self.using, force_insert=True)
        return product

    def update(self, product):
        values = {
            field.attname: getattr(product, field.attname)
            for field in Product._meta.concrete_fields
            if not field.primary_key
        }
        with transaction.atomic(using=self.using):
            updated = self.queryset.filter(pk=product.pk).update(**values)
            if not updated:
                raise ConcurrencyConflict(product.pk)
        return product

    def remove(self, product):
        with transaction.atomic(using=self.using):
            deleted, _ = self.queryset.filter(pk=product.pk).delete()
            if not deleted:
                raise ConcurrencyConflict(product.pk)
