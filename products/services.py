"""
Product resource service.

Implements the five catalog operations against an injected ProductStore.
Each request builds its own service; there is no module-level store.
"""

import logging

from django.conf import settings
from django.utils.module_loading import import_string

from .exceptions import ConcurrencyConflict, ProductIdMismatch, ProductNotFound
from .models import Product

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, store):
        self.store = store

    def list_products(self):
        """Return all products in insertion order."""
        return list(self.store.all())

    def get_product(self, product_id):
        product = self.store.get(product_id)
        if product is None:
            logger.warning(f"Product {product_id} not found")
            raise ProductNotFound(product_id)
        return product

    def create_product(self, data):
        """
        Persist a new product.

        Any ``id`` in ``data`` is discarded; the store assigns one.
        """
        fields = {key: value for key, value in data.items() if key != 'id'}
        product = self.store.add(Product(**fields))
        logger.info(f"Created product {product.pk}")
        return product

    def update_product(self, product_id, data):
        """
        Replace every field of product ``product_id`` with ``data``.

        ``data['id']`` must equal ``product_id``. If the write hits no row,
        existence is checked again: a deleted record is reported as
        ProductNotFound, anything else re-raises the conflict.
        """
        payload_id = data.get('id')
        if payload_id != product_id:
            logger.warning(
                f"Rejected update of product {product_id}: payload id is {payload_id!r}"
            )
            raise ProductIdMismatch(product_id, payload_id)

        product = Product(**data)
        try:
            self.store.update(product)
        except ConcurrencyConflict:
            if not self.store.exists(product_id):
                logger.warning(f"Product {product_id} not found at update time")
                raise ProductNotFound(product_id)
            logger.error(f"Unresolved concurrency conflict updating product {product_id}")
            raise

        logger.info(f"Updated product {product_id}")

    def delete_product(self, product_id):
        product = self.get_product(product_id)
        try:
            self.store.remove(product)
        except ConcurrencyConflict:
            # Deleted by someone else between lookup and delete
            logger.warning(f"Product {product_id} vanished before delete")
            raise ProductNotFound(product_id)
        logger.info(f"Deleted product {product_id}")


def get_product_service():
    """Build a ProductService around the store named by PRODUCTS_STORE."""
    store_class = import_string(settings.PRODUCTS_STORE)
    return ProductService(store_class())
