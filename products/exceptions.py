"""
Exception classes for the product catalog.

Views translate ProductNotFound and ProductIdMismatch into empty 404 and
400 responses. ConcurrencyConflict is raised by stores and only handled
by the service when the conflicting record has been deleted.
"""


class ProductError(Exception):
    """Base exception for product catalog errors"""
    pass


class ProductNotFound(ProductError):
    """Raised when no product exists for the requested id"""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class ProductIdMismatch(ProductError):
    """
    Raised when an update addresses one id in the URL but carries a
    different id in the payload.
    """

    def __init__(self, path_id, payload_id):
        self.path_id = path_id
        self.payload_id = payload_id
        super().__init__(
            f"Payload id {payload_id!r} does not match product {path_id}"
        )


class ConcurrencyConflict(ProductError):
    """
    Raised by a store when a write affected no row because the record
    changed after it was read.
    """

    def __init__(self, product_id, message=None):
        self.product_id = product_id
        super().__init__(
            message or f"Write to product {product_id} affected no rows"
        )
