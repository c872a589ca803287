# catalog_service/service.py

"""
Catalog Service.
Runs validation before any write, delegates to the product store, and turns
store misses into not-found outcomes.
"""

from .models import (
    NotFoundFailure,
    Outcome,
    ProductCandidate,
    Success,
    ValidationFailure,
)
from .store import ProductStore
from .validation import validate_product


class CatalogService:
    """Create, read, update and delete products held by a `ProductStore`."""

    def __init__(self, store: ProductStore):
        self._store = store

    @property
    def store(self) -> ProductStore:
        return self._store

    def create(self, candidate: ProductCandidate) -> Outcome:
        reason = validate_product(candidate)
        if reason is not None:
            return ValidationFailure(reason)
        return Success(self._store.insert(candidate))

    def get(self, product_id: int) -> Outcome:
        product = self._store.find_by_id(product_id)
        if product is None:
            return NotFoundFailure(product_id)
        return Success(product)

    def list_all(self) -> Outcome:
        return Success(self._store.list_all())

    def update(self, product_id: int, candidate: ProductCandidate) -> Outcome:
        """
        Validates the candidate with the same rules as `create`, then replaces
        every mutable field of the product. The id never changes.
        """
        reason = validate_product(candidate)
        if reason is not None:
            return ValidationFailure(reason)
        product = self._store.update(product_id, candidate)
        if product is None:
            return NotFoundFailure(product_id)
        return Success(product)

    def delete(self, product_id: int) -> Outcome:
        if not self._store.delete_by_id(product_id):
            return NotFoundFailure(product_id)
        return Success()
