# catalog_service/store.py

"""
In-memory product store.
Owns every product record and the id sequence for the lifetime of the process.
"""

import threading
from typing import Dict, List, Optional

from .models import Product, ProductCandidate


class ProductStore:
    """
    Process-local owner of all product records, indexed by id.

    A single lock guards both the records and the id counter, so every
    operation is atomic with respect to the others. Records handed out are
    always copies; callers can only change stored state through `update`.
    """

    def __init__(self):
        self._lock = threading.Lock()
        # dicts keep insertion order, which `list_all` relies on
        self._products: Dict[int, Product] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def insert(self, candidate: ProductCandidate) -> Product:
        """Stamps the next id on the candidate's fields and stores the record."""
        with self._lock:
            product = Product(
                id=self._next_id,
                name=candidate.name,
                description=candidate.description,
                price=candidate.price,
                quantity=candidate.quantity,
                category=candidate.category,
            )
            self._next_id += 1
            self._products[product.id] = product
            return product.copy()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            product = self._products.get(product_id)
            return product.copy() if product is not None else None

    def list_all(self) -> List[Product]:
        """Point-in-time snapshot of every record, in insertion order."""
        with self._lock:
            return [product.copy() for product in self._products.values()]

    def update(self, product_id: int, candidate: ProductCandidate) -> Optional[Product]:
        """
        Replaces all mutable fields of an existing record.
        Returns None when no record has `product_id`.
        """
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return None
            product.name = candidate.name
            product.description = candidate.description
            product.price = candidate.price
            product.quantity = candidate.quantity
            product.category = candidate.category
            return product.copy()

    def delete_by_id(self, product_id: int) -> bool:
        # the counter is left alone so deleted ids are never handed out again
        with self._lock:
            return self._products.pop(product_id, None) is not None
