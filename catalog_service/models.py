# catalog_service/models.py

"""
Domain models for the Catalog Service.
These classes define the product record kept by the store, the candidate
fields supplied by callers, and the outcome values returned by the service.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Optional, Union


@dataclass
class ProductCandidate:
    """
    Caller-supplied writable fields for a create or update.
    Any field may be None (absent); the validation engine decides acceptance.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[int] = None
    category: Optional[str] = None


@dataclass
class Product:
    """
    A stored catalog record.
    `id` is stamped by the store on insert and never changes afterwards.
    """

    id: int
    name: str
    description: str
    price: Decimal
    quantity: int
    category: str

    def copy(self) -> "Product":
        return replace(self)

    def __repr__(self):
        # A helpful representation when debugging
        return f"<Product(id={self.id}, name='{self.name}', quantity={self.quantity})>"


# -----------------------------
# Service outcomes
# -----------------------------


@dataclass(frozen=True)
class Success:
    """Successful outcome carrying the operation's value (None for delete)."""

    value: Any = None
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ValidationFailure:
    """The candidate failed a validation check; `reason` names the first one."""

    reason: str
    ok: bool = field(default=False, init=False)


@dataclass(frozen=True)
class NotFoundFailure:
    """No product with `product_id` exists in the store."""

    product_id: int
    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return f"Product not found with id: {self.product_id}"


Outcome = Union[Success, ValidationFailure, NotFoundFailure]
