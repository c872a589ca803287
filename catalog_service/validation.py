# catalog_service/validation.py

"""
Validation rules for product candidates.
Checks run in a fixed order and only the first failing check is reported.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from .models import ProductCandidate

NAME_MAX_LENGTH = 100

NAME_REQUIRED = "Product name is required and cannot be empty"
NAME_TOO_LONG = f"Product name cannot exceed {NAME_MAX_LENGTH} characters"
DESCRIPTION_REQUIRED = "Product description is required and cannot be empty"
PRICE_REQUIRED = "Product price is required"
PRICE_NOT_POSITIVE = "Product price must be greater than 0"
QUANTITY_REQUIRED = "Product quantity is required"
QUANTITY_NEGATIVE = "Product quantity cannot be negative"
CATEGORY_REQUIRED = "Product category is required and cannot be empty"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_positive(value) -> bool:
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return False
    return amount.is_finite() and amount > 0


def validate_product(candidate: ProductCandidate) -> Optional[str]:
    """
    Returns None when the candidate may be written, otherwise the reason
    for the first check it fails.
    """
    if _is_blank(candidate.name):
        return NAME_REQUIRED
    if len(candidate.name.strip()) > NAME_MAX_LENGTH:
        return NAME_TOO_LONG
    if _is_blank(candidate.description):
        return DESCRIPTION_REQUIRED
    if candidate.price is None:
        return PRICE_REQUIRED
    if not _is_positive(candidate.price):
        return PRICE_NOT_POSITIVE
    if candidate.quantity is None:
        return QUANTITY_REQUIRED
    if candidate.quantity < 0:
        return QUANTITY_NEGATIVE
    if _is_blank(candidate.category):
        return CATEGORY_REQUIRED
    return None
