"""
Catalog Item Validator

Checks parsed items against the requirements of the downstream item
store. Advisory only: the parser never drops rows, callers decide what
to do with invalid items.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable

from ..common.config_loader import DEFAULT_VALIDATION_RULES
from ..models import CatalogItem


class CatalogItemValidator:
    """Validates a single CatalogItem."""

    def __init__(self, item: CatalogItem, rules: Dict[str, Any] | None = None):
        self.item = item
        self.rules = {**DEFAULT_VALIDATION_RULES, **(rules or {})}

    def validate(self) -> dict:
        """
        Run all validations.

        Returns a dict with keys:
          valid    - False if any error fires
          errors   - list of "field: message" strings that block import
          warnings - list of "field: message" strings worth a look
        """
        errors: list[str] = []
        warnings: list[str] = []
        item = self.item

        # ── Error checks ─────────────────────────────────────────────────────

        upc = item.upc.strip()
        allowed_lengths = set(self.rules['upc_lengths'])
        if not upc:
            errors.append("upc: missing or empty")
        else:
            if allowed_lengths and len(upc) not in allowed_lengths:
                expected = "/".join(str(n) for n in sorted(allowed_lengths))
                errors.append(f"upc: invalid length ({len(upc)} chars, expected {expected})")
            if self.rules['require_numeric_upc'] and not upc.isdigit():
                errors.append(f"upc: must be digits only (got {upc!r})")

        if self.rules['require_name'] and not item.name.strip():
            errors.append("name: missing or empty")

        # ── Warning checks ───────────────────────────────────────────────────

        if item.standard_price == 0:
            warnings.append("standard_price: zero (no retail price or wholesale cost in feed)")
        elif item.standard_price < item.wholesale_cost:
            warnings.append(
                f"standard_price: below wholesale cost "
                f"({item.standard_price} < {item.wholesale_cost})"
            )

        if self.rules['warn_missing_brand'] and not item.brand.strip():
            warnings.append("brand: missing or empty")

        return {
            'valid': not errors,
            'errors': errors,
            'warnings': warnings,
        }


def summarize_validation(
    items: Iterable[CatalogItem], rules: Dict[str, Any] | None = None
) -> dict:
    """
    Validate every item and aggregate the results.

    Returns:
        Dict with total, valid, invalid, warnings (item count with at least
        one warning) and error_counts (field name -> number of errors)
    """
    total = valid = with_warnings = 0
    error_counts: Counter = Counter()

    for item in items:
        result = CatalogItemValidator(item, rules).validate()
        total += 1
        if result['valid']:
            valid += 1
        if result['warnings']:
            with_warnings += 1
        for error in result['errors']:
            error_counts[error.split(':', 1)[0]] += 1

    return {
        'total': total,
        'valid': valid,
        'invalid': total - valid,
        'warnings': with_warnings,
        'error_counts': dict(error_counts),
    }
