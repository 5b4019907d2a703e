"""
RetailIQ Seed — Slug & Rounding Helpers

Shared by the platform rules (catalog keys), the price synthesizer
(listing URLs) and the trajectory generator (whole-rupee prices).
"""

from __future__ import annotations

import re
from decimal import Decimal, ROUND_HALF_UP

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_ONE_RUPEE = Decimal("1")


def slugify(name: str) -> str:
    """
    Lowercase a product name and collapse every non-alphanumeric run to '-'.

    "Nothing Phone (2a)" → "nothing-phone-2a"
    'LG OLED C3 55"'     → "lg-oled-c3-55"
    """
    return _NON_ALNUM.sub("-", name.lower()).strip("-")


def to_rupees(value: float) -> int:
    """Round a float price to whole rupees, half away from zero."""
    return int(Decimal(repr(value)).quantize(_ONE_RUPEE, rounding=ROUND_HALF_UP))
