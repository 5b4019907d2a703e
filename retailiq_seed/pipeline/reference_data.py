"""
RetailIQ Seed — Static Reference Datasets

Festival metadata shown to users and the subscription plan / promo code
catalog. Neither feeds the price engine; both are seeded by the orchestrator.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable

from retailiq_seed.engine.festivals import ANNUAL_FESTIVALS, AnnualFestival, FestivalPeriod

# ---------------------------------------------------------------------------
# Festivals
# ---------------------------------------------------------------------------

# name → (categories, confidence, description)
_FESTIVAL_DETAILS: dict[str, tuple[list[str], float, str]] = {
    "Republic Day": (
        ["Smartphones", "TVs", "Home"], 0.85,
        "Republic Day special offers across electronics and appliances",
    ),
    "Valentine": (
        ["Audio", "Wearables"], 0.60,
        "Gifting deals on audio and wearables",
    ),
    "Holi": (
        ["Home", "Audio"], 0.65,
        "Spring festival sale with discounts on home and lifestyle",
    ),
    "Summer": (
        ["Home", "TVs", "Laptops"], 0.70,
        "Summer sale on cooling, entertainment and back-to-college laptops",
    ),
    "Prime Day": (
        ["Smartphones", "Laptops", "Audio", "Wearables", "Cameras", "TVs", "Home"], 0.90,
        "Members-first marketplace mega sale",
    ),
    "Independence": (
        ["Smartphones", "Laptops", "TVs", "Home"], 0.85,
        "Independence Day freedom sale",
    ),
    "Onam": (
        ["Home", "TVs"], 0.60,
        "Harvest festival offers, strongest in South India",
    ),
    "Navratri": (
        ["Smartphones", "Wearables", "Audio"], 0.75,
        "Nine-day festive season sale",
    ),
    "Diwali": (
        ["Smartphones", "Laptops", "Audio", "Wearables", "Cameras", "TVs", "Home"], 0.95,
        "Festival of lights mega sale across all platforms",
    ),
    "Black Friday": (
        ["Smartphones", "Laptops", "Audio", "Cameras"], 0.80,
        "Global Black Friday deals on electronics",
    ),
    "Year End": (
        ["Smartphones", "Laptops", "TVs", "Home"], 0.80,
        "Year-end clearance sale",
    ),
}


def _slug(name: str) -> str:
    return name.lower().replace(" ", "-")


def next_occurrence(festival: AnnualFestival, today: date) -> FestivalPeriod:
    """The first occurrence of ``festival`` that has not ended before ``today``."""
    for year in (today.year - 1, today.year, today.year + 1):
        period = festival.in_year(year)
        if period.end_date >= today:
            return period
    raise ValueError(f"{festival.name}: no upcoming occurrence")


def build_festival_rows(
    today: date,
    festivals: Iterable[AnnualFestival] = ANNUAL_FESTIVALS,
) -> list[dict[str, Any]]:
    """Festival rows for the next occurrence of every annual festival."""
    rows: list[dict[str, Any]] = []
    for festival in festivals:
        period = next_occurrence(festival, today)
        categories, confidence, description = _FESTIVAL_DETAILS.get(
            festival.name, ([], 0.5, f"{festival.name} sale")
        )
        peak_pct = round(festival.peak_discount * 100)
        rows.append({
            "name": festival.name,
            "platform": "all",
            "start_date": period.start_date,
            "end_date": period.end_date,
            "expected_discount": f"{round(peak_pct / 2)}-{peak_pct}%",
            "categories": categories,
            "confidence": confidence,
            "historical_avg_discount": round(peak_pct * 0.75),
            "description": description,
            "banner_url": f"https://cdn.retailiq.in/festivals/{_slug(festival.name)}.jpg",
        })
    return rows


# ---------------------------------------------------------------------------
# Subscription plans & promo codes
# ---------------------------------------------------------------------------

SUBSCRIPTION_PLANS: list[dict[str, Any]] = [
    {
        "name": "Free",
        "price_monthly": 0,
        "price_yearly": 0,
        "max_products": 10,
        "max_alerts": 10,
        "price_history_days": 30,
        "api_access": False,
        "team_access": False,
        "features": [
            "10 products tracking",
            "10 price alerts",
            "30 days price history",
            "Basic notifications",
            "Web access",
        ],
    },
    {
        "name": "Basic",
        "price_monthly": 999,
        "price_yearly": 9590,  # ~20% off 12 × 999
        "max_products": 50,
        "max_alerts": 50,
        "price_history_days": 90,
        "api_access": False,
        "team_access": False,
        "features": [
            "50 products tracking",
            "50 price alerts",
            "90 days price history",
            "Priority notifications",
            "Email alerts",
            "Festival predictions",
            "Price comparison",
            "Ad-free experience",
        ],
    },
    {
        "name": "Pro",
        "price_monthly": 2999,
        "price_yearly": 28790,  # ~20% off 12 × 2999
        "max_products": None,
        "max_alerts": None,
        "price_history_days": 365,
        "api_access": True,
        "team_access": False,
        "features": [
            "Unlimited products tracking",
            "Unlimited price alerts",
            "1 year price history",
            "API access (1000 calls/day)",
            "Advanced analytics",
            "Custom reports",
            "WhatsApp alerts",
            "SMS alerts",
            "Festival predictions",
            "Price trends & forecasting",
            "Export data (CSV, Excel)",
            "Priority support",
        ],
    },
    {
        "name": "Enterprise",
        "price_monthly": 9999,
        "price_yearly": 95990,  # ~20% off 12 × 9999
        "max_products": None,
        "max_alerts": None,
        "price_history_days": None,
        "api_access": True,
        "team_access": True,
        "features": [
            "Everything in Pro",
            "Unlimited price history",
            "API access (unlimited)",
            "Team collaboration (up to 10 users)",
            "Dedicated account manager",
            "Custom integrations",
            "White-label options",
            "Advanced ML predictions",
            "Custom alerts & workflows",
            "Bulk product import",
            "Priority 24/7 support",
            "SLA guarantee",
        ],
    },
]

_ALL_PAID = ["Basic", "Pro", "Enterprise"]

PROMO_CODES: list[dict[str, Any]] = [
    {
        "code": "SAVE10", "discount_type": "percentage", "discount_value": 10,
        "valid_from": date(2025, 1, 1), "valid_until": date(2025, 12, 31),
        "max_uses": None, "applicable_plans": _ALL_PAID,
    },
    {
        "code": "FIRST20", "discount_type": "percentage", "discount_value": 20,
        "valid_from": date(2025, 1, 1), "valid_until": date(2025, 12, 31),
        "max_uses": None, "applicable_plans": _ALL_PAID,
    },
    {
        "code": "DIWALI30", "discount_type": "percentage", "discount_value": 30,
        "valid_from": date(2025, 10, 1), "valid_until": date(2025, 11, 15),
        "max_uses": 1000, "applicable_plans": _ALL_PAID,
    },
    {
        "code": "RETAILIQ50", "discount_type": "percentage", "discount_value": 50,
        "valid_from": date(2025, 1, 1), "valid_until": date(2025, 3, 31),
        "max_uses": 500, "applicable_plans": ["Basic", "Pro"],
    },
    {
        "code": "NEWYEAR2025", "discount_type": "percentage", "discount_value": 25,
        "valid_from": date(2024, 12, 20), "valid_until": date(2025, 1, 31),
        "max_uses": 2000, "applicable_plans": _ALL_PAID,
    },
    {
        "code": "LAUNCH100", "discount_type": "fixed", "discount_value": 100,
        "valid_from": date(2025, 1, 1), "valid_until": date(2025, 2, 28),
        "max_uses": 100, "applicable_plans": ["Basic"],
    },
    {
        "code": "STUDENT15", "discount_type": "percentage", "discount_value": 15,
        "valid_from": date(2025, 1, 1), "valid_until": date(2025, 12, 31),
        "max_uses": None, "applicable_plans": ["Basic", "Pro"],
    },
]


def build_promo_rows() -> list[dict[str, Any]]:
    """Promo code rows with usage counters reset."""
    return [
        {**promo, "current_uses": 0, "is_active": True, "applicable_plans": list(promo["applicable_plans"])}
        for promo in PROMO_CODES
    ]


def build_plan_rows() -> list[dict[str, Any]]:
    return [{**plan, "features": list(plan["features"])} for plan in SUBSCRIPTION_PLANS]
