"""Score aggregation, readiness classification and the two launch gates."""
from __future__ import annotations

from launchready.models import Category, Tier

# (minimum total, tier), evaluated top-down, first match wins
TIER_THRESHOLDS: list[tuple[float, Tier]] = [
    (48, Tier.PRODUCTION_READY),
    (43, Tier.PUBLIC_BETA_READY),
    (36, Tier.EMPLOYEE_PILOT_READY),
    (26, Tier.DEV_PREVIEW),
]

EMPLOYEE_MIN_SCORE = 36
CUSTOMER_MIN_SCORE = 43

SCORE_BANDS = [
    ("0-25", Tier.PROTOTYPE),
    ("26-35", Tier.DEV_PREVIEW),
    ("36-42", Tier.EMPLOYEE_PILOT_READY),
    ("43-47", Tier.PUBLIC_BETA_READY),
    ("48-50", Tier.PRODUCTION_READY),
]


def total_score(categories: list[Category]) -> float:
    return sum(c.score for c in categories)


def max_score(categories: list[Category]) -> float:
    return sum(c.max for c in categories)


def classify(total: float) -> Tier:
    for threshold, tier in TIER_THRESHOLDS:
        if total >= threshold:
            return tier
    return Tier.PROTOTYPE


def safe_for_employees(total: float, critical_blockers: list[str]) -> bool:
    return not critical_blockers and total >= EMPLOYEE_MIN_SCORE


def safe_for_customers(
    total: float, critical_blockers: list[str], public_launch_blockers: list[str],
) -> bool:
    return (
        not critical_blockers
        and not public_launch_blockers
        and total >= CUSTOMER_MIN_SCORE
    )
