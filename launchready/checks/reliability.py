"""Reliability & Error Handling.

Advanced resilience (circuit breakers, fallbacks) is worth two points,
more than any other single signal in this category.
"""
from __future__ import annotations

from launchready.checks.helpers import hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "reliability"
NAME = "Reliability & Error Handling"

ERROR_HANDLING_PATTERNS = (r"try.*catch", r"catch.*error", r"except .*Error|except:")
TIMEOUT_PATTERN = r"timeout|setTimeout"
RETRY_PATTERN = r"retry|retries"
RESILIENCE_PATTERN = r"circuit.*breaker|fallback|failsafe"


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    error_handling = hits(inspector, *ERROR_HANDLING_PATTERNS)
    if error_handling > 10:
        cat.passed("Error handling implementation found")
    elif error_handling > 0:
        cat.warned("Limited error handling detected", points=0.5)
    else:
        cat.failed("CRITICAL: No error handling found")
        result.critical_blockers.append("No error handling - application will crash on errors")

    if hits(inspector, TIMEOUT_PATTERN) > 5:
        cat.passed("Timeout handling implemented")
    else:
        cat.failed("No timeout handling - requests may hang indefinitely")
        result.improvements.append("Add timeout handling for all external requests")

    if hits(inspector, RETRY_PATTERN) > 0:
        cat.passed("Retry logic detected")
    else:
        cat.failed("No retry logic - failures not handled gracefully")
        result.improvements.append("Implement retry logic for transient failures")

    if hits(inspector, RESILIENCE_PATTERN) > 0:
        cat.passed("Advanced resilience patterns detected", points=2)
    else:
        cat.failed("No circuit breaker or fail-safe patterns")
        result.public_launch_blockers.append(
            "No fail-safe mechanisms for production resilience")

    cat.clamp()
    return result
