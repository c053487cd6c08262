"""Performance & Cost Controls."""
from __future__ import annotations

from launchready.checks.helpers import DOC_GLOBS, RATE_LIMIT_PATTERN, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "performance"
NAME = "Performance & Cost Controls"

RESOURCE_LIMIT_PATTERN = r"max.*connections|pool.*size|memory.*limit"
CACHING_PATTERN = r"cache|redis|memcache"
BUDGET_PATTERN = r"performance.*budget|lighthouse"
PERF_MONITORING_PATTERN = r"performance.*monitoring|apm|new.*relic"


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    # scored here and again under security
    if hits(inspector, RATE_LIMIT_PATTERN) > 0:
        cat.passed("API rate limits implemented")
    else:
        cat.failed("No API rate limits - uncontrolled costs")
        result.improvements.append("Implement rate limiting to control costs")

    if hits(inspector, RESOURCE_LIMIT_PATTERN) > 0:
        cat.passed("Resource limits configured")
    else:
        cat.failed("No resource limits - risk of resource exhaustion")

    if hits(inspector, CACHING_PATTERN) > 0:
        cat.passed("Caching implementation detected")
    else:
        cat.failed("No caching - poor performance and high costs")
        result.improvements.append("Implement caching for frequently accessed data")

    if hits(inspector, BUDGET_PATTERN, globs=DOC_GLOBS) > 0:
        cat.passed("Performance budgets defined")
    else:
        cat.failed("No performance budgets")

    if hits(inspector, PERF_MONITORING_PATTERN) > 0:
        cat.passed("Performance monitoring configured")
    else:
        cat.failed("No performance monitoring")
        result.public_launch_blockers.append("No performance monitoring for production")

    cat.clamp()
    return result
