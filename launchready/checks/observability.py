"""Observability & Monitoring."""
from __future__ import annotations

from launchready.checks.helpers import DOC_GLOBS, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "observability"
NAME = "Observability & Monitoring"

LOGGING_PATTERNS = (
    r"console\.log|logger|winston|pino|logging\.",
    r"log\(|info\(|error\(",
)
STRUCTURED_LOGGING_PATTERN = r"JSON\.stringify.*log|structured.*log|structlog|json_log"
ERROR_TRACKING_PATTERN = r"sentry|bugsnag|rollbar|error.*tracking"
METRICS_PATTERN = r"metrics|prometheus|datadog|cloudwatch"
ALERTING_PATTERN = r"alert|pagerduty|opsgenie|oncall"


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    logging_hits = hits(inspector, *LOGGING_PATTERNS)
    if logging_hits > 20:
        cat.passed("Logging implementation found")
    elif logging_hits > 0:
        cat.warned("Limited logging detected", points=0.5)
    else:
        cat.failed("CRITICAL: No logging implementation")
        result.critical_blockers.append("No logging - impossible to debug production issues")

    if hits(inspector, STRUCTURED_LOGGING_PATTERN) > 0:
        cat.passed("Structured logging detected")
    else:
        cat.failed("No structured logging - difficult to query logs")
        result.improvements.append("Implement structured logging for better observability")

    if hits(inspector, ERROR_TRACKING_PATTERN) > 0:
        cat.passed("Error tracking service integrated")
    else:
        cat.failed("No error tracking service")
        result.public_launch_blockers.append(
            "No error tracking - cannot monitor production errors")

    if hits(inspector, METRICS_PATTERN) > 0:
        cat.passed("Metrics collection detected")
    else:
        cat.failed("No metrics collection")
        result.public_launch_blockers.append("No metrics - cannot monitor performance")

    if hits(inspector, ALERTING_PATTERN, globs=DOC_GLOBS) > 0:
        cat.passed("Alerting strategy documented")
    else:
        cat.failed("No alerting strategy")
        result.public_launch_blockers.append(
            "No alerting - team unaware of production issues")

    cat.clamp()
    return result
