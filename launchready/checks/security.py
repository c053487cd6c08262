"""Security Hardening."""
from __future__ import annotations

from launchready.checks.helpers import RATE_LIMIT_PATTERN, any_exists, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "security"
NAME = "Security Hardening"

VALIDATION_PATTERNS = (
    r"validate|validation|zod|joi|yup|pydantic",
    r"sanitize|escape|xss",
)
CORS_PATTERN = r"cors|CORS"
CSP_PATTERN = r"content.*security.*policy|csp"
DEPENDENCY_SCAN_PATTERN = r"audit|snyk|dependabot"
CI_YAML_GLOBS = (".github/**/*.yml", ".github/**/*.yaml")
LOCK_FILES = (
    "package-lock.json", "yarn.lock", "pnpm-lock.yaml",
    "poetry.lock", "uv.lock", "Pipfile.lock",
)


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    validation = hits(inspector, *VALIDATION_PATTERNS)
    if validation > 10:
        cat.passed("Input validation implementation found")
    elif validation > 0:
        cat.warned("Limited input validation detected", points=0.5)
    else:
        cat.failed("CRITICAL: No input validation detected")
        result.critical_blockers.append(
            "No input validation - vulnerable to injection attacks")

    if hits(inspector, RATE_LIMIT_PATTERN) > 0:
        cat.passed("Rate limiting detected")
    else:
        cat.failed("No rate limiting - vulnerable to abuse")
        result.public_launch_blockers.append("No rate limiting - vulnerable to DoS attacks")
        if config.handles_payments:
            result.critical_blockers.append(
                "Handles payments without rate limiting - open to card-testing abuse")

    if hits(inspector, CORS_PATTERN) > 0:
        cat.passed("CORS configuration found")
    else:
        cat.warned("No CORS configuration detected")

    if hits(inspector, CSP_PATTERN) > 0:
        cat.passed("Content Security Policy detected")
    else:
        cat.failed("No CSP headers - vulnerable to XSS")
        result.public_launch_blockers.append("No Content Security Policy configured")

    if hits(inspector, DEPENDENCY_SCAN_PATTERN, globs=CI_YAML_GLOBS) > 0:
        cat.passed("Dependency scanning enabled")
    elif any_exists(inspector, *LOCK_FILES):
        cat.warned("Lock file present but no automated scanning", points=0.5)
        result.improvements.append("Enable Dependabot or similar for dependency scanning")
    else:
        cat.failed("No dependency management or scanning")

    cat.clamp()
    return result
