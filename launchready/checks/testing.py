"""Testing Coverage."""
from __future__ import annotations

from launchready.checks.helpers import ALL_FILES, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "testing"
NAME = "Testing Coverage"

TEST_FILE_PATTERNS = (
    r"\.test\.(ts|tsx|js|jsx)$",
    r"\.spec\.(ts|tsx|js|jsx)$",
    r"(^|/)test_[^/]*\.py$|_test\.py$",
)
TEST_GLOBS = ("*.test.*", "*.spec.*", "test_*.py", "*/test_*.py", "*_test.py")
INTEGRATION_PATTERN = r"integration.*test|e2e"
SMOKE_PATTERN = r"smoke.*test|health.*check"
MANIFESTS = ("package.json", "pyproject.toml", "setup.cfg", "tox.ini")


def _test_files(inspector: Inspector) -> list[str]:
    seen: dict[str, None] = {}
    for pattern in TEST_FILE_PATTERNS:
        for path in inspector.list_tracked_files(pattern):
            seen.setdefault(path, None)
    return list(seen)


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    count = len(_test_files(inspector))
    if count > 20:
        cat.passed(f"Strong test coverage ({count} test files)", points=2)
    elif count > 5:
        cat.warned(f"Moderate test coverage ({count} test files)", points=1)
    elif count > 0:
        cat.warned(f"Limited test coverage ({count} test files)", points=0.5)
    else:
        cat.failed("CRITICAL: No tests found")
        result.critical_blockers.append("No tests - no confidence in code quality")

    if hits(inspector, INTEGRATION_PATTERN, globs=TEST_GLOBS) > 0:
        cat.passed("Integration tests detected")
    else:
        cat.failed("No integration tests")
        result.improvements.append("Add integration tests for critical user flows")

    if any("coverage" in (inspector.read_file(m) or "") for m in MANIFESTS):
        cat.passed("Test coverage reporting configured")
    else:
        cat.failed("No test coverage reporting")
        result.improvements.append("Configure test coverage reporting")

    if hits(inspector, SMOKE_PATTERN, globs=ALL_FILES) > 0:
        cat.passed("Smoke/health check tests found")
    else:
        cat.failed("No smoke tests for deployment validation")
        result.public_launch_blockers.append("No smoke tests to validate deployments")

    cat.clamp()
    return result
