"""Identity & Access Control."""
from __future__ import annotations

from launchready.checks.helpers import ENV_CONFIG_PATTERN, SOURCE_GLOBS, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "identity_access"
NAME = "Identity & Access Control"

AUTH_FILE_PATTERN = r"auth[^/]*\.(ts|tsx|js|jsx|py)$"
AUTH_VOCABULARY = ("login", "authenticate", "signIn", "sign_in")
RBAC_PATTERN = r"role|permission|authorization"

# assignment of a string literal; concatenated or templated secrets slip through
CREDENTIAL_PATTERNS = (
    r"password\s*=\s*[\"']",
    r"api_key\s*=\s*[\"']",
    r"secret\s*=\s*[\"']",
    r"API_KEY\s*=\s*[\"']",
    r"SECRET\s*=\s*[\"']",
)


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    auth_files = inspector.list_tracked_files(AUTH_FILE_PATTERN)
    if auth_files:
        cat.passed("Authentication files found")
        auth_content = inspector.read_files(auth_files)
        if any(word in auth_content for word in AUTH_VOCABULARY):
            cat.passed("Authentication logic implemented")
        else:
            cat.failed("Authentication logic unclear or incomplete")
    else:
        cat.failed("CRITICAL: No authentication system found")
        result.critical_blockers.append(
            "No authentication system - users cannot be identified or protected")

    if hits(inspector, RBAC_PATTERN) > 5:
        cat.passed("Role-based access control patterns found")
    else:
        cat.failed("No RBAC implementation detected")
        result.public_launch_blockers.append("Missing role-based access control")

    if hits(inspector, *CREDENTIAL_PATTERNS, globs=SOURCE_GLOBS) > 0:
        cat.failed("CRITICAL: Potential hardcoded credentials found")
        result.critical_blockers.append("Hardcoded credentials detected in source code")
    else:
        cat.passed("No obvious hardcoded credentials")

    if hits(inspector, ENV_CONFIG_PATTERN) > 0:
        cat.warned("Environment variable usage found (partial credit for config management)",
                   points=0.5)
    else:
        cat.failed("No environment-based configuration detected")

    cat.clamp()
    return result
