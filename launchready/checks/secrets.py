"""Secrets & Configuration Hygiene.

The only category that can lose points: secrets found in commit history
subtract one, which is why the score may clamp to zero.
"""
from __future__ import annotations

from launchready.checks.helpers import SOURCE_GLOBS, any_exists, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "secrets_config"
NAME = "Secrets & Configuration Hygiene"

ENV_TEMPLATES = (".env.example", ".env.template")
SECRETS_MANAGER_PATTERN = r"secrets-manager|vault|aws-secrets|secretmanager|keyring"


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    if any_exists(inspector, *ENV_TEMPLATES):
        cat.passed("Environment variable template found")
    else:
        cat.failed("No .env.example or .env.template found")
        result.improvements.append(
            "Create .env.example to document required environment variables")

    gitignore = inspector.read_file(".gitignore")
    if gitignore is not None and ".env" in gitignore:
        cat.passed(".env files excluded from git")
    else:
        cat.failed("CRITICAL: .env files may not be gitignored")
        result.critical_blockers.append(
            ".env files not properly gitignored - secrets may be committed")

    if inspector.file_exists(".env"):
        cat.failed("WARNING: .env file exists in working directory")

    if inspector.secrets_in_history():
        cat.failed("CRITICAL: Potential secrets found in git history", points=-1)
        result.critical_blockers.append(
            "Secrets detected in git history - requires remediation")
    else:
        cat.passed("No obvious secrets in git history")

    readme = inspector.read_file("README.md")
    if (
        any_exists(inspector, "SETUP.md", "CONFIGURATION.md")
        or (readme is not None and "environment" in readme)
    ):
        cat.passed("Configuration documentation exists")
    else:
        cat.failed("No configuration documentation found")
        result.improvements.append(
            "Document all required environment variables and configuration")

    if hits(inspector, SECRETS_MANAGER_PATTERN, globs=SOURCE_GLOBS) > 0:
        cat.passed("Secrets manager integration detected")
    else:
        cat.failed("No secrets manager integration - rotation difficult")
        result.public_launch_blockers.append("No automated secrets rotation capability")
        if config.handles_secrets:
            result.critical_blockers.append(
                "Handles secrets without a secrets manager - no rotation or revocation path")

    cat.clamp()
    return result
