"""Data Safety & Privacy."""
from __future__ import annotations

from launchready.checks.helpers import DOC_GLOBS, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "data_safety"
NAME = "Data Safety & Privacy"

DATABASE_FILE_PATTERNS = (r"database", r"prisma", r"supabase", r"models\.py$", r"migrations/")
ENCRYPTION_PATTERN = r"encrypt|cipher|crypto"
BACKUP_PATTERN = r"backup|restore|disaster recovery"
RETENTION_PATTERN = r"retention|delete.*data|gdpr"
PII_PATTERN = r"pii|personal.*data|privacy"


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    database_files = [
        f for pattern in DATABASE_FILE_PATTERNS
        for f in inspector.list_tracked_files(pattern)
    ]
    if database_files:
        cat.passed("Database configuration found")
    else:
        cat.warned("UNVERIFIED: Data storage location unclear")

    if hits(inspector, ENCRYPTION_PATTERN) > 0:
        cat.passed("Encryption references found")
    else:
        cat.failed("No encryption implementation detected")
        if config.handles_pii:
            result.critical_blockers.append("No data encryption detected while handling PII")

    if hits(inspector, BACKUP_PATTERN, globs=DOC_GLOBS) > 0:
        cat.passed("Backup strategy documented")
    else:
        cat.failed("No backup strategy documented")
        result.public_launch_blockers.append("No documented backup and recovery strategy")

    if hits(inspector, RETENTION_PATTERN, globs=DOC_GLOBS) > 0:
        cat.passed("Data retention considerations found")
    else:
        cat.failed("No data retention policy defined")
        if config.handles_pii:
            result.public_launch_blockers.append("No data retention policy for PII")

    if config.handles_pii:
        if hits(inspector, PII_PATTERN) > 0:
            cat.warned("PII handling code detected - needs manual review", points=0.5)
        else:
            cat.failed("CRITICAL: Handles PII but no privacy controls detected")
            result.critical_blockers.append("PII handling without proper privacy controls")

    cat.clamp()
    return result
