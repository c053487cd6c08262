"""Documentation & Operational Readiness."""
from __future__ import annotations

from launchready.checks.helpers import DOC_GLOBS, hits
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "documentation"
NAME = "Documentation & Operational Readiness"

MIN_README_LENGTH = 200
OPERATIONAL_DOCS = ("RUNBOOK.md", "OPERATIONS.md", "DEPLOYMENT.md")
INCIDENT_PATTERN = r"incident|oncall|escalation"


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    readme = inspector.read_file("README.md")
    if readme and len(readme) > MIN_README_LENGTH:
        cat.passed("README exists and has content")
        if "install" in readme or "setup" in readme:
            cat.passed("Setup instructions in README")
        else:
            cat.failed("No setup instructions in README")
    else:
        cat.failed("README missing or insufficient")
        result.improvements.append("Create comprehensive README with setup instructions")

    present = sum(1 for doc in OPERATIONAL_DOCS if inspector.file_exists(doc))
    if present >= 2:
        cat.passed("Comprehensive operational documentation", points=2)
    elif present == 1:
        cat.warned("Some operational documentation exists", points=1)
    else:
        cat.failed("No operational documentation")
        result.public_launch_blockers.append("No runbook or operational procedures")

    if hits(inspector, INCIDENT_PATTERN, globs=DOC_GLOBS) > 0:
        cat.passed("Incident procedures documented")
    else:
        cat.failed("No incident response procedures")
        result.public_launch_blockers.append("No incident response procedures")

    cat.clamp()
    return result
