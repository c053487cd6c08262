"""Check registry, runner and blocker collection.

Checks are independent: each reads the inspector and builds its own
CheckResult. They may run concurrently; results are always collected in
registry order so the report is deterministic.
"""
from __future__ import annotations

import logging
from concurrent.futures import Executor
from types import ModuleType

from launchready.checks import (
    cicd, data_safety, documentation, identity, observability,
    performance, reliability, secrets, security, testing,
)
from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

logger = logging.getLogger(__name__)

# display order of the scorecard
REGISTRY: list[ModuleType] = [
    identity,
    secrets,
    data_safety,
    reliability,
    observability,
    cicd,
    security,
    testing,
    performance,
    documentation,
]


def run_check(check_module: ModuleType, inspector: Inspector, config: AuditConfig) -> CheckResult:
    """Run one check. An unexpected error scores the category zero."""
    try:
        result = check_module.check(inspector, config)
    except Exception as e:
        logger.exception("check %s crashed", check_module.CATEGORY_ID)
        cat = Category(id=check_module.CATEGORY_ID, name=check_module.NAME)
        cat.failed(f"Check could not complete: {e}")
        return CheckResult(category=cat)
    logger.debug("check %s: %.1f/%s", result.category.id, result.category.score,
                 result.category.max)
    return result


def run_checks(
    inspector: Inspector,
    config: AuditConfig,
    executor: Executor | None = None,
) -> list[CheckResult]:
    """Run every registered check, in parallel when an executor is given."""
    if executor is None:
        return [run_check(m, inspector, config) for m in REGISTRY]
    futures = [executor.submit(run_check, m, inspector, config) for m in REGISTRY]
    return [f.result() for f in futures]


def collect(results: list[CheckResult]) -> tuple[list[str], list[str], list[str]]:
    """Concatenate blockers and improvements, keeping each category contiguous.

    Returns (critical_blockers, public_launch_blockers, improvements).
    """
    critical: list[str] = []
    public: list[str] = []
    improvements: list[str] = []
    for r in results:
        critical.extend(r.critical_blockers)
        public.extend(r.public_launch_blockers)
        improvements.extend(r.improvements)
    return critical, public, improvements
