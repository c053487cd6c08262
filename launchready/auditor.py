"""Orchestrator: runs the category checks and the runtime probe, builds the Report."""
from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from launchready import scoring
from launchready.checks.engine import REGISTRY, collect, run_checks
from launchready.inspector import GitInspector, Inspector
from launchready.models import AuditConfig, ProbeStatus, Report, RuntimeResult
from launchready.probe import probe

logger = logging.getLogger(__name__)

Prober = Callable[[str | None], RuntimeResult]


def audit(
    config: AuditConfig,
    inspector: Inspector | None = None,
    prober: Prober = probe,
) -> Report:
    """Audit the repository described by *config* and return the full Report.

    The probe runs alongside the checks on the same pool; its outcome is
    attached to the report but never changes a score.
    """
    if inspector is None:
        inspector = GitInspector(config.repo_path)

    with ThreadPoolExecutor(max_workers=len(REGISTRY) + 1) as pool:
        runtime_future = pool.submit(prober, config.deployment_url)
        results = run_checks(inspector, config, executor=pool)
        try:
            runtime = runtime_future.result()
        except Exception as e:
            logger.exception("runtime probe crashed")
            runtime = RuntimeResult(
                status=ProbeStatus.FAILED,
                findings=["Runtime checks failed", f"Error: {e}"],
            )

    categories = [r.category for r in results]
    critical, public, improvements = collect(results)

    total = scoring.total_score(categories)
    report = Report(
        config=config,
        categories=categories,
        critical_blockers=critical,
        public_launch_blockers=public,
        improvements=improvements,
        runtime=runtime,
        total_score=total,
        max_score=scoring.max_score(categories),
        tier=scoring.classify(total),
        safe_for_employees=scoring.safe_for_employees(total, critical),
        safe_for_customers=scoring.safe_for_customers(total, critical, public),
    )
    logger.info("audit of %s: %.1f/%s (%s), %d critical, %d public-launch blockers",
                config.repo_path, report.total_score, report.max_score, report.tier.value,
                len(critical), len(public))
    return report
