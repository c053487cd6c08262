"""CI/CD & Deployment Safety."""
from __future__ import annotations

from launchready.inspector import Inspector
from launchready.models import AuditConfig, Category, CheckResult

CATEGORY_ID = "cicd"
NAME = "CI/CD & Deployment Safety"

GITHUB_WORKFLOWS = ".github/workflows"
CI_CONFIGS = (GITHUB_WORKFLOWS, ".gitlab-ci.yml", ".circleci/config.yml", "Jenkinsfile")
LINT_WORDS = ("lint", "eslint", "ruff", "flake8")
ROLLBACK_WORDS = ("rollback", "revert")


def _pipeline_content(inspector: Inspector) -> str:
    workflows = inspector.list_tracked_files(r"\.ya?ml$", GITHUB_WORKFLOWS)
    others = [p for p in CI_CONFIGS[1:] if inspector.file_exists(p)]
    return inspector.read_files(workflows + others)


def check(inspector: Inspector, config: AuditConfig) -> CheckResult:
    cat = Category(id=CATEGORY_ID, name=NAME)
    result = CheckResult(category=cat)

    if any(inspector.file_exists(p) for p in CI_CONFIGS):
        cat.passed("CI/CD configuration found")
        pipeline = _pipeline_content(inspector)

        if "test" in pipeline:
            cat.passed("Tests run in CI pipeline")
        else:
            cat.failed("Tests not executed in CI")
            result.improvements.append("Add test execution to CI pipeline")

        if any(word in pipeline for word in LINT_WORDS):
            cat.passed("Linting in CI pipeline")
        else:
            cat.failed("No linting in CI")
            result.improvements.append("Add linting to CI pipeline")

        if "build" in pipeline:
            cat.passed("Build verification in CI")
        else:
            cat.failed("No build verification in CI")
    else:
        cat.failed("CRITICAL: No CI/CD pipeline found")
        result.critical_blockers.append("No CI/CD pipeline - no automated quality checks")

    deployment_docs = inspector.read_file("DEPLOYMENT.md") or inspector.read_file("README.md")
    if deployment_docs and any(word in deployment_docs for word in ROLLBACK_WORDS):
        cat.passed("Rollback strategy documented")
    else:
        cat.failed("No rollback strategy documented")
        result.public_launch_blockers.append("No documented rollback procedure")

    cat.clamp()
    return result
