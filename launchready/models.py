from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Status(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


STATUS_GLYPHS = {
    Status.PASS: "✓",
    Status.FAIL: "✗",
    Status.WARN: "⚠",
}


class ProbeStatus(str, Enum):
    SKIPPED = "SKIPPED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class Tier(str, Enum):
    """Readiness ladder, lowest first."""
    PROTOTYPE = "Prototype"
    DEV_PREVIEW = "Dev Preview"
    EMPLOYEE_PILOT_READY = "Employee Pilot Ready (with conditions)"
    PUBLIC_BETA_READY = "Public Beta Ready"
    PRODUCTION_READY = "Production Ready"


@dataclass
class Finding:
    """One pass/fail/warn line attached to a category.

    Findings keep insertion order; the renderer never sorts them.
    """
    status: Status
    message: str

    @property
    def glyph(self) -> str:
        return STATUS_GLYPHS[self.status]

    def __str__(self) -> str:
        return f"{self.glyph} {self.message}"


@dataclass
class Category:
    id: str
    name: str
    max: float = 5
    score: float = 0.0
    findings: list[Finding] = field(default_factory=list)

    def passed(self, message: str, points: float = 1) -> None:
        self.score += points
        self.findings.append(Finding(Status.PASS, message))

    def warned(self, message: str, points: float = 0) -> None:
        self.score += points
        self.findings.append(Finding(Status.WARN, message))

    def failed(self, message: str, points: float = 0) -> None:
        self.score += points
        self.findings.append(Finding(Status.FAIL, message))

    def clamp(self) -> None:
        self.score = min(max(self.score, 0.0), float(self.max))


@dataclass
class CheckResult:
    """A single category's score plus the blockers it raised.

    Checks return these instead of appending to shared lists, so they can
    run in any order.
    """
    category: Category
    critical_blockers: list[str] = field(default_factory=list)
    public_launch_blockers: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)


@dataclass
class AuditConfig:
    repo_path: str = "."
    deployment_url: str | None = None
    intended_audience: str = "Unknown"
    handles_pii: bool = False
    handles_payments: bool = False
    handles_secrets: bool = False


@dataclass
class RuntimeResult:
    status: ProbeStatus
    findings: list[str] = field(default_factory=list)
    status_code: int | None = None
    response_time_ms: int | None = None


@dataclass
class Report:
    config: AuditConfig
    categories: list[Category] = field(default_factory=list)
    critical_blockers: list[str] = field(default_factory=list)
    public_launch_blockers: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    runtime: RuntimeResult | None = None

    total_score: float = 0.0
    max_score: float = 0.0
    tier: Tier = Tier.PROTOTYPE
    safe_for_employees: bool = False
    safe_for_customers: bool = False

    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def category(self, category_id: str) -> Category:
        for cat in self.categories:
            if cat.id == category_id:
                return cat
        raise KeyError(category_id)
