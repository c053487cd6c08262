"""Rich terminal output for audit reports."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from launchready.models import Finding, Report, Status
from launchready.scoring import SCORE_BANDS

console = Console(highlight=False)

GLYPH_STYLES = {
    Status.PASS: "green",
    Status.FAIL: "bold red",
    Status.WARN: "yellow",
}

ACTION_PLAN_SIZE = 5
LOW_SCORE = 3


def render(report: Report, out: Console | None = None) -> None:
    """Render the report: header, sections A-E, executive summary."""
    c = out or console
    _render_header(report, c)
    _render_scorecard(report, c)
    _render_findings(report, c)
    _render_blockers(report, c)
    _render_verdict(report, c)
    _render_action_plan(report, c)
    _render_executive_summary(report, c)
    c.rule("[bold]END OF AUDIT REPORT[/bold]", style="bold")


def _finding_text(finding: Finding) -> Text:
    text = Text("  ")
    text.append(finding.glyph, style=GLYPH_STYLES[finding.status])
    text.append(f" {finding.message}")
    return text


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _render_header(report: Report, c: Console) -> None:
    cfg = report.config
    c.rule("[bold]PRODUCTION READINESS AUDIT REPORT[/bold]", style="bold blue")
    c.print()
    c.print(f"Repository: {escape(cfg.repo_path)}")
    c.print(f"Deployment URL: {escape(cfg.deployment_url or 'Not provided')}")
    c.print(f"Intended Audience: {escape(cfg.intended_audience)}")
    c.print(f"Handles PII: {_yes_no(cfg.handles_pii)}")
    c.print(f"Handles Payments: {_yes_no(cfg.handles_payments)}")
    c.print(f"Handles Secrets: {_yes_no(cfg.handles_secrets)}")
    c.print(f"Audit Date: {report.timestamp}")
    c.print()


def _render_scorecard(report: Report, c: Console) -> None:
    c.rule("[bold]SECTION A - SCORECARD TABLE[/bold]", style="bold")
    table = Table(box=box.SQUARE, show_footer=True)
    table.add_column("Category", footer="TOTAL SCORE", min_width=43)
    table.add_column("Score", justify="right", footer=f"{report.total_score:.1f}")
    table.add_column("Max", justify="right", footer=f"{report.max_score:g}")
    for i, cat in enumerate(report.categories, 1):
        table.add_row(f"{i}. {cat.name}", f"{cat.score:.1f}", f"{cat.max:g}")
    c.print(table)
    c.print()


def _render_findings(report: Report, c: Console) -> None:
    c.rule("[bold]SECTION B - DETAILED FINDINGS[/bold]", style="bold")
    for i, cat in enumerate(report.categories, 1):
        c.print()
        c.print(Text(f"{i}. {cat.name} [{cat.score:.1f}/{cat.max:g}]", style="bold"))
        c.rule(style="dim")
        for finding in cat.findings:
            c.print(_finding_text(finding))

    if report.runtime is not None:
        c.print()
        c.print(Text("RUNTIME CHECKS", style="bold"))
        c.rule(style="dim")
        c.print(f"Status: {report.runtime.status.value}")
        for line in report.runtime.findings:
            c.print(Text(f"  {line}"))
    c.print()


def _render_numbered(items: list[str], c: Console) -> None:
    if not items:
        c.print("  [green]✓[/green] None identified")
        return
    for i, item in enumerate(items, 1):
        c.print(Text(f"  {i}. {item}"))


def _render_blockers(report: Report, c: Console) -> None:
    c.rule("[bold]SECTION C - BLOCKERS[/bold]", style="bold")
    c.print()
    c.print("[bold red]CRITICAL BLOCKERS[/bold red] (Must fix before employee use):")
    _render_numbered(report.critical_blockers, c)
    c.print()
    c.print("[bold yellow]PUBLIC LAUNCH BLOCKERS[/bold yellow] (Must fix before public release):")
    _render_numbered(report.public_launch_blockers, c)
    c.print()


def _render_verdict(report: Report, c: Console) -> None:
    c.rule("[bold]SECTION D - READINESS VERDICT[/bold]", style="bold")
    c.print()
    c.print(f"Total Score: {report.total_score:.1f}/{report.max_score:g}")
    c.print(f"Readiness Level: [bold]{escape(report.tier.value)}[/bold]")
    c.print()
    c.print("Score Interpretation:")
    for band, tier in SCORE_BANDS:
        c.print(f"  {band:<5} → {tier.value}")
    c.print()


def _render_action_plan(report: Report, c: Console) -> None:
    c.rule("[bold]SECTION E - IMMEDIATE ACTION PLAN[/bold]", style="bold")
    c.print()
    c.print("Top 5 Highest-Leverage Improvements (prioritized by impact):")
    top = report.improvements[:ACTION_PLAN_SIZE]
    if not top:
        c.print("  [green]✓[/green] System is in good shape - focus on addressing blockers")
    for i, item in enumerate(top, 1):
        c.print(Text(f"  {i}. {item}"))
    c.print()


def what_breaks_first(report: Report) -> str:
    """First weak spot in a fixed priority order."""
    if report.category("reliability").score < LOW_SCORE:
        return "Application crashes due to poor error handling"
    if report.category("performance").score < LOW_SCORE:
        return "Performance degradation and potential outages"
    if report.category("observability").score < LOW_SCORE:
        return "Unable to diagnose issues - flying blind"
    return "System should handle moderate load with monitoring"


def security_concerns(report: Report) -> list[str]:
    concerns = []
    if report.category("identity_access").score < LOW_SCORE:
        concerns.append("Weak authentication")
    if report.category("secrets_config").score < LOW_SCORE:
        concerns.append("Secrets management issues")
    if report.category("security").score < LOW_SCORE:
        concerns.append("Missing security hardening")
    if report.config.handles_pii and report.category("data_safety").score < 4:
        concerns.append("Inadequate PII protection")
    return concerns


def _render_executive_summary(report: Report, c: Console) -> None:
    c.rule("[bold]EXECUTIVE SUMMARY[/bold]", style="bold")

    c.print()
    c.print("Is this safe for employees?")
    if report.safe_for_employees:
        c.print("   [green]✓ YES[/green] - Ready for internal pilot with monitoring")
    else:
        c.print("   [red]✗ NO[/red] - Critical issues must be addressed first")

    c.print()
    c.print("Is this safe for customers?")
    if report.safe_for_customers:
        c.print("   [green]✓ YES[/green] - Ready for public beta with proper monitoring")
    else:
        c.print("   [red]✗ NO[/red] - Multiple production blockers must be resolved")

    c.print()
    c.print("What would break first under real usage?")
    c.print(f"   → {what_breaks_first(report)}")

    c.print()
    c.print("What would scare a security review?")
    concerns = security_concerns(report)
    if concerns:
        c.print(f"   → {', '.join(concerns)}")
    else:
        c.print("   → Security posture is reasonable with some improvements needed")
    c.print()
