"""Machine-readable report for dashboards and CI consumers."""
from __future__ import annotations

import dataclasses
import json

from launchready.models import Report
from launchready.output.terminal import security_concerns, what_breaks_first


def report_to_dict(report: Report) -> dict:
    out = dataclasses.asdict(report)
    # findings are rendered as their display strings, glyph first
    for cat_out, cat in zip(out["categories"], report.categories):
        cat_out["findings"] = [str(f) for f in cat.findings]
    out["tier"] = report.tier.value
    if report.runtime is not None:
        out["runtime"]["status"] = report.runtime.status.value
    out["executive_summary"] = {
        "safe_for_employees": report.safe_for_employees,
        "safe_for_customers": report.safe_for_customers,
        "breaks_first": what_breaks_first(report),
        "security_concerns": security_concerns(report),
    }
    return out


def render_json(report: Report) -> str:
    return json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)
