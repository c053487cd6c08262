"""Pathspecs and vocabulary shared across category checks."""
from __future__ import annotations

from collections.abc import Sequence

from launchready.inspector import Inspector

SOURCE_GLOBS = ("*.ts", "*.tsx", "*.js", "*.jsx", "*.py")
DOC_GLOBS = ("*.md",)
ALL_FILES = ("*.*",)

# process.env-style configuration reads
ENV_CONFIG_PATTERN = r"process\.env|os\.environ|os\.getenv"

# shared by security and performance; both categories score it
RATE_LIMIT_PATTERN = r"rate.*limit|throttle"


def hits(inspector: Inspector, *patterns: str,
         globs: str | Sequence[str] = SOURCE_GLOBS) -> int:
    """Total content-search hits across *patterns*, each capped by the inspector."""
    return sum(len(inspector.search_content(p, globs)) for p in patterns)


def any_exists(inspector: Inspector, *paths: str) -> bool:
    return any(inspector.file_exists(p) for p in paths)
