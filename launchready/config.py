"""Environment-derived audit configuration."""
from __future__ import annotations

import os
from collections.abc import Mapping

from launchready.models import AuditConfig

ENV_DEPLOYMENT_URL = "DEPLOYMENT_URL"
ENV_INTENDED_AUDIENCE = "INTENDED_AUDIENCE"
ENV_HANDLES_PII = "HANDLES_PII"
ENV_HANDLES_PAYMENTS = "HANDLES_PAYMENTS"
ENV_HANDLES_SECRETS = "HANDLES_SECRETS"

DEFAULT_AUDIENCE = "Unknown"


def env_flag(value: str | None) -> bool:
    """Only the exact string "true" turns a flag on."""
    return value == "true"


def from_env(environ: Mapping[str, str] | None = None, repo_path: str | None = None) -> AuditConfig:
    """Build an AuditConfig from environment variables.

    The repository path defaults to the current working directory.
    """
    env = os.environ if environ is None else environ
    return AuditConfig(
        repo_path=os.path.abspath(repo_path or os.getcwd()),
        deployment_url=env.get(ENV_DEPLOYMENT_URL) or None,
        intended_audience=env.get(ENV_INTENDED_AUDIENCE) or DEFAULT_AUDIENCE,
        handles_pii=env_flag(env.get(ENV_HANDLES_PII)),
        handles_payments=env_flag(env.get(ENV_HANDLES_PAYMENTS)),
        handles_secrets=env_flag(env.get(ENV_HANDLES_SECRETS)),
    )
