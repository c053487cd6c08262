"""Click CLI entry point for launchready.

Audit settings come from the environment (see launchready.config); the
options here only pick the repository and the output format.
"""
from __future__ import annotations

import logging
import sys

import click

from launchready import __version__
from launchready.auditor import audit
from launchready.config import from_env
from launchready.output.json_output import render_json
from launchready.output.terminal import render

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="launchready")
@click.option("--path", "repo_path", default=".", type=click.Path(exists=True, file_okay=False),
              help="Repository root to audit (default: current directory)")
@click.option("--json", "json_output", is_flag=True, help="JSON to stdout instead of Rich")
@click.option("--verbose", is_flag=True, help="Debug logging on stderr")
def audit_cmd(repo_path: str, json_output: bool, verbose: bool) -> None:
    """Audit a repository for production readiness.

    \b
    Environment:
      DEPLOYMENT_URL     live URL to probe (optional)
      INTENDED_AUDIENCE  free text, shown in the report
      HANDLES_PII        "true" enables stricter data-safety rules
      HANDLES_PAYMENTS   "true" enables stricter security rules
      HANDLES_SECRETS    "true" enables stricter secrets rules
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    config = from_env(repo_path=repo_path)
    if not json_output:
        click.echo("Starting Production Readiness Audit...", err=True)

    report = audit(config)

    if json_output:
        click.echo(render_json(report))
    else:
        render(report)


def main() -> None:
    """Entry point. A completed audit exits 0 whatever the verdict."""
    try:
        audit_cmd(standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except Exception as e:
        logger.debug("audit failed", exc_info=True)
        click.echo(f"Audit failed with error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
