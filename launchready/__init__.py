"""launchready - production-readiness audit for version-controlled repos."""

__version__ = "0.1.0"
