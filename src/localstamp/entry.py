"""``localstamp`` console script: the CLI wired to production services."""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run ``localstamp`` on ``sys.argv`` and return its exit code."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
