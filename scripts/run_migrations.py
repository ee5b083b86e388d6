#!/usr/bin/env python3
"""Upgrade the forum schema with Logfire error tracking.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision and log the outcome."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target, environment=settings.environment):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                target=target,
                _exc_info=sys.exc_info(),
            )
            # Don't let the app start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
