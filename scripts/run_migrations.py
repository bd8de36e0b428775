#!/usr/bin/env python3
"""Apply Alembic migrations (schema and seed terms) before the API starts.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from lingo.config import Settings
from lingo.util.observability import configure_logfire


def upgrade(settings: Settings, revision: str = "head") -> None:
    """Upgrade the database to a revision.

    The database URL is read from Settings in migrations/env.py, so
    alembic.ini carries no credentials.
    """
    with logfire.span(
        "run_migrations.upgrade",
        revision=revision,
        environment=settings.environment,
    ):
        command.upgrade(Config("alembic.ini"), revision)


def main(argv: list[str]) -> int:
    """Run migrations, reporting failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    try:
        upgrade(settings, revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the container so the API never starts on a stale schema
        raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
