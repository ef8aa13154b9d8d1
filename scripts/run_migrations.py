#!/usr/bin/env python3
"""Apply or roll back database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from tyrantcam.config import Settings
from tyrantcam.util.observability import configure_logfire


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description="Run TyrantCam schema migrations")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--downgrade", action="store_true", help="Downgrade to the given revision"
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    direction = "downgrade" if args.downgrade else "upgrade"
    alembic_cfg = Config("alembic.ini")

    with logfire.span(
        "run_migrations", direction=direction, revision=args.revision
    ):
        try:
            if args.downgrade:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                direction=direction,
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start on a half-migrated schema
            raise

    logfire.info("Database migrations applied", direction=direction, revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
