#!/usr/bin/env python3
"""Apply the identity schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a2b7d40
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from jolt.config import Settings
from jolt.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the identity store, reporting failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("identity_schema.upgrade", target=target):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Identity schema migration failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start against a half-migrated store
            raise

    logfire.info("Identity schema at revision", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
