#!/usr/bin/env python3
"""Apply (or roll back) the blog schema with Alembic.

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py -1 --down  # undo the last revision
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--down", action="store_true", help="downgrade to the revision instead"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the requested migration, reporting failures to Logfire."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config(str(ALEMBIC_INI))
    direction = "downgrade" if args.down else "upgrade"

    with logfire.span(
        "run_migrations", direction=direction, revision=args.revision
    ):
        try:
            if args.down:
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
            # Fail the deploy rather than start on a broken schema
            raise

    logfire.info("Database migrations completed", direction=direction)
    return 0


if __name__ == "__main__":
    sys.exit(main())
