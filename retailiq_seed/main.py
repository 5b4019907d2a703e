"""
RetailIQ Seed — Command-Line Entrypoint

Configures structlog, opens the target store, verifies the connection, and
runs the full seeding orchestrator. Prints a per-stage summary to stdout.

Run via:
    python -m retailiq_seed.main --database-url sqlite:///retailiq.db --seed 42
    retailiq-seed --create-schema

Exit codes:
    0: every stage completed
    1: configuration/connection error (nothing written) or a stage failed
        (rows written by earlier stages are left in place)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Sequence

import structlog
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from retailiq_seed.config import settings
from retailiq_seed.models import Base
from retailiq_seed.pipeline.orchestrator import SeedingOrchestrator


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "INFO") -> None:
    """
    Set up structured logging with JSON output.

    Logs go to stderr so the human-readable summary on stdout stays clean.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    # Configure stdlib logging first (for SQLAlchemy and friends)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Database Setup
# ---------------------------------------------------------------------------


def create_db_engine(database_url: str) -> tuple[Engine, sessionmaker[Session]]:
    """
    Create a SQLAlchemy engine and session factory, and verify connectivity.

    Returns:
        (engine, session_factory) tuple.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the store cannot be reached.
    """
    logger = structlog.get_logger(__name__)
    logger.info("database_engine_initializing", database_url=database_url)

    engine = create_engine(database_url, echo=False, pool_pre_ping=True)
    session_factory = sessionmaker(engine, expire_on_commit=False, autoflush=False)

    # Health check before any write
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise

    logger.info("database_health_check_passed")
    return engine, session_factory


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="retailiq-seed",
        description="Seed the RetailIQ store with products, platform prices and "
                    "synthetic price history.",
    )
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help=f"SQLAlchemy connection URL (default: {settings.DATABASE_URL}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.SEED,
        help="Random seed for a reproducible run (default: drawn and logged).",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=settings.HISTORY_BATCH_SIZE,
        help=f"Price history rows per transaction (default: {settings.HISTORY_BATCH_SIZE}).",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=settings.HISTORY_MONTHS,
        help=f"Months of price history to generate (default: {settings.HISTORY_MONTHS}).",
    )
    parser.add_argument("--catalog", type=Path, default=None, help="Product catalog JSON.")
    parser.add_argument("--pricing", type=Path, default=None, help="Pricing catalog JSON.")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables from the ORM models before seeding.",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level.")
    args = parser.parse_args(argv)

    if args.batch_size < 1:
        parser.error("--batch-size must be at least 1")
    if args.months < 1:
        parser.error("--months must be at least 1")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """
    Seed the store and return the process exit code.

    Execution order:
    1. Configure logging (structlog JSON)
    2. Create engine + health check (abort before any write on failure)
    3. Optionally create the schema
    4. Run the orchestrator and print its summary
    """
    args = parse_args(argv)
    _configure_logging(args.log_level)
    logger = structlog.get_logger(__name__)

    seed = args.seed if args.seed is not None else random.SystemRandom().randrange(2**32)
    logger.info("seed_rng_initialized", seed=seed)

    try:
        engine, session_factory = create_db_engine(args.database_url)
    except Exception as e:
        logger.error(
            "database_health_check_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        print(f"Cannot open database: {e}", file=sys.stderr)
        return 1

    try:
        if args.create_schema:
            Base.metadata.create_all(engine)
            logger.info("database_schema_created")

        orchestrator = SeedingOrchestrator(
            session_factory,
            seed=seed,
            catalog_path=args.catalog,
            pricing_path=args.pricing,
            batch_size=args.batch_size,
            months=args.months,
        )
        summary = orchestrator.run()
    except Exception as e:
        logger.error(
            "seed_run_failed",
            seed=seed,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(f"Error during seeding: {e}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()

    print(summary.render())
    print("Database seeding completed successfully.")
    return 0


def run() -> None:
    """Console-script entry."""
    sys.exit(main())


if __name__ == "__main__":
    run()
