"""
Application startup validation and initialization.

Checks that the database is reachable and that the POS tables exist before
the application starts serving requests.
"""

import logging
import sys
from typing import List, Tuple

import sqlalchemy as sa
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from core.config import get_settings
from core.database import Base, engine, init_db

logger = logging.getLogger(__name__)

settings = get_settings()


def configure_logging():
    """Configure root logging from settings"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class StartupValidator:
    """Validates application startup requirements"""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def check_database_connection(self) -> bool:
        """Check database connectivity"""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            logger.info("Database connection successful")
            return True
        except SQLAlchemyError as e:
            self.errors.append(f"Database connection failed: {str(e)}")
            return False

    def check_required_tables(self) -> bool:
        """Create or report missing tables"""
        if settings.auto_create_tables:
            init_db()

        existing_tables = set(sa.inspect(engine).get_table_names())
        missing_tables = sorted(set(Base.metadata.tables) - existing_tables)
        if missing_tables:
            self.warnings.append(
                f"Missing database tables: {', '.join(missing_tables)}. "
                "Run migrations with: alembic upgrade head"
            )
        return True

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        """Run all validation checks"""
        checks = [
            ("Database Connection", self.check_database_connection),
            ("Database Tables", self.check_required_tables),
        ]

        all_passed = True
        for check_name, check_func in checks:
            logger.info(f"Running check: {check_name}")
            try:
                if not check_func():
                    all_passed = False
            except SQLAlchemyError as e:
                self.errors.append(f"{check_name} check failed with error: {str(e)}")
                all_passed = False

        return all_passed, self.errors, self.warnings


def run_startup_checks():
    """Run all startup validation checks"""
    logger.info(f"Starting Cafe POS backend ({settings.environment})")

    validator = StartupValidator()
    passed, errors, warnings = validator.validate_all()

    for warning in warnings:
        logger.warning(f"Startup warning: {warning}")
    for error in errors:
        logger.error(f"Startup error: {error}")

    if not passed and settings.is_production:
        logger.error("Cannot start in production with errors!")
        sys.exit(1)
    elif not passed:
        logger.warning(f"Starting in {settings.environment} mode despite errors")
    else:
        logger.info("All startup checks passed")

    return passed, warnings
