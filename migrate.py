"""
Run Alembic migrations for the Glyzier database.

Usage:
    python migrate.py                 apply all migrations
    python migrate.py "add column"    autogenerate a revision, then apply it
"""

import sys
import logging
import subprocess

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def migrate(message=None):
    """Optionally autogenerate a revision, then upgrade to head."""
    try:
        # Every model must be imported so autogenerate sees all tables
        from glyzier.models import Base  # noqa: F401

        if message:
            logger.info(f"Creating migration: {message}")
            subprocess.run(["alembic", "revision", "--autogenerate", "-m", message], check=True)

        logger.info("Applying migrations...")
        subprocess.run(["alembic", "upgrade", "head"], check=True)

        logger.info("Migration completed successfully!")
    except subprocess.CalledProcessError as e:
        logger.error(f"Migration failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    migrate(sys.argv[1] if len(sys.argv) > 1 else None)
