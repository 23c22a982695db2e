import logging
import argparse
from alembic import command
from sqlalchemy import create_engine

from app.core.config import settings
from app.db.extensions import STAT_STATEMENTS, extension_installed
from app.db.init_db import get_alembic_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def run_migration(args):
    """Run database migrations"""
    alembic_cfg = get_alembic_config(args.database_url)
    try:
        if args.downgrade:
            command.downgrade(alembic_cfg, args.revision)
        else:
            command.upgrade(alembic_cfg, args.revision)
        logger.info(f"Migration {'downgrade' if args.downgrade else 'upgrade'} completed")
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        raise

def create_migration(args):
    """Create a new migration"""
    try:
        command.revision(
            get_alembic_config(args.database_url),
            message=args.message,
            autogenerate=True
        )
        logger.info("Migration created successfully")
    except Exception as e:
        logger.error(f"Failed to create migration: {e}")
        raise

def show_current(args):
    """Show the revision the database is at"""
    command.current(get_alembic_config(args.database_url), verbose=True)

def show_extensions(args):
    """Report whether the statement statistics extension is installed"""
    engine = create_engine(args.database_url or settings.DATABASE_URL)
    try:
        with engine.connect() as connection:
            installed = extension_installed(connection, STAT_STATEMENTS)
    finally:
        engine.dispose()
    logger.info(f"{STAT_STATEMENTS}: {'installed' if installed else 'missing'}")
    return installed

def main(argv=None):
    parser = argparse.ArgumentParser(description="Database management commands")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Migration command
    migrate_parser = subparsers.add_parser("migrate", help="Run migrations")
    migrate_parser.add_argument("--downgrade", action="store_true", help="Downgrade instead of upgrade")
    migrate_parser.add_argument("revision", nargs="?", default="head", help="Revision to migrate to")
    migrate_parser.set_defaults(func=run_migration)

    # Create migration command
    create_parser = subparsers.add_parser("create", help="Create a new migration")
    create_parser.add_argument("message", help="Migration message")
    create_parser.set_defaults(func=create_migration)

    current_parser = subparsers.add_parser("current", help="Show the current revision")
    current_parser.set_defaults(func=show_current)

    extensions_parser = subparsers.add_parser("extensions", help="Check installed extensions")
    extensions_parser.set_defaults(func=show_extensions)

    args = parser.parse_args(argv)
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
