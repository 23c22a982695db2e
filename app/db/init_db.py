import logging
from pathlib import Path

from alembic.config import Config
from alembic import command
from sqlalchemy import inspect

from app.core.config import settings
from app.db.session import engine
from app.db.base import Base

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def get_alembic_config(database_url: str = None) -> Config:
    """
    Build the Alembic configuration pointing at the given database (defaults to settings).
    """
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_INI.parent / "alembic"))
    # configparser interpolation treats % specially
    url = database_url or settings.DATABASE_URL
    alembic_cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return alembic_cfg


def init_db(database_url: str = None) -> None:
    """
    Initialize the database by running Alembic migrations up to head.
    """
    try:
        command.upgrade(get_alembic_config(database_url), "head")
        logger.info("Database migrations applied successfully")
    except Exception as e:
        logger.error(f"Error applying database migrations: {e}")
        raise


def create_all_tables(bind=None) -> set:
    """
    Create model tables without running migrations. Returns the names of new tables.
    """
    bind = bind if bind is not None else engine
    existing_tables = set(inspect(bind).get_table_names())

    Base.metadata.create_all(bind=bind)

    new_tables = set(inspect(bind).get_table_names()) - existing_tables
    if new_tables:
        logger.info(f"Created new tables: {new_tables}")
    return new_tables


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Applying database migrations")
    init_db()
    logger.info("Database is up to date")
