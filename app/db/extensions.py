"""
PostgreSQL extension helpers used by the schema migrations.

The existence check is folded into the statement itself (IF NOT EXISTS), so
applying it again on a database that already has the extension is a no-op and
there is no window between checking and creating.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError

from app.core.errors import MigrationError

logger = logging.getLogger("app")

STAT_STATEMENTS = "pg_stat_statements"


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def ensure_extension(connection: Connection, name: str) -> None:
    """
    Install the named extension unless it is already present.

    Raises MigrationError if the role lacks the privilege or the server does
    not ship the extension. The statement is atomic, so nothing is left behind
    on failure.
    """
    if not name:
        raise MigrationError("Extension name must not be empty")

    statement = f"CREATE EXTENSION IF NOT EXISTS {_quote_identifier(name)}"
    logger.info(f"Ensuring database extension: {name}")
    try:
        connection.execute(text(statement))
    except DBAPIError as e:
        logger.error(f"Could not enable extension {name}: {e.orig}")
        raise MigrationError(f"Could not enable extension '{name}': {e.orig}") from e
    logger.info(f"Extension {name} is present")


def extension_installed(connection: Connection, name: str) -> bool:
    """Return True if the extension has a catalog entry in the current database"""
    result = connection.execute(
        text("SELECT count(*) FROM pg_extension WHERE extname = :name"),
        {"name": name},
    )
    return result.scalar() > 0
