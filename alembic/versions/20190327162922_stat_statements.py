"""enable pg_stat_statements

Revision ID: 20190327162922
Revises: initial
Create Date: 2019-03-27 16:29:22.000000

"""
from alembic import op

from app.core.errors import MigrationError
from app.db.extensions import STAT_STATEMENTS, ensure_extension

# revision identifiers, used by Alembic.
revision = '20190327162922'
down_revision = 'initial'
branch_labels = None
depends_on = None

def upgrade() -> None:
    ensure_extension(op.get_bind(), STAT_STATEMENTS)

def downgrade() -> None:
    # Dropping the extension would discard collected statistics
    raise MigrationError(f"Revision {revision} ({STAT_STATEMENTS}) cannot be reversed")
