# Import all models here so Alembic and metadata.create_all can see them
from app.db.session import Base

from app.modules.user_management.models.user import User
from app.modules.posts.models.post import Post
