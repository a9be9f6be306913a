from .base import Base
from .session import engine, async_session_factory, get_db_session, ping_database
from .models import ArticleModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "ping_database",
    "ArticleModel",
]
