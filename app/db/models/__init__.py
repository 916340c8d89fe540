from app.db.models.user import User
from app.db.models.post import Post

__all__ = [
    "User",
    "Post",
]
