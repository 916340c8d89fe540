from app.domains.posts.entities import Post
from app.domains.posts.schemas import (
    PostBase, PostCreate, PostUpdate, PostResponse, PostListResponse
)
from app.domains.posts.services import PostService

__all__ = [
    "Post",
    "PostBase", "PostCreate", "PostUpdate", "PostResponse", "PostListResponse",
    "PostService"
]
