import logging
from typing import Optional, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.post_repository import PostRepository
from app.domains.posts.entities import Post
from app.domains.posts.schemas import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    """Сервис для работы с постами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.post_repository = PostRepository(session)

    async def list_posts(self) -> List[Post]:
        """Получение всех постов"""
        return await self.post_repository.get_all()

    async def create_post(self, post_data: PostCreate) -> Post:
        """Создание нового поста"""
        post = Post.create_post(title=post_data.title)
        created_post = await self.post_repository.create(post)
        logger.info("Post %s created", created_post.id)
        return created_post

    async def get_post(self, post_id: int) -> Optional[Post]:
        """Получение поста по id"""
        return await self.post_repository.get_by_id(post_id)

    async def update_post(self, post_id: int, update_data: PostUpdate) -> Optional[Post]:
        """Обновление поста"""
        post = await self.post_repository.get_by_id(post_id)

        if not post:
            return None

        post.update_title(update_data.title)
        updated_post = await self.post_repository.update(post)
        logger.info("Post %s updated", post_id)
        return updated_post

    async def delete_post(self, post_id: int) -> bool:
        """Удаление поста"""
        deleted = await self.post_repository.delete(post_id)
        if deleted:
            logger.info("Post %s deleted", post_id)
        return deleted
