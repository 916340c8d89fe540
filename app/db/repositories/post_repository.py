from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func

from app.db.base import is_valid_id
from app.db.models.post import Post as PostModel

if TYPE_CHECKING:
    from app.domains.posts.entities import Post


class PostRepository:
    """Репозиторий для работы с постами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, post: "Post") -> "Post":
        """Создание нового поста"""
        db_post = PostModel(title=post.title)

        self.session.add(db_post)
        await self.session.commit()
        await self.session.refresh(db_post)
        return self._to_domain(db_post)

    async def get_by_id(self, post_id: int) -> Optional["Post"]:
        """Получение поста по id"""
        if not is_valid_id(post_id):
            return None

        result = await self.session.execute(
            select(PostModel).where(PostModel.id == post_id)
        )
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    async def get_all(self) -> List["Post"]:
        """Получение всех постов"""
        result = await self.session.execute(
            select(PostModel).order_by(PostModel.id)
        )
        db_posts = result.scalars().all()
        return [self._to_domain(post) for post in db_posts]

    async def update(self, post: "Post") -> Optional["Post"]:
        """Обновление поста"""
        stmt = (
            update(PostModel)
            .where(PostModel.id == post.id)
            .values(
                title=post.title,
                updated_at=post.updated_at
            )
        )

        await self.session.execute(stmt)
        await self.session.commit()

        result = await self.session.execute(
            select(PostModel)
            .where(PostModel.id == post.id)
            .execution_options(populate_existing=True)
        )
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    async def delete(self, post_id: int) -> bool:
        """Удаление поста"""
        if not is_valid_id(post_id):
            return False

        stmt = delete(PostModel).where(PostModel.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def count(self) -> int:
        """Подсчет количества постов"""
        result = await self.session.execute(select(func.count(PostModel.id)))
        return result.scalar()

    def _to_domain(self, db_post: PostModel) -> "Post":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.posts.entities import Post

        return Post(
            id=db_post.id,
            title=db_post.title,
            created_at=db_post.created_at,
            updated_at=db_post.updated_at
        )
