from datetime import datetime, timezone
from typing import Optional


class Post:
    """Сущность поста домена Posts"""

    def __init__(
        self,
        id: Optional[int],
        title: str,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def update_title(self, new_title: str) -> None:
        """Обновление заголовка поста"""
        self.title = new_title
        self.updated_at = datetime.now(timezone.utc)

    @classmethod
    def create_post(cls, title: str) -> "Post":
        """Создание нового поста (id назначает база данных)"""
        return cls(id=None, title=title)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Post):
            return False
        return self.id is not None and self.id == other.id

    def __repr__(self) -> str:
        return f"Post(id={self.id}, title={self.title!r})"
