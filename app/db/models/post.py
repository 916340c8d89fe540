from sqlalchemy import Column, String

from app.db.base import BaseModel


class Post(BaseModel):
    __tablename__ = "posts"

    title = Column(String(255), nullable=False)
