from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import List
from datetime import datetime


TITLE_REQUIRED_MESSAGE = "The title field is required."


class PostBase(BaseModel):
    """Базовая схема поста"""
    title: str = Field(..., max_length=255)

    # Обрезаем пробелы до проверки max_length
    @field_validator('title', mode="before")
    @classmethod
    def strip_title(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v:
            raise ValueError(TITLE_REQUIRED_MESSAGE)
        return v


class PostCreate(PostBase):
    """Схема для создания поста"""
    pass


class PostUpdate(PostBase):
    """Схема для обновления поста"""
    pass


class PostResponse(BaseModel):
    """Схема для ответа с данными поста"""
    id: int
    title: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostListResponse(BaseModel):
    """Схема для списка постов"""
    data: List[PostResponse]
