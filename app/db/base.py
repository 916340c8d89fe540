from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer

from app.core.db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """Абстрактная модель с идентификатором и временными метками"""
    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


# Диапазон значений колонки Integer (int4 в PostgreSQL)
MAX_ID = 2 ** 31 - 1


def is_valid_id(value: int) -> bool:
    """Id вне диапазона колонки не может существовать в базе"""
    return 1 <= value <= MAX_ID
