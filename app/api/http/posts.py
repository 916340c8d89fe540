from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_user
from app.core.db import get_db
from app.domains.posts.schemas import (
    PostCreate, PostUpdate, PostResponse, PostListResponse
)
from app.domains.posts.services import PostService

# Все маршруты постов требуют аутентификации
router = APIRouter(
    prefix="/api/posts",
    tags=["posts"],
    dependencies=[Depends(get_current_user)]
)


def _post_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Post not found"
    )


@router.get("", response_model=PostListResponse)
async def list_posts(db: AsyncSession = Depends(get_db)):
    """Получение списка постов"""
    post_service = PostService(db)
    posts = await post_service.list_posts()

    return PostListResponse(
        data=[PostResponse.model_validate(post) for post in posts]
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание нового поста"""
    post_service = PostService(db)
    post = await post_service.create_post(post_data)
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Получение поста по id"""
    post_service = PostService(db)
    post = await post_service.get_post(post_id)

    if not post:
        raise _post_not_found()

    return PostResponse.model_validate(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    update_data: PostUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Обновление поста"""
    post_service = PostService(db)
    post = await post_service.update_post(post_id, update_data)

    if not post:
        raise _post_not_found()

    return PostResponse.model_validate(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Удаление поста"""
    post_service = PostService(db)
    success = await post_service.delete_post(post_id)

    if not success:
        raise _post_not_found()

    return Response(status_code=status.HTTP_204_NO_CONTENT)
