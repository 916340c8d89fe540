import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.db import create_tables, engine
from app.core.exceptions import unhandled_exception_handler, validation_exception_handler
from app.api.http import health_router, auth_router, posts_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Запуск и остановка приложения"""
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    if settings.auto_create_tables:
        await create_tables()

    yield

    logger.info("Shutting down %s", settings.app_name)
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="REST API для управления постами",
    version=settings.app_version,
    lifespan=lifespan
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(posts_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health"
    }
