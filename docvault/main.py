import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from docvault.api.http import (
    health_router, auth_router, documents_router,
    notes_router, recents_router, analytics_router
)
from docvault.core.config import settings
from docvault.core.db import create_tables
from docvault.core.errors import register_exception_handlers
from docvault.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()

    if settings.create_tables_on_startup:
        try:
            await create_tables()
            logger.info("Database connected, tables ready")
        except (SQLAlchemyError, OSError) as e:
            # Сервис стартует в деградированном режиме: /health сообщает
            # о недоступности БД, остальные запросы получают 503
            logger.error(f"Database connection failed, serving degraded API: {e}")

    logger.info(f"Storage backend: {settings.storage_backend}")
    yield


app = FastAPI(
    title="DocVault",
    description="Хранилище документов и заметок с аналитикой использования",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(documents_router)
app.include_router(notes_router)
app.include_router(recents_router)
app.include_router(analytics_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "DocVault API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
