from docvault.api.http.health import router as health_router
from docvault.api.http.auth import router as auth_router
from docvault.api.http.documents import router as documents_router
from docvault.api.http.notes import router as notes_router
from docvault.api.http.recents import router as recents_router
from docvault.api.http.analytics import router as analytics_router

__all__ = [
    "health_router",
    "auth_router",
    "documents_router",
    "notes_router",
    "recents_router",
    "analytics_router"
]
