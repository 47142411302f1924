"""Book and reading-session endpoints."""

from fastapi import APIRouter

from lifelog.application.schemas import (
    BookCreate,
    BookReadingSessionCreate,
    BookReadingSessionUpdate,
    BookUpdate,
)
from lifelog.application.services.descriptors import BOOK, BOOK_READING_SESSION
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

# Sessions are mounted first so "/books/sessions" is not taken for a book id
sessions_router = APIRouter(prefix="/books/sessions", tags=["Books"])
books_router = APIRouter(prefix="/books", tags=["Books"])

register_resource_routes(
    sessions_router, BOOK_READING_SESSION, BookReadingSessionCreate, BookReadingSessionUpdate
)
register_resource_routes(books_router, BOOK, BookCreate, BookUpdate)

router = APIRouter()
router.include_router(sessions_router)
router.include_router(books_router)
