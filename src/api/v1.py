"""Centralized v1 API router: all module routers are included here."""

from fastapi import APIRouter

from src.modules.author.collection_router import router as author_collection_router
from src.modules.author.router import router as author_router
from src.modules.book.router import router as book_router
from src.modules.root.router import router as root_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(root_router)
v1_router.include_router(author_router)
v1_router.include_router(book_router)
v1_router.include_router(author_collection_router)
