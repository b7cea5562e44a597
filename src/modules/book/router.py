"""Book API router: books nested under their author."""

import uuid

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import Settings, get_settings
from src.database.session import get_db
from src.modules.book.constants import (
    CREATE_BOOK_FOR_AUTHOR,
    DELETE_BOOK_FOR_AUTHOR,
    GET_BOOK_FOR_AUTHOR,
    GET_BOOKS_FOR_AUTHOR,
    PARTIALLY_UPDATE_BOOK_FOR_AUTHOR,
    UPDATE_BOOK_FOR_AUTHOR,
)
from src.modules.book.links import book_links, books_collection_links
from src.modules.book.mapping import book_to_dto, books_to_dtos
from src.modules.book.schemas import BookDto, BookForCreation, BookForUpdate, BookPartialUpdate
from src.modules.book.service import BookService
from src.modules.shaping.data_shaping import shape, shape_many
from src.modules.shaping.dependencies import get_link_builder, hypermedia_requested
from src.modules.shaping.field_validation import require_properties
from src.modules.shaping.links import LinkBuilder, linked_collection, with_links
from src.modules.shaping.responses import shaped_response
from src.rate_limit import limiter

router = APIRouter(prefix="/authors/{author_id}/books", tags=["books"])


@router.get("", name=GET_BOOKS_FOR_AUTHOR)
@limiter.limit("60/minute")
async def get_books_for_author(
    request: Request,
    author_id: uuid.UUID,
    fields: str | None = Query(None),
    hypermedia: bool = Depends(hypermedia_requested),
    links: LinkBuilder = Depends(get_link_builder),
    cfg: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    require_properties(BookDto, fields)

    svc = BookService(db)
    books = books_to_dtos(await svc.list_books_for_author(author_id))
    shaped = shape_many(books, fields)
    if hypermedia:
        value = [
            with_links(item, book_links(links, author_id, book.id, fields))
            for item, book in zip(shaped, books)
        ]
        content = linked_collection(value, books_collection_links(links, author_id, fields))
    else:
        content = shaped
    return shaped_response(content, hypermedia=hypermedia, media_type=cfg.hateoas_media_type)


@router.get("/{book_id}", name=GET_BOOK_FOR_AUTHOR)
@limiter.limit("60/minute")
async def get_book_for_author(
    request: Request,
    author_id: uuid.UUID,
    book_id: uuid.UUID,
    fields: str | None = Query(None),
    hypermedia: bool = Depends(hypermedia_requested),
    links: LinkBuilder = Depends(get_link_builder),
    cfg: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    require_properties(BookDto, fields)

    svc = BookService(db)
    book = book_to_dto(await svc.get_book_for_author(author_id, book_id))
    content = shape(book, fields)
    if hypermedia:
        content = with_links(content, book_links(links, author_id, book.id, fields))
    return shaped_response(content, hypermedia=hypermedia, media_type=cfg.hateoas_media_type)


@router.post("", name=CREATE_BOOK_FOR_AUTHOR, status_code=201)
@limiter.limit("30/minute")
async def create_book_for_author(
    request: Request,
    author_id: uuid.UUID,
    data: BookForCreation,
    hypermedia: bool = Depends(hypermedia_requested),
    links: LinkBuilder = Depends(get_link_builder),
    cfg: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    svc = BookService(db)
    book = book_to_dto(await svc.create_book_for_author(author_id, data))
    content = shape(book)
    if hypermedia:
        content = with_links(content, book_links(links, author_id, book.id))
    return shaped_response(
        content,
        hypermedia=hypermedia,
        media_type=cfg.hateoas_media_type,
        status_code=201,
        headers={
            "Location": links.href(GET_BOOK_FOR_AUTHOR, {"author_id": author_id, "book_id": book.id})
        },
    )


@router.put("/{book_id}", name=UPDATE_BOOK_FOR_AUTHOR, status_code=204)
@limiter.limit("30/minute")
async def update_book_for_author(
    request: Request,
    author_id: uuid.UUID,
    book_id: uuid.UUID,
    data: BookForUpdate,
    db: AsyncSession = Depends(get_db),
) -> Response:
    svc = BookService(db)
    await svc.update_book_for_author(author_id, book_id, data)
    return Response(status_code=204)


@router.patch("/{book_id}", name=PARTIALLY_UPDATE_BOOK_FOR_AUTHOR, status_code=204)
@limiter.limit("30/minute")
async def partially_update_book_for_author(
    request: Request,
    author_id: uuid.UUID,
    book_id: uuid.UUID,
    data: BookPartialUpdate,
    db: AsyncSession = Depends(get_db),
) -> Response:
    svc = BookService(db)
    await svc.partially_update_book_for_author(author_id, book_id, data)
    return Response(status_code=204)


@router.delete("/{book_id}", name=DELETE_BOOK_FOR_AUTHOR, status_code=204)
@limiter.limit("30/minute")
async def delete_book_for_author(
    request: Request,
    author_id: uuid.UUID,
    book_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> Response:
    svc = BookService(db)
    await svc.delete_book_for_author(author_id, book_id)
    return Response(status_code=204)
