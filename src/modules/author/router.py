"""Author API router: shaped, sorted and paged author resources."""

import uuid

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import Settings, get_settings
from src.database.session import get_db
from src.models.enums import ShapePair
from src.modules.author.constants import (
    CREATE_AUTHOR,
    DEFAULT_ORDER_BY,
    DELETE_AUTHOR,
    GET_AUTHOR,
    GET_AUTHORS,
)
from src.modules.author.links import author_links, authors_collection_links, authors_page_hrefs
from src.modules.author.mapping import AgeCalculator, author_to_dto, get_age_calculator
from src.modules.author.schemas import AuthorDto, AuthorForCreation, AuthorsResourceParameters
from src.modules.author.service import AuthorService
from src.modules.shaping.data_shaping import shape, shape_many
from src.modules.shaping.dependencies import get_link_builder, get_property_mappings, hypermedia_requested
from src.modules.shaping.field_validation import require_properties
from src.modules.shaping.links import LinkBuilder, linked_collection, with_links
from src.modules.shaping.paging import clamp_page_size
from src.modules.shaping.property_mapping import PropertyMappingRegistry, require_valid_sort_expression
from src.modules.shaping.responses import pagination_header_value, shaped_response
from src.rate_limit import limiter

router = APIRouter(prefix="/authors", tags=["authors"])


def get_authors_parameters(
    fields: str | None = Query(None),
    order_by: str = Query(DEFAULT_ORDER_BY, alias="orderBy"),
    genre: str | None = Query(None),
    search_query: str | None = Query(None, alias="searchQuery"),
    page_number: int = Query(1, ge=1, alias="pageNumber"),
    page_size: int | None = Query(None, ge=1, alias="pageSize"),
    cfg: Settings = Depends(get_settings),
) -> AuthorsResourceParameters:
    requested_size = cfg.default_page_size if page_size is None else page_size
    return AuthorsResourceParameters(
        page_number=page_number,
        page_size=clamp_page_size(requested_size, cfg.max_page_size),
        genre=genre,
        search_query=search_query,
        order_by=order_by,
        fields=fields,
    )


@router.get("", name=GET_AUTHORS)
@limiter.limit("60/minute")
async def get_authors(
    request: Request,
    params: AuthorsResourceParameters = Depends(get_authors_parameters),
    hypermedia: bool = Depends(hypermedia_requested),
    registry: PropertyMappingRegistry = Depends(get_property_mappings),
    links: LinkBuilder = Depends(get_link_builder),
    age_of: AgeCalculator = Depends(get_age_calculator),
    cfg: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    # Reject bad sort/field requests before touching the database
    require_valid_sort_expression(registry, ShapePair.AUTHOR, params.order_by)
    require_properties(AuthorDto, params.fields)
    sort_keys = registry.translate(ShapePair.AUTHOR, params.order_by)

    svc = AuthorService(db)
    paged = await svc.list_authors(
        genre=params.genre,
        search_query=params.search_query,
        sort_keys=sort_keys,
        page_number=params.page_number,
        page_size=params.page_size,
    )
    authors = paged.map(lambda author: author_to_dto(author, age_of))
    shaped = shape_many(authors, params.fields)

    if hypermedia:
        header = pagination_header_value(paged, include_page_links=False)
        value = [
            with_links(item, author_links(links, author.id, params.fields))
            for item, author in zip(shaped, authors)
        ]
        content = linked_collection(value, authors_collection_links(links, params, paged))
    else:
        previous_link, next_link = authors_page_hrefs(links, params, paged)
        header = pagination_header_value(
            paged, previous_page_link=previous_link, next_page_link=next_link
        )
        content = shaped

    return shaped_response(
        content,
        hypermedia=hypermedia,
        media_type=cfg.hateoas_media_type,
        headers={cfg.pagination_header: header},
    )


@router.get("/{author_id}", name=GET_AUTHOR)
@limiter.limit("60/minute")
async def get_author(
    request: Request,
    author_id: uuid.UUID,
    fields: str | None = Query(None),
    hypermedia: bool = Depends(hypermedia_requested),
    links: LinkBuilder = Depends(get_link_builder),
    age_of: AgeCalculator = Depends(get_age_calculator),
    cfg: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    require_properties(AuthorDto, fields)

    svc = AuthorService(db)
    author = author_to_dto(await svc.get_author(author_id), age_of)
    content = shape(author, fields)
    if hypermedia:
        content = with_links(content, author_links(links, author.id, fields))
    return shaped_response(content, hypermedia=hypermedia, media_type=cfg.hateoas_media_type)


@router.post("", name=CREATE_AUTHOR, status_code=201)
@limiter.limit("30/minute")
async def create_author(
    request: Request,
    data: AuthorForCreation,
    hypermedia: bool = Depends(hypermedia_requested),
    links: LinkBuilder = Depends(get_link_builder),
    age_of: AgeCalculator = Depends(get_age_calculator),
    cfg: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    svc = AuthorService(db)
    author = author_to_dto(await svc.create_author(data), age_of)
    content = shape(author)
    if hypermedia:
        content = with_links(content, author_links(links, author.id))
    return shaped_response(
        content,
        hypermedia=hypermedia,
        media_type=cfg.hateoas_media_type,
        status_code=201,
        headers={"Location": links.href(GET_AUTHOR, {"author_id": author.id})},
    )


@router.delete("/{author_id}", name=DELETE_AUTHOR, status_code=204)
@limiter.limit("30/minute")
async def delete_author(
    request: Request,
    author_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> Response:
    svc = AuthorService(db)
    await svc.delete_author(author_id)
    return Response(status_code=204)
