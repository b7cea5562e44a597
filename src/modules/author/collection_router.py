"""Author collection router: create several authors at once and fetch them back by id list."""

import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.session import get_db
from src.exceptions import BadRequestException, NotFoundException
from src.modules.author.constants import CREATE_AUTHOR_COLLECTION, GET_AUTHOR_COLLECTION
from src.modules.author.mapping import AgeCalculator, authors_to_dtos, get_age_calculator
from src.modules.author.schemas import AuthorForCreation
from src.modules.author.service import AuthorService
from src.modules.shaping.data_shaping import shape_many
from src.modules.shaping.dependencies import get_link_builder
from src.modules.shaping.links import LinkBuilder
from src.rate_limit import limiter

router = APIRouter(prefix="/authorcollections", tags=["authors"])


def parse_id_list(ids: str) -> list[uuid.UUID]:
    """Parse ``"id1,id2,..."``; any malformed or missing id is a client error."""
    tokens = [token.strip() for token in ids.split(",")]
    if not tokens or any(not token for token in tokens):
        raise BadRequestException("Author ids must be a comma-separated list of UUIDs")
    try:
        return [uuid.UUID(token) for token in tokens]
    except ValueError as exc:
        raise BadRequestException(f"Malformed author id list: {ids}") from exc


@router.post("", name=CREATE_AUTHOR_COLLECTION, status_code=201)
@limiter.limit("10/minute")
async def create_author_collection(
    request: Request,
    data: list[AuthorForCreation],
    links: LinkBuilder = Depends(get_link_builder),
    age_of: AgeCalculator = Depends(get_age_calculator),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    if not data:
        raise BadRequestException("An author collection needs at least one author")

    svc = AuthorService(db)
    authors = authors_to_dtos(await svc.create_authors(data), age_of)
    ids = ",".join(str(author.id) for author in authors)
    return JSONResponse(
        content=jsonable_encoder(shape_many(authors)),
        status_code=201,
        headers={"Location": links.href(GET_AUTHOR_COLLECTION, {"ids": ids})},
    )


@router.get("/({ids})", name=GET_AUTHOR_COLLECTION)
@limiter.limit("60/minute")
async def get_author_collection(
    request: Request,
    ids: str,
    age_of: AgeCalculator = Depends(get_age_calculator),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    author_ids = parse_id_list(ids)

    svc = AuthorService(db)
    authors = await svc.get_authors_by_ids(author_ids)
    if len(authors) != len(author_ids):
        raise NotFoundException("One or more authors in the collection were not found")
    return JSONResponse(
        content=jsonable_encoder(shape_many(authors_to_dtos(authors, age_of)))
    )
