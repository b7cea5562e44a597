"""API root document: entry-point links a client can discover the API from."""

from fastapi import APIRouter, Depends, Request, Response

from src.config import Settings, get_settings
from src.modules.author.constants import CREATE_AUTHOR, GET_AUTHORS, REL_AUTHORS, REL_CREATE_AUTHOR
from src.modules.shaping.constants import REL_SELF
from src.modules.shaping.dependencies import get_link_builder, hypermedia_requested
from src.modules.shaping.links import Link, LinkBuilder
from src.modules.shaping.responses import shaped_response
from src.rate_limit import limiter
from src.schemas.responses import LinkResponse

GET_ROOT = "get_root"

router = APIRouter(tags=["root"])


def root_links(builder: LinkBuilder) -> list[Link]:
    return [
        builder.link(GET_ROOT, REL_SELF, "GET"),
        builder.link(GET_AUTHORS, REL_AUTHORS, "GET"),
        builder.link(CREATE_AUTHOR, REL_CREATE_AUTHOR, "POST"),
    ]


@router.get(
    "/",
    name=GET_ROOT,
    status_code=200,
    responses={200: {"model": list[LinkResponse]}, 204: {"description": "Hypermedia not requested"}},
)
@limiter.limit("60/minute")
async def get_root(
    request: Request,
    hypermedia: bool = Depends(hypermedia_requested),
    links: LinkBuilder = Depends(get_link_builder),
    cfg: Settings = Depends(get_settings),
) -> Response:
    if not hypermedia:
        return Response(status_code=204)
    content = [link.model_dump() for link in root_links(links)]
    return shaped_response(content, hypermedia=True, media_type=cfg.hateoas_media_type)
