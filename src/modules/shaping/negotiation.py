"""Accept-header negotiation for the hypermedia representation."""

from __future__ import annotations


def accepted_media_types(accept: str | None) -> list[str]:
    """Media types listed in an Accept header, lower-cased and without parameters."""
    if not accept:
        return []
    media_types = []
    for entry in accept.split(","):
        media_type = entry.split(";", 1)[0].strip().lower()
        if media_type:
            media_types.append(media_type)
    return media_types


def wants_hypermedia(accept: str | None, media_type: str) -> bool:
    return media_type.strip().lower() in accepted_media_types(accept)
