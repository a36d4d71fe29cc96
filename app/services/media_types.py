"""
Accept-header negotiation for the single-author endpoint.

`application/vnd.courselibrary.author.full.hateoas+json` reads as: full
projection, with links. A subtype ending in `hateoas` adds links; the
`author.full` subtype picks the full projection.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import HTTPException

from app.schemas.catalog import AuthorFullOut, AuthorOut

VENDOR_PREFIX = "vnd.courselibrary"
HATEOAS_SUFFIX = "hateoas"

AUTHOR_MEDIA_TYPES = (
    "application/json",
    "application/vnd.courselibrary.hateoas+json",
    "application/vnd.courselibrary.author.full+json",
    "application/vnd.courselibrary.author.full.hateoas+json",
    "application/vnd.courselibrary.author.friendly+json",
    "application/vnd.courselibrary.author.friendly.hateoas+json",
)


@dataclass(frozen=True)
class MediaType:
    type: str
    subtype: str
    suffix: str | None = None

    @property
    def essence(self) -> str:
        if self.suffix:
            return f"{self.type}/{self.subtype}+{self.suffix}"
        return f"{self.type}/{self.subtype}"


@dataclass(frozen=True)
class AuthorRepresentation:
    media_type: str
    projection: type
    include_links: bool


def parse_media_type(raw: str | None) -> MediaType | None:
    # First entry of the header only; q-values are not ranked.
    text = str(raw or "").split(",", 1)[0].split(";", 1)[0].strip().lower()
    if not text:
        return MediaType("application", "json")
    main, sep, sub = text.partition("/")
    if not sep or not main or not sub:
        return None
    if main == "*" and sub == "*":
        return MediaType("application", "json")
    subtype, plus, suffix = sub.partition("+")
    if plus and not suffix:
        return None
    return MediaType(main, subtype, suffix or None)


def negotiate_author_representation(accept: str | None) -> AuthorRepresentation:
    media_type = parse_media_type(accept)
    if media_type is None:
        raise HTTPException(status_code=400, detail="Malformed Accept header.")
    if media_type.essence not in AUTHOR_MEDIA_TYPES:
        raise HTTPException(status_code=406, detail=f"Media type {media_type.essence} is not supported.")

    include_links = media_type.subtype.endswith(HATEOAS_SUFFIX)
    primary = media_type.subtype[: -len(HATEOAS_SUFFIX) - 1] if include_links else media_type.subtype
    projection = AuthorFullOut if primary == f"{VENDOR_PREFIX}.author.full" else AuthorOut
    return AuthorRepresentation(media_type=media_type.essence, projection=projection, include_links=include_links)
