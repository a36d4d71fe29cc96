"""
Hypermedia links for author resources.

`url_for` is a route-name resolver with the signature of FastAPI's
`request.url_for(name, **path_params)`; query strings are appended here so
the links reproduce exactly the parameters that produced the response.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from app.schemas.links import Link
from app.schemas.resource_parameters import AuthorsResourceParameters
from app.services.data_shaping import ShapedRecord

UrlFor = Callable[..., Any]


class ResourceUriType(str, Enum):
    CURRENT = "current"
    PREVIOUS_PAGE = "previous_page"
    NEXT_PAGE = "next_page"


def _href(url_for: UrlFor, route_name: str, query: Mapping[str, Any] | None = None, **path_params: Any) -> str:
    base = str(url_for(route_name, **{key: str(value) for key, value in path_params.items()}))
    params = {key: value for key, value in (query or {}).items() if value is not None and value != ""}
    if not params:
        return base
    return f"{base}?{urlencode(params)}"


def authors_resource_uri(url_for: UrlFor, parameters: AuthorsResourceParameters, kind: ResourceUriType) -> str:
    if kind == ResourceUriType.PREVIOUS_PAGE:
        parameters = parameters.for_page(parameters.page_number - 1)
    elif kind == ResourceUriType.NEXT_PAGE:
        parameters = parameters.for_page(parameters.page_number + 1)
    return _href(url_for, "get_authors", parameters.as_query_params())


def links_for_author(url_for: UrlFor, author_id: uuid.UUID, fields: str | None = None) -> list[Link]:
    self_query = {"fields": fields} if fields and fields.strip() else None
    return [
        Link(href=_href(url_for, "get_author", self_query, author_id=author_id), rel="self", method="GET"),
        Link(href=_href(url_for, "delete_author", author_id=author_id), rel="delete_author", method="DELETE"),
        Link(
            href=_href(url_for, "create_course_for_author", author_id=author_id),
            rel="create_course_for_author",
            method="POST",
        ),
        Link(href=_href(url_for, "get_courses_for_author", author_id=author_id), rel="courses", method="GET"),
    ]


def links_for_authors(
    url_for: UrlFor,
    parameters: AuthorsResourceParameters,
    has_next: bool,
    has_previous: bool,
) -> list[Link]:
    links = [Link(href=authors_resource_uri(url_for, parameters, ResourceUriType.CURRENT), rel="self", method="GET")]
    if has_next:
        links.append(
            Link(href=authors_resource_uri(url_for, parameters, ResourceUriType.NEXT_PAGE), rel="next-page", method="GET")
        )
    if has_previous:
        links.append(
            Link(
                href=authors_resource_uri(url_for, parameters, ResourceUriType.PREVIOUS_PAGE),
                rel="previous-page",
                method="GET",
            )
        )
    return links


def attach_links(record: ShapedRecord, links: Iterable[Link]) -> ShapedRecord:
    record["links"] = [link.model_dump() for link in links]
    return record


def linked_collection(records: Iterable[ShapedRecord], links: Iterable[Link]) -> dict[str, Any]:
    return {"value": list(records), "links": [link.model_dump() for link in links]}
