import uuid

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.deps import get_authors_parameters, get_property_mappings
from app.db.session import get_db
from app.models.author import Author
from app.schemas.catalog import AuthorForCreation, AuthorFullOut, AuthorOut
from app.schemas.resource_parameters import AuthorsResourceParameters
from app.services import catalog
from app.services.data_shaping import shape_many, shape_one
from app.services.field_checker import has_fields
from app.services.links import attach_links, linked_collection, links_for_author, links_for_authors
from app.services.media_types import negotiate_author_representation
from app.services.pagination import PAGINATION_HEADER, pagination_header
from app.services.projections import to_author_full_out, to_author_out
from app.services.property_mapping import PropertyMappingRegistry
from app.services.sorting import translate

router = APIRouter()


@router.api_route("", methods=["GET", "HEAD"], name="get_authors")
def get_authors(
    request: Request,
    parameters: AuthorsResourceParameters = Depends(get_authors_parameters),
    mappings: PropertyMappingRegistry = Depends(get_property_mappings),
    db: Session = Depends(get_db),
):
    if not mappings.valid_mapping_exists_for(AuthorOut, Author, parameters.order_by):
        raise HTTPException(status_code=400, detail=f'Cannot sort by "{parameters.order_by}"')
    if not has_fields(AuthorOut, parameters.fields):
        raise HTTPException(status_code=400, detail=f'Unknown fields requested: "{parameters.fields}"')

    ordering = translate(parameters.order_by, mappings.get_mapping(AuthorOut, Author))
    page = catalog.get_authors_page(db, parameters, ordering)

    projections = [to_author_out(author) for author in page.items]
    shaped = shape_many(projections, parameters.fields, source_type=AuthorOut)
    # Links use the projection id: `fields` may leave "id" out of the record.
    records = [
        attach_links(record, links_for_author(request.url_for, projection.id))
        for record, projection in zip(shaped, projections)
    ]
    links = links_for_authors(request.url_for, parameters, page.has_next, page.has_previous)

    return JSONResponse(
        content=jsonable_encoder(linked_collection(records, links)),
        headers={PAGINATION_HEADER: pagination_header(page)},
    )


@router.options("", name="get_author_options")
def get_author_options():
    return Response(headers={"Allow": "GET,OPTIONS,POST"})


@router.get("/{author_id}", name="get_author")
def get_author(
    author_id: uuid.UUID,
    request: Request,
    fields: str | None = None,
    accept: str | None = Header(default=None),
    db: Session = Depends(get_db),
):
    representation = negotiate_author_representation(accept)
    if not has_fields(representation.projection, fields):
        raise HTTPException(status_code=400, detail=f'Unknown fields requested: "{fields}"')

    author = catalog.get_author(db, author_id)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")

    projection = to_author_full_out(author) if representation.projection is AuthorFullOut else to_author_out(author)
    record = shape_one(projection, fields)
    if representation.include_links:
        attach_links(record, links_for_author(request.url_for, author_id, fields))

    return JSONResponse(content=jsonable_encoder(record), media_type=representation.media_type)


@router.post("", status_code=201, name="create_author")
def create_author(payload: AuthorForCreation, request: Request, db: Session = Depends(get_db)):
    author = catalog.add_author(db, payload)
    catalog.save(db)
    db.refresh(author)

    record = attach_links(shape_one(to_author_out(author)), links_for_author(request.url_for, author.id))
    return JSONResponse(
        status_code=201,
        content=jsonable_encoder(record),
        headers={"Location": str(request.url_for("get_author", author_id=str(author.id)))},
    )


@router.delete("/{author_id}", status_code=204, name="delete_author")
def delete_author(author_id: uuid.UUID, db: Session = Depends(get_db)):
    author = catalog.get_author(db, author_id)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    catalog.delete_author(db, author)
    catalog.save(db)
    return Response(status_code=204)
