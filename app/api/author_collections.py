import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.catalog import AuthorForCreation
from app.services import catalog
from app.services.projections import to_author_out

router = APIRouter()


def _parse_ids_or_400(raw: str) -> list[uuid.UUID]:
    tokens = [token.strip() for token in str(raw or "").split(",") if token.strip()]
    if not tokens:
        raise HTTPException(status_code=400, detail="At least one author id is required")
    try:
        return [uuid.UUID(token) for token in tokens]
    except ValueError:
        raise HTTPException(status_code=400, detail="Author ids must be comma-separated UUIDs")


@router.get("/({ids})", name="get_author_collection")
def get_author_collection(ids: str, db: Session = Depends(get_db)):
    author_ids = list(dict.fromkeys(_parse_ids_or_400(ids)))
    authors = catalog.get_authors_by_ids(db, author_ids)
    if len(authors) != len(author_ids):
        raise HTTPException(status_code=404, detail="One or more authors were not found")
    return [to_author_out(author) for author in authors]


@router.post("", status_code=201, name="create_author_collection")
def create_author_collection(payload: List[AuthorForCreation], request: Request, db: Session = Depends(get_db)):
    if not payload:
        raise HTTPException(status_code=400, detail="At least one author is required")
    authors = [catalog.add_author(db, item) for item in payload]
    catalog.save(db)
    for author in authors:
        db.refresh(author)

    ids = ",".join(str(author.id) for author in authors)
    return JSONResponse(
        status_code=201,
        content=jsonable_encoder([to_author_out(author) for author in authors]),
        headers={"Location": str(request.url_for("get_author_collection", ids=ids))},
    )
