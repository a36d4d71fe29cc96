import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.course import Course
from app.schemas.catalog import CourseForCreation, CourseForUpdate
from app.services import catalog
from app.services.projections import to_course_out

router = APIRouter()


def _author_or_404(db: Session, author_id: uuid.UUID) -> None:
    if not catalog.author_exists(db, author_id):
        raise HTTPException(status_code=404, detail="Author not found")


def _created(request: Request, author_id: uuid.UUID, course: Course) -> JSONResponse:
    location = request.url_for("get_course_for_author", author_id=str(author_id), course_id=str(course.id))
    return JSONResponse(
        status_code=201,
        content=jsonable_encoder(to_course_out(course)),
        headers={"Location": str(location)},
    )


@router.get("", name="get_courses_for_author")
def get_courses_for_author(author_id: uuid.UUID, db: Session = Depends(get_db)):
    _author_or_404(db, author_id)
    return [to_course_out(course) for course in catalog.get_courses(db, author_id)]


@router.get("/{course_id}", name="get_course_for_author")
def get_course_for_author(author_id: uuid.UUID, course_id: uuid.UUID, db: Session = Depends(get_db)):
    _author_or_404(db, author_id)
    course = catalog.get_course(db, author_id, course_id)
    if course is None:
        raise HTTPException(status_code=404, detail="Course not found")
    return to_course_out(course)


@router.post("", status_code=201, name="create_course_for_author")
def create_course_for_author(
    author_id: uuid.UUID,
    payload: CourseForCreation,
    request: Request,
    db: Session = Depends(get_db),
):
    _author_or_404(db, author_id)
    course = catalog.add_course(db, author_id, payload)
    catalog.save(db)
    db.refresh(course)
    return _created(request, author_id, course)


@router.put("/{course_id}", name="update_course_for_author")
def update_course_for_author(
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    payload: CourseForUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    _author_or_404(db, author_id)
    course = catalog.get_course(db, author_id, course_id)
    if course is None:
        # Upsert: PUT on a missing course creates it under the client-chosen id.
        course = catalog.add_course(db, author_id, payload, course_id=course_id)
        catalog.save(db)
        db.refresh(course)
        return _created(request, author_id, course)

    catalog.update_course(db, course, payload)
    catalog.save(db)
    return Response(status_code=204)


@router.delete("/{course_id}", status_code=204, name="delete_course_for_author")
def delete_course_for_author(author_id: uuid.UUID, course_id: uuid.UUID, db: Session = Depends(get_db)):
    _author_or_404(db, author_id)
    course = catalog.get_course(db, author_id, course_id)
    if course is None:
        raise HTTPException(status_code=404, detail="Course not found")
    catalog.delete_course(db, course)
    catalog.save(db)
    return Response(status_code=204)
