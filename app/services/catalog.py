"""
Catalog persistence (authors and courses).

The storage side of the collection read: filter, order by a ResolvedOrdering,
count, and fetch one page of rows.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.author import Author
from app.models.course import Course
from app.schemas.catalog import AuthorForCreation, CourseForManipulation
from app.schemas.resource_parameters import AuthorsResourceParameters
from app.services.pagination import Page, paginate_query
from app.services.sorting import ResolvedOrdering, apply_ordering

_LOG = logging.getLogger("app.catalog")


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def get_authors_page(db: Session, parameters: AuthorsResourceParameters, ordering: ResolvedOrdering) -> Page[Author]:
    q = db.query(Author)

    main_category = (parameters.main_category or "").strip()
    if main_category:
        q = q.filter(Author.main_category == main_category)

    search_query = (parameters.search_query or "").strip()
    if search_query:
        pattern = f"%{_escape_like(search_query)}%"
        q = q.filter(
            or_(
                Author.main_category.ilike(pattern, escape="\\"),
                Author.first_name.ilike(pattern, escape="\\"),
                Author.last_name.ilike(pattern, escape="\\"),
            )
        )

    q = apply_ordering(q, Author, ordering)
    # Primary key as last tie-breaker keeps page windows stable.
    q = q.order_by(Author.id.asc())
    return paginate_query(q, parameters.page_number, parameters.page_size)


def get_author(db: Session, author_id: uuid.UUID) -> Author | None:
    return db.get(Author, author_id)


def author_exists(db: Session, author_id: uuid.UUID) -> bool:
    return db.query(Author.id).filter(Author.id == author_id).first() is not None


def get_authors_by_ids(db: Session, author_ids: Iterable[uuid.UUID]) -> list[Author]:
    ids = list(dict.fromkeys(author_ids))
    if not ids:
        return []
    rows = db.query(Author).filter(Author.id.in_(ids)).all()
    by_id = {row.id: row for row in rows}
    return [by_id[author_id] for author_id in ids if author_id in by_id]


def add_author(db: Session, payload: AuthorForCreation) -> Author:
    author = Author(
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        date_of_birth=payload.date_of_birth,
        date_of_death=payload.date_of_death,
        main_category=payload.main_category.strip(),
    )
    author.courses = [Course(title=item.title, description=item.description) for item in payload.courses]
    db.add(author)
    return author


def delete_author(db: Session, author: Author) -> None:
    db.delete(author)


def get_courses(db: Session, author_id: uuid.UUID) -> list[Course]:
    return db.query(Course).filter(Course.author_id == author_id).order_by(Course.title.asc(), Course.id.asc()).all()


def get_course(db: Session, author_id: uuid.UUID, course_id: uuid.UUID) -> Course | None:
    return db.query(Course).filter(Course.author_id == author_id, Course.id == course_id).first()


def add_course(
    db: Session,
    author_id: uuid.UUID,
    payload: CourseForManipulation,
    *,
    course_id: uuid.UUID | None = None,
) -> Course:
    course = Course(author_id=author_id, title=payload.title, description=payload.description)
    if course_id is not None:
        course.id = course_id
    db.add(course)
    return course


def update_course(db: Session, course: Course, payload: CourseForManipulation) -> Course:
    for key, value in payload.model_dump().items():
        setattr(course, key, value)
    db.add(course)
    return course


def delete_course(db: Session, course: Course) -> None:
    db.delete(course)


def save(db: Session) -> None:
    db.commit()
    _LOG.debug("catalog changes committed")
