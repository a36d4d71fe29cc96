"""
Entity -> projection copies.

Field-for-field copies from storage rows into the response models that data
shaping works on, plus the computed display fields (`name`, `age`).
"""

from __future__ import annotations

from datetime import date

from app.models.author import Author
from app.models.course import Course
from app.schemas.catalog import AuthorFullOut, AuthorOut, CourseOut


def current_age(date_of_birth: date, date_of_death: date | None = None, today: date | None = None) -> int:
    # Age at death for deceased authors.
    until = date_of_death or today or date.today()
    age = until.year - date_of_birth.year
    if (until.month, until.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def to_author_out(author: Author, *, today: date | None = None) -> AuthorOut:
    return AuthorOut(
        id=author.id,
        name=f"{author.first_name} {author.last_name}",
        age=current_age(author.date_of_birth, author.date_of_death, today),
        main_category=author.main_category,
    )


def to_author_full_out(author: Author) -> AuthorFullOut:
    return AuthorFullOut(
        id=author.id,
        first_name=author.first_name,
        last_name=author.last_name,
        date_of_birth=author.date_of_birth,
        date_of_death=author.date_of_death,
        main_category=author.main_category,
    )


def to_course_out(course: Course) -> CourseOut:
    return CourseOut(
        id=course.id,
        author_id=course.author_id,
        title=course.title,
        description=course.description,
    )
