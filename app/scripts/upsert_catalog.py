from __future__ import annotations

from sqlalchemy.orm import Session

from app.data.catalog_seed import CATALOG_AUTHORS
from app.db.session import SessionLocal
from app.models.author import Author
from app.models.course import Course


def upsert_catalog(db: Session, authors: list[dict]) -> tuple[int, int]:
    created = 0
    updated = 0

    for item in authors:
        first_name = str(item["first_name"]).strip()
        last_name = str(item["last_name"]).strip()
        main_category = str(item["main_category"]).strip()
        date_of_death = item.get("date_of_death")

        row = db.query(Author).filter(Author.first_name == first_name, Author.last_name == last_name).first()
        if row is None:
            row = Author(
                first_name=first_name,
                last_name=last_name,
                date_of_birth=item["date_of_birth"],
                date_of_death=date_of_death,
                main_category=main_category,
            )
            db.add(row)
            created += 1
        else:
            changed = False
            if row.date_of_birth != item["date_of_birth"]:
                row.date_of_birth = item["date_of_birth"]
                changed = True
            if row.date_of_death != date_of_death:
                row.date_of_death = date_of_death
                changed = True
            if row.main_category != main_category:
                row.main_category = main_category
                changed = True
            if changed:
                db.add(row)
                updated += 1

        existing_titles = {course.title for course in row.courses}
        for course in item.get("courses") or []:
            title = str(course["title"]).strip()
            if title in existing_titles:
                continue
            row.courses.append(Course(title=title, description=course.get("description")))
            existing_titles.add(title)

    db.commit()
    return created, updated


def main() -> None:
    db = SessionLocal()
    try:
        created, updated = upsert_catalog(db, CATALOG_AUTHORS)
        total = db.query(Author).count()
    finally:
        db.close()
    print(f"catalog upsert done: created={created}, updated={updated}, total={total}")


if __name__ == "__main__":
    main()
