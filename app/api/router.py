from fastapi import APIRouter
from app.api import authors, courses, author_collections

router = APIRouter()
router.include_router(authors.router, prefix="/authors", tags=["Authors"])
router.include_router(courses.router, prefix="/authors/{author_id}/courses", tags=["Courses"])
router.include_router(author_collections.router, prefix="/authorcollections", tags=["AuthorCollections"])
