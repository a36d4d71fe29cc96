import uuid
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


# Projections: what the API exposes, and what data shaping works on.

class AuthorOut(BaseModel):
    id: uuid.UUID
    name: str
    age: int
    main_category: str


class AuthorFullOut(BaseModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    date_of_birth: date
    date_of_death: Optional[date] = None
    main_category: str


class CourseOut(BaseModel):
    id: uuid.UUID
    author_id: uuid.UUID
    title: str
    description: Optional[str] = None


# Payloads.

class CourseForManipulation(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1500)

    @model_validator(mode="after")
    def _title_differs_from_description(self):
        if self.description is not None and self.title.strip() == self.description.strip():
            raise ValueError("Title must be different from description.")
        return self


class CourseForCreation(CourseForManipulation):
    pass


class CourseForUpdate(CourseForManipulation):
    description: str = Field(..., max_length=1500)


class AuthorForCreation(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    date_of_death: Optional[date] = None
    main_category: str = Field(..., min_length=1, max_length=50)
    courses: List[CourseForCreation] = []

    @model_validator(mode="after")
    def _death_after_birth(self):
        if self.date_of_death is not None and self.date_of_death < self.date_of_birth:
            raise ValueError("date_of_death must not precede date_of_birth.")
        return self
