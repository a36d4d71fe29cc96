from datetime import date
from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.session import Base
from app.models.common import UUIDMixin

class Author(Base, UUIDMixin):
    __tablename__ = "authors"
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    date_of_death: Mapped[date | None] = mapped_column(Date, nullable=True)
    main_category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    courses: Mapped[list["Course"]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
        order_by="Course.title",
    )
