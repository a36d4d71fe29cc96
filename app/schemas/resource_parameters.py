from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings


class AuthorsResourceParameters(BaseModel):
    """
    Query parameters of the author collection.

    Paging values are clamped here, so everything downstream can trust them:
    page number floors at 1, page size stays inside [1, MAX_PAGE_SIZE].
    Aliases are the wire names used in query strings and generated links.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    fields: Optional[str] = None
    order_by: str = Field(default=settings.DEFAULT_AUTHORS_ORDER_BY, alias="orderBy")
    page_number: int = Field(default=1, alias="pageNumber")
    page_size: int = Field(default=settings.DEFAULT_PAGE_SIZE, alias="pageSize")
    main_category: Optional[str] = Field(default=None, alias="mainCategory")
    search_query: Optional[str] = Field(default=None, alias="searchQuery")

    @field_validator("page_number")
    @classmethod
    def _floor_page_number(cls, value: int) -> int:
        return max(1, value)

    @field_validator("page_size")
    @classmethod
    def _clamp_page_size(cls, value: int) -> int:
        return min(max(1, value), settings.MAX_PAGE_SIZE)

    def for_page(self, page_number: int) -> "AuthorsResourceParameters":
        return self.model_copy(update={"page_number": page_number})

    def as_query_params(self) -> dict[str, str | int]:
        return self.model_dump(by_alias=True, exclude_none=True)
