from typing import Optional

from fastapi import Query, Request

from app.core.config import settings
from app.schemas.resource_parameters import AuthorsResourceParameters
from app.services.property_mapping import PropertyMappingRegistry

def get_property_mappings(request: Request) -> PropertyMappingRegistry:
    return request.app.state.property_mappings

def get_authors_parameters(
    fields: Optional[str] = Query(default=None),
    order_by: str = Query(default=settings.DEFAULT_AUTHORS_ORDER_BY, alias="orderBy"),
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int = Query(default=settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
    main_category: Optional[str] = Query(default=None, alias="mainCategory"),
    search_query: Optional[str] = Query(default=None, alias="searchQuery"),
) -> AuthorsResourceParameters:
    return AuthorsResourceParameters(
        fields=fields,
        order_by=order_by,
        page_number=page_number,
        page_size=page_size,
        main_category=main_category,
        search_query=search_query,
    )
