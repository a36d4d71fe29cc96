import json
import os
import unittest

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.schemas.resource_parameters import AuthorsResourceParameters
from app.services.pagination import Page, paginate, pagination_header, pagination_metadata


class PaginateTests(unittest.TestCase):
    def test_first_page(self):
        page = paginate(list(range(25)), 1, 10)
        self.assertEqual(page.items, tuple(range(10)))
        self.assertEqual(page.total_count, 25)
        self.assertEqual(page.total_pages, 3)
        self.assertFalse(page.has_previous)
        self.assertTrue(page.has_next)

    def test_last_partial_page(self):
        page = paginate(list(range(25)), 3, 10)
        self.assertEqual(page.items, (20, 21, 22, 23, 24))
        self.assertTrue(page.has_previous)
        self.assertFalse(page.has_next)

    def test_walking_all_pages_covers_every_item_once(self):
        source = [f"item-{i}" for i in range(47)]
        for page_size in (1, 5, 7, 20):
            first = paginate(source, 1, page_size)
            seen = []
            for number in range(1, first.total_pages + 1):
                page = paginate(source, number, page_size)
                self.assertEqual(page.has_next, page.current_page < page.total_pages)
                self.assertEqual(page.has_previous, page.current_page > 1)
                seen.extend(page.items)
            self.assertEqual(seen, source)

    def test_window_beyond_end_is_empty_not_an_error(self):
        page = paginate(list(range(5)), 4, 2)
        self.assertEqual(page.items, ())
        self.assertEqual(page.total_count, 5)
        self.assertEqual(page.total_pages, 3)
        self.assertTrue(page.has_previous)
        self.assertFalse(page.has_next)

    def test_empty_source(self):
        page = paginate([], 1, 10)
        self.assertEqual(page.items, ())
        self.assertEqual(page.total_pages, 0)
        self.assertFalse(page.has_next)
        self.assertFalse(page.has_previous)

    def test_metadata(self):
        page = Page(items=(1, 2), total_count=12, current_page=2, page_size=5)
        self.assertEqual(
            pagination_metadata(page),
            {"totalCount": 12, "pageSize": 5, "currentPage": 2, "totalPages": 3},
        )
        self.assertEqual(json.loads(pagination_header(page))["totalPages"], 3)


class ResourceParameterClampingTests(unittest.TestCase):
    def test_defaults(self):
        params = AuthorsResourceParameters()
        self.assertEqual(params.page_number, 1)
        self.assertEqual(params.page_size, 10)
        self.assertEqual(params.order_by, "name")

    def test_page_number_floors_at_one(self):
        self.assertEqual(AuthorsResourceParameters(page_number=0).page_number, 1)
        self.assertEqual(AuthorsResourceParameters(pageNumber=-4).page_number, 1)

    def test_page_size_is_clamped(self):
        self.assertEqual(AuthorsResourceParameters(page_size=0).page_size, 1)
        self.assertEqual(AuthorsResourceParameters(page_size=500).page_size, 20)
        self.assertEqual(AuthorsResourceParameters(pageSize=7).page_size, 7)

    def test_query_params_use_wire_names_and_skip_missing(self):
        params = AuthorsResourceParameters(fields="id,name", search_query="rum")
        self.assertEqual(
            params.as_query_params(),
            {"fields": "id,name", "orderBy": "name", "pageNumber": 1, "pageSize": 10, "searchQuery": "rum"},
        )


if __name__ == "__main__":
    unittest.main()
