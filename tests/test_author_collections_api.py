import unittest
import uuid

from tests.base import CatalogApiBase


def _author(first_name: str, **extra) -> dict:
    return {"first_name": first_name, "last_name": "Doe", "date_of_birth": "1980-01-01", "main_category": "Maps", **extra}


class AuthorCollectionsApiTests(CatalogApiBase):
    def test_create_and_fetch_collection(self):
        response = self.client.post(
            "/api/authorcollections",
            json=[_author("Jane"), _author("John", courses=[{"title": "Knots"}])],
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual([item["name"] for item in body], ["Jane Doe", "John Doe"])

        ids = ",".join(item["id"] for item in body)
        self.assertTrue(response.headers["location"].endswith(f"/api/authorcollections/({ids})"))

        response = self.client.get(f"/api/authorcollections/({ids})")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["id"] for item in response.json()], [item["id"] for item in body])

    def test_requested_order_is_kept_and_duplicates_collapse(self):
        first = self._add_author("Berry", "Eldritch")
        second = self._add_author("Nancy", "Rye")
        response = self.client.get(f"/api/authorcollections/({second}, {first},{second})")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["id"] for item in response.json()], [str(second), str(first)])

    def test_missing_author_is_404(self):
        known = self._add_author("Berry", "Eldritch")
        response = self.client.get(f"/api/authorcollections/({known},{uuid.uuid4()})")
        self.assertEqual(response.status_code, 404)

    def test_malformed_ids_are_400(self):
        self.assertEqual(self.client.get("/api/authorcollections/(not-a-uuid)").status_code, 400)
        self.assertEqual(self.client.get("/api/authorcollections/( , )").status_code, 400)

    def test_empty_collection_is_400(self):
        self.assertEqual(self.client.post("/api/authorcollections", json=[]).status_code, 400)


if __name__ == "__main__":
    unittest.main()
