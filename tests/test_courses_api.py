import unittest
import uuid

from tests.base import CatalogApiBase


class CoursesApiTests(CatalogApiBase):
    def setUp(self):
        super().setUp()
        self.author_id = self._add_author(
            "Berry",
            "Eldritch",
            courses=[("Overthrowing Mutiny", "Tips to avoid mutiny."), ("Commandeering a Ship", "Rough waters.")],
        )
        self.base = f"/api/authors/{self.author_id}/courses"

    def test_list_is_ordered_by_title(self):
        response = self.client.get(self.base)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([course["title"] for course in body], ["Commandeering a Ship", "Overthrowing Mutiny"])
        self.assertTrue(all(course["author_id"] == str(self.author_id) for course in body))

    def test_unknown_author_is_404(self):
        self.assertEqual(self.client.get(f"/api/authors/{uuid.uuid4()}/courses").status_code, 404)
        response = self.client.post(f"/api/authors/{uuid.uuid4()}/courses", json={"title": "X"})
        self.assertEqual(response.status_code, 404)

    def test_create_then_get(self):
        response = self.client.post(self.base, json={"title": "Singing Shanties", "description": "Loudly."})
        self.assertEqual(response.status_code, 201)
        created = response.json()
        self.assertTrue(response.headers["location"].endswith(f"{self.base}/{created['id']}"))

        response = self.client.get(f"{self.base}/{created['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["description"], "Loudly.")

    def test_title_equal_to_description_is_422(self):
        response = self.client.post(self.base, json={"title": "Same", "description": "Same"})
        self.assertEqual(response.status_code, 422)
        self.assertTrue(response.headers["content-type"].startswith("application/problem+json"))

    def test_put_updates_existing_course(self):
        course_id = self.client.get(self.base).json()[0]["id"]
        response = self.client.put(f"{self.base}/{course_id}", json={"title": "New title", "description": "New text"})
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get(f"{self.base}/{course_id}").json()["title"], "New title")

    def test_put_requires_description(self):
        course_id = self.client.get(self.base).json()[0]["id"]
        response = self.client.put(f"{self.base}/{course_id}", json={"title": "New title"})
        self.assertEqual(response.status_code, 422)

    def test_put_on_missing_course_creates_it(self):
        course_id = uuid.uuid4()
        response = self.client.put(f"{self.base}/{course_id}", json={"title": "Upserted", "description": "Fresh"})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["id"], str(course_id))
        self.assertEqual(self.client.get(f"{self.base}/{course_id}").status_code, 200)

    def test_delete(self):
        course_id = self.client.get(self.base).json()[0]["id"]
        self.assertEqual(self.client.delete(f"{self.base}/{course_id}").status_code, 204)
        self.assertEqual(self.client.get(f"{self.base}/{course_id}").status_code, 404)
        self.assertEqual(self.client.delete(f"{self.base}/{course_id}").status_code, 404)

    def test_course_of_another_author_is_404(self):
        other = self._add_author("Nancy", "Rye")
        course_id = self.client.get(self.base).json()[0]["id"]
        self.assertEqual(self.client.get(f"/api/authors/{other}/courses/{course_id}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
