"""HTTP tests for projects CRUD, link coercion, ordering and auditing."""

import unittest

from folio.models import Project
from folio.schemas.common import INT64_MAX
from folio_testing import ApiTestCase


class ProjectsTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.login()

    def create(self, **fields) -> int:
        body = {"title": "Site", "summary": "Portfolio"}
        body.update(fields)
        resp = self.client.post("/api/admin/projects", json=body)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["id"]

    def projects(self) -> list[dict]:
        return self.client.get("/api/admin/projects").json()["projects"]

    def mutations(self) -> list[dict]:
        return [e for e in self.audit_entries() if e["entity"] == "project"]


class TestCreateProject(ProjectsTestCase):
    def test_links_round_trip(self) -> None:
        links = [{"url": "https://x", "label": "x"}]
        project_id = self.create(links=links)
        project = self.projects()[0]
        self.assertEqual(project["id"], project_id)
        self.assertEqual(project["links"], links)

    def test_defaults(self) -> None:
        self.create()
        project = self.projects()[0]
        self.assertEqual(project["stack"], "")
        self.assertEqual(project["links"], [])
        self.assertIs(project["featured"], False)
        self.assertEqual(project["sort"], 0)
        self.assertIsNotNone(project["created_at"])
        self.assertIsNotNone(project["updated_at"])

    def test_coercion(self) -> None:
        self.create(
            title="  Trimmed  ",
            stack=" FastAPI, SQLite ",
            links="https://not-a-list",
            featured=1,
        )
        project = self.projects()[0]
        self.assertEqual(project["title"], "Trimmed")
        self.assertEqual(project["stack"], "FastAPI, SQLite")
        self.assertEqual(project["links"], [])
        self.assertIs(project["featured"], True)

    def test_non_object_links_are_dropped(self) -> None:
        self.create(links=[{"url": "https://a"}, "https://b", 3, {"url": "https://c"}])
        self.assertEqual(self.projects()[0]["links"], [{"url": "https://a"}, {"url": "https://c"}])

    def test_title_and_summary_required(self) -> None:
        for body in (
            {"summary": "s"},
            {"title": "t"},
            {"title": " ", "summary": "s"},
            {"title": "t", "summary": ""},
        ):
            with self.subTest(body=body):
                resp = self.client.post("/api/admin/projects", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertIn("error", resp.json())
        self.assertEqual(self.projects(), [])
        self.assertEqual(self.mutations(), [])

    def test_audited_with_title(self) -> None:
        project_id = self.create(title="Folio")
        entries = self.mutations()
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0]["action"], "create")
        self.assertEqual(entries[0]["entity_id"], project_id)
        self.assertEqual(entries[0]["meta"], {"title": "Folio"})

    def test_blank_title_message_names_field_once(self) -> None:
        resp = self.client.post("/api/admin/projects", json={"title": " ", "summary": "s"})
        self.assertEqual(resp.json(), {"error": "title: is required"})

    def test_sort_outside_int64_rejected(self) -> None:
        resp = self.client.post(
            "/api/admin/projects", json={"title": "t", "summary": "s", "sort": 10**20}
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("sort", resp.json()["error"])
        self.assertEqual(self.projects(), [])
        self.assertEqual(self.mutations(), [])


class TestListProjects(ProjectsTestCase):
    def test_featured_first_then_sort_then_newest(self) -> None:
        old = self.create(title="old", sort=1)
        featured = self.create(title="featured", featured=True, sort=5)
        new = self.create(title="new", sort=1)
        first = self.create(title="first", sort=0)
        order = [p["id"] for p in self.projects()]
        self.assertEqual(order, [featured, first, new, old])

    def test_malformed_stored_links_read_as_empty(self) -> None:
        project_id = self.create(links=[{"url": "https://x"}])
        db = self.SessionFactory()
        try:
            db.get(Project, project_id).links_json = "{not json"
            db.commit()
        finally:
            db.close()
        self.assertEqual(self.projects()[0]["links"], [])


class TestUpdateProject(ProjectsTestCase):
    def test_full_replace(self) -> None:
        project_id = self.create(stack="Go", links=[{"url": "https://a"}], featured=True, sort=4)
        resp = self.client.put(
            f"/api/admin/projects/{project_id}",
            json={"title": "Renamed", "summary": "New summary"},
        )
        self.assertEqual(resp.json(), {"ok": True})
        project = self.projects()[0]
        self.assertEqual(project["title"], "Renamed")
        self.assertEqual(project["summary"], "New summary")
        self.assertEqual(project["stack"], "")
        self.assertEqual(project["links"], [])
        self.assertIs(project["featured"], False)
        self.assertEqual(project["sort"], 0)
        self.assertEqual([e["action"] for e in self.mutations()], ["create", "update"])

    def test_unknown_id_is_silent_no_op(self) -> None:
        resp = self.client.put(
            "/api/admin/projects/77", json={"title": "t", "summary": "s"}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.projects(), [])
        self.assertEqual(self.mutations()[0]["entity_id"], 77)

    def test_invalid_update_changes_nothing(self) -> None:
        project_id = self.create(title="Keep")
        resp = self.client.put(
            f"/api/admin/projects/{project_id}", json={"title": "", "summary": "s"}
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.projects()[0]["title"], "Keep")
        self.assertEqual(len(self.mutations()), 1)


class TestDeleteProject(ProjectsTestCase):
    def test_delete(self) -> None:
        project_id = self.create()
        resp = self.client.delete(f"/api/admin/projects/{project_id}")
        self.assertEqual(resp.json(), {"ok": True})
        self.assertEqual(self.projects(), [])
        self.assertEqual(self.mutations()[-1]["action"], "delete")

    def test_delete_unknown_id_succeeds(self) -> None:
        resp = self.client.delete("/api/admin/projects/5")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(self.mutations()), 1)

    def test_out_of_range_id_rejected(self) -> None:
        for path_id in ("100000000000000000000", str(INT64_MAX + 1), "0"):
            with self.subTest(path_id=path_id):
                deleted = self.client.delete(f"/api/admin/projects/{path_id}")
                self.assertEqual(deleted.status_code, 400)
                self.assertIn("project_id", deleted.json()["error"])
                updated = self.client.put(
                    f"/api/admin/projects/{path_id}", json={"title": "t", "summary": "s"}
                )
                self.assertEqual(updated.status_code, 400)
                self.assertIn("project_id", updated.json()["error"])
        self.assertEqual(self.mutations(), [])


if __name__ == "__main__":
    unittest.main()
