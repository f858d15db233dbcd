"""HTTP tests for the singleton hero content."""

import unittest

from folio.services.bootstrap import DEFAULT_HERO_HEADLINE, DEFAULT_HERO_SUBTITLE
from folio_testing import ADMIN_USERNAME, ApiTestCase


class TestContent(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.login()

    def test_get_returns_seeded_row_without_id(self) -> None:
        resp = self.client.get("/api/admin/content")
        self.assertEqual(resp.status_code, 200)
        content = resp.json()["content"]
        self.assertEqual(set(content), {"hero_headline", "hero_subtitle", "updated_at"})
        self.assertEqual(content["hero_headline"], DEFAULT_HERO_HEADLINE)
        self.assertEqual(content["hero_subtitle"], DEFAULT_HERO_SUBTITLE)

    def test_update_round_trip_trims_and_audits_once(self) -> None:
        resp = self.client.put(
            "/api/admin/content",
            json={"hero_headline": "  Hello  ", "hero_subtitle": "\tWorld\n"},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"ok": True})

        content = self.client.get("/api/admin/content").json()["content"]
        self.assertEqual(content["hero_headline"], "Hello")
        self.assertEqual(content["hero_subtitle"], "World")

        updates = [e for e in self.audit_entries() if e["action"] == "update"]
        self.assertEqual(len(updates), 1)
        self.assertEqual(updates[0]["entity"], "content")
        self.assertEqual(updates[0]["entity_id"], 1)
        self.assertEqual(updates[0]["actor"], ADMIN_USERNAME)

    def test_both_fields_required(self) -> None:
        for body in (
            {},
            {"hero_headline": "Only headline"},
            {"hero_subtitle": "Only subtitle"},
            {"hero_headline": "   ", "hero_subtitle": "x"},
            {"hero_headline": "x", "hero_subtitle": None},
        ):
            with self.subTest(body=body):
                resp = self.client.put("/api/admin/content", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertIn("hero_", resp.json()["error"])
        content = self.client.get("/api/admin/content").json()["content"]
        self.assertEqual(content["hero_headline"], DEFAULT_HERO_HEADLINE)
        self.assertEqual([e["action"] for e in self.audit_entries()], ["login"])

    def test_blank_field_message_names_field_once(self) -> None:
        resp = self.client.put(
            "/api/admin/content", json={"hero_headline": "  ", "hero_subtitle": "x"}
        )
        self.assertEqual(resp.json(), {"error": "hero_headline: is required"})

    def test_invalid_json_body(self) -> None:
        resp = self.client.put(
            "/api/admin/content",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())


if __name__ == "__main__":
    unittest.main()
