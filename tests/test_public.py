"""HTTP tests for the public aggregate endpoint, health check, CORS and error envelope."""

import unittest

from folio.core.config import settings as app_settings
from folio_testing import ApiTestCase


class TestPublicContent(ApiTestCase):
    def test_no_auth_required(self) -> None:
        resp = self.client.get("/api/public/content")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(set(body), {"content", "skills", "projects"})
        self.assertEqual(body["skills"], [])
        self.assertEqual(body["projects"], [])
        self.assertIn("hero_headline", body["content"])

    def test_reflects_admin_changes(self) -> None:
        self.login()
        self.client.put(
            "/api/admin/content", json={"hero_headline": "H", "hero_subtitle": "S"}
        )
        self.client.post("/api/admin/skills", json={"label": "Go", "percent": 80})
        self.client.post(
            "/api/admin/projects",
            json={"title": "T", "summary": "S", "links": [{"url": "https://x", "label": "x"}]},
        )
        self.client.post("/api/logout")

        body = self.client.get("/api/public/content").json()
        self.assertEqual(body["content"]["hero_headline"], "H")
        self.assertEqual([s["label"] for s in body["skills"]], ["Go"])
        self.assertEqual(body["projects"][0]["links"], [{"url": "https://x", "label": "x"}])


class TestCors(ApiTestCase):
    def test_allowed_origin_is_echoed_with_credentials(self) -> None:
        origin = app_settings.ALLOWED_ORIGIN
        resp = self.client.get("/api/public/content", headers={"Origin": origin})
        self.assertEqual(resp.headers["access-control-allow-origin"], origin)
        self.assertEqual(resp.headers["access-control-allow-credentials"], "true")

    def test_preflight(self) -> None:
        origin = app_settings.ALLOWED_ORIGIN
        resp = self.client.options(
            "/api/admin/skills",
            headers={
                "Origin": origin,
                "Access-Control-Request-Method": "PUT",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["access-control-allow-origin"], origin)
        self.assertIn("PUT", resp.headers["access-control-allow-methods"])

    def test_other_origin_not_echoed(self) -> None:
        resp = self.client.get(
            "/api/public/content", headers={"Origin": "https://evil.example"}
        )
        self.assertNotIn("access-control-allow-origin", resp.headers)


class TestHealthAndErrors(ApiTestCase):
    def test_health(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"status": "ok", "environment": self.settings.APP_ENV, "database": "connected"},
        )

    def test_unknown_route_uses_error_envelope(self) -> None:
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not Found"})

    def test_security_headers(self) -> None:
        resp = self.client.get("/api/public/content")
        self.assertEqual(resp.headers["x-content-type-options"], "nosniff")


class TestBodySizeLimit(ApiTestCase):
    def test_oversized_body_rejected_before_routing(self) -> None:
        self.login()
        resp = self.client.post(
            "/api/admin/skills",
            content=b"x" * (app_settings.MAX_BODY_BYTES + 1),
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 413)
        self.assertEqual(resp.json(), {"error": "Request body too large"})
        self.assertEqual(resp.headers["x-content-type-options"], "nosniff")
        self.assertEqual([e["action"] for e in self.audit_entries()], ["login"])

    def test_body_at_limit_reaches_validation(self) -> None:
        self.login()
        resp = self.client.post(
            "/api/admin/skills",
            content=b" " * app_settings.MAX_BODY_BYTES,
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)


if __name__ == "__main__":
    unittest.main()
