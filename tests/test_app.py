"""Tests for application wiring: root redirect, health, error bodies, prefix, secret sharing."""

import unittest

from adonstreet.api.auth import AuthGate
from tests.support import ApiTestCase


class TestAppWiring(ApiTestCase):
    def test_root_redirects_to_docs(self) -> None:
        resp = self.client.get("/", follow_redirects=False)
        self.assertIn(resp.status_code, (302, 307))
        self.assertEqual(resp.headers["location"], "/api-docs")

    def test_docs_served(self) -> None:
        self.assertEqual(self.client.get("/api-docs").status_code, 200)
        schema = self.client.get("/openapi.json").json()
        self.assertIn("/Users/register", schema["paths"])
        self.assertIn("/hoardings/{record_id}", schema["paths"])

    def test_health(self) -> None:
        resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"status": "ok", "environment": "dev", "auth_enabled": True, "database": "connected"},
        )

    def test_unknown_route_uses_message_body(self) -> None:
        resp = self.client.get("/billboards")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Not Found"})

    def test_process_time_header(self) -> None:
        resp = self.client.get("/health/")
        self.assertIn("x-process-time", resp.headers)

    def test_login_and_gate_share_one_token_service(self) -> None:
        gate = self.app.state.auth_gate
        self.assertIsInstance(gate, AuthGate)
        self.assertIs(gate.token_service, self.app.state.token_service)

    def test_cors_allows_configured_origin(self) -> None:
        resp = self.client.options(
            "/Users/login",
            headers={"Origin": "http://localhost:4200", "Access-Control-Request-Method": "POST"},
        )
        self.assertEqual(resp.headers.get("access-control-allow-origin"), "http://localhost:4200")

    def test_openapi_documents_validation_error_body(self) -> None:
        schema = self.client.get("/openapi.json").json()
        ref = {"$ref": "#/components/schemas/ValidationErrorResponse"}
        for path, method in (("/vehicles", "post"), ("/Users/register", "post"), ("/Users/{user_id}", "put")):
            with self.subTest(path=path, method=method):
                invalid = schema["paths"][path][method]["responses"]["422"]
                self.assertEqual(invalid["description"], "Invalid request")
                self.assertEqual(invalid["content"]["application/json"]["schema"], ref)
        self.assertEqual(
            set(schema["components"]["schemas"]["ValidationErrorResponse"]["required"]),
            {"message", "errors"},
        )


class TestApiPrefix(ApiTestCase):
    settings_overrides = {"API_PREFIX": "/api"}

    def test_routes_mounted_under_prefix(self) -> None:
        resp = self.client.post(
            "/api/Users/register",
            json={"userName": "p", "emailId": "p@x.com", "password": "p"},
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(self.client.post("/Users/register", json={}).status_code, 404)


if __name__ == "__main__":
    unittest.main()
