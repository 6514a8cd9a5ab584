"""Tests for the auth gate: PASS attaches claims, every other case rejects."""

import asyncio
import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock, patch

import jwt
from fastapi import HTTPException
from starlette.requests import Request

from adonstreet.api.auth import AuthGate, security
from adonstreet.core.security import TokenService
from adonstreet.schemas.auth import TokenClaims
from tests.support import TEST_SECRET, ApiTestCase


def _request(authorization: str | None = None) -> Request:
    """Bare ASGI request carrying an optional Authorization header."""
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode("latin-1")))
    return Request({"type": "http", "method": "GET", "path": "/vehicles", "headers": headers})


def _token(secret: str = TEST_SECRET, **claims: object) -> str:
    now = datetime.now(UTC)
    payload = {"sub": "1", "role": None, "iat": now, "exp": now + timedelta(hours=1)}
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


def _check(gate: AuthGate, request: Request) -> TokenClaims:
    """Extract credentials the way the route dependency does, then run the gate."""
    credentials = asyncio.run(security(request))
    return gate(request, credentials)


class TestAuthGateUnit(unittest.TestCase):
    """AuthGate called directly on a request."""

    def setUp(self) -> None:
        self.service = TokenService(TEST_SECRET)
        self.gate = AuthGate(self.service)

    def test_missing_header_is_403_without_decoding(self) -> None:
        service = MagicMock()
        gate = AuthGate(service)
        with self.assertRaises(HTTPException) as ctx:
            _check(gate, _request())
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.detail, "No token provided")
        service.decode.assert_not_called()

    def test_empty_header_counts_as_missing(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            _check(self.gate, _request(""))
        self.assertEqual(ctx.exception.status_code, 403)

    def test_valid_token_attaches_claims_to_request(self) -> None:
        request = _request(f"Bearer {self.service.issue(42, 'admin')}")
        claims = _check(self.gate, request)
        self.assertEqual(claims.id, 42)
        self.assertEqual(claims.role, "admin")
        self.assertIs(request.state.claims, claims)

    def test_scheme_is_case_insensitive(self) -> None:
        claims = _check(self.gate, _request(f"bearer {self.service.issue(5, None)}"))
        self.assertEqual(claims.id, 5)
        self.assertIsNone(claims.role)

    def test_rejected_tokens_are_401(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=2)
        cases = {
            "garbage": "Bearer garbage",
            "no token": "Bearer",
            "blank token": "Bearer    ",
            "wrong scheme": f"Basic {self.service.issue(1, None)}",
            "expired": "Bearer " + _token(iat=past, exp=past + timedelta(hours=1)),
            "other secret": "Bearer " + _token(secret="some-other-secret-0123456789abcdef"),
            "non-integer subject": "Bearer " + _token(sub="danny"),
        }
        for name, header in cases.items():
            with self.subTest(case=name):
                request = _request(header)
                with self.assertRaises(HTTPException) as ctx:
                    _check(self.gate, request)
                self.assertEqual(ctx.exception.status_code, 401)
                self.assertEqual(ctx.exception.detail, "Invalid or expired token")
                self.assertEqual(ctx.exception.headers, {"WWW-Authenticate": "Bearer"})
                self.assertFalse(hasattr(request.state, "claims"))

    def test_claims_are_per_request(self) -> None:
        first = _request(f"Bearer {self.service.issue(1, None)}")
        second = _request(f"Bearer {self.service.issue(2, None)}")
        _check(self.gate, first)
        _check(self.gate, second)
        self.assertEqual(first.state.claims.id, 1)
        self.assertEqual(second.state.claims.id, 2)


class TestAuthGateOnRoutes(ApiTestCase):
    """The gate as wired onto protected routes."""

    def test_no_header_is_403_before_decoding(self) -> None:
        with patch.object(self.app.state.token_service, "decode") as decode:
            resp = self.client.get("/vehicles")
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"message": "No token provided"})
        decode.assert_not_called()

    def test_garbage_token_is_401(self) -> None:
        resp = self.client.get("/vehicles", headers={"Authorization": "Bearer garbage"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid or expired token"})
        self.assertEqual(resp.headers["WWW-Authenticate"], "Bearer")

    def test_expired_token_is_401(self) -> None:
        past = datetime.now(UTC) - timedelta(minutes=61)
        token = _token(iat=past, exp=past + timedelta(minutes=60))
        resp = self.client.get("/dashboard/counts", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 401)

    def test_every_protected_family_is_gated(self) -> None:
        for path in ("/Users", "/Users/1", "/vehicles", "/societies", "/balloons",
                     "/screens", "/hoardings", "/dashboard/counts", "/Users/me"):
            with self.subTest(path=path):
                self.assertEqual(self.client.get(path).status_code, 403)

    def test_register_and_login_are_public(self) -> None:
        self.assertEqual(self.register().status_code, 201)
        self.assertEqual(self.login().status_code, 200)

    def test_current_user_from_token(self) -> None:
        headers = self.auth_headers()
        resp = self.client.get("/Users/me", headers=headers)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["emailId"], "danny@gmail.com")
        self.assertNotIn("password", body)
        self.assertNotIn("password_hash", body)

    def test_bearer_scheme_in_openapi(self) -> None:
        schema = self.client.get("/openapi.json").json()
        self.assertEqual(
            schema["components"]["securitySchemes"]["HTTPBearer"],
            {"type": "http", "scheme": "bearer"},
        )
        paths = schema["paths"]
        bearer = [{"HTTPBearer": []}]
        self.assertEqual(paths["/vehicles"]["get"]["security"], bearer)
        self.assertEqual(paths["/Users/{user_id}"]["put"]["security"], bearer)
        self.assertEqual(paths["/dashboard/counts"]["get"]["security"], bearer)
        self.assertEqual(paths["/Users/me"]["get"]["security"], bearer)
        self.assertNotIn("security", paths["/Users/register"]["post"])
        self.assertNotIn("security", paths["/Users/login"]["post"])


class TestAuthDisabled(ApiTestCase):
    """AUTH_ENABLED=false leaves CRUD public but /Users/me still needs a token."""

    settings_overrides = {"AUTH_ENABLED": False}

    def test_resources_public(self) -> None:
        self.assertEqual(self.client.get("/vehicles").status_code, 200)
        self.assertEqual(self.client.get("/Users").status_code, 200)
        self.assertEqual(self.client.get("/dashboard/counts").status_code, 200)

    def test_current_user_still_gated(self) -> None:
        self.assertEqual(self.client.get("/Users/me").status_code, 403)


if __name__ == "__main__":
    unittest.main()
