"""Unit tests for tenant identity response headers."""

from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.responses import Response

from shared_kernel.middleware.observability import TenantContextProbe
from shared_kernel.middleware.tenant_headers import (
    TENANT_ID_HEADER,
    TENANT_SLUG_HEADER,
    TenantHeadersMiddleware,
    annotate_tenant_headers,
)


def _failing_lookup() -> str | None:
    raise RuntimeError("tenancy broke")


class TestAnnotateTenantHeaders:
    """Tests for annotate_tenant_headers."""

    def test_sets_both_headers(self):
        """Both headers are set when both lookups succeed."""
        response = Response(content="ok", status_code=201)

        result = annotate_tenant_headers(
            response,
            tenant_id_lookup=lambda: "42",
            tenant_slug_lookup=lambda: "acme",
        )

        assert result is response
        assert result.headers[TENANT_ID_HEADER] == "42"
        assert result.headers[TENANT_SLUG_HEADER] == "acme"
        assert result.status_code == 201
        assert result.body == b"ok"

    def test_omits_empty_values(self):
        """None and empty strings do not produce headers."""
        response = Response()

        annotate_tenant_headers(
            response, tenant_id_lookup=lambda: None, tenant_slug_lookup=lambda: ""
        )

        assert TENANT_ID_HEADER not in response.headers
        assert TENANT_SLUG_HEADER not in response.headers

    def test_failing_lookup_omits_only_its_header(self):
        """A lookup failure is logged and never fails the response."""
        probe = MagicMock(spec=TenantContextProbe)
        response = Response()

        annotate_tenant_headers(
            response,
            tenant_id_lookup=_failing_lookup,
            tenant_slug_lookup=lambda: "acme",
            probe=probe,
        )

        assert TENANT_ID_HEADER not in response.headers
        assert response.headers[TENANT_SLUG_HEADER] == "acme"
        probe.tenant_lookup_failed.assert_called_once()
        assert probe.tenant_lookup_failed.call_args.kwargs["header"] == TENANT_ID_HEADER

    def test_preserves_existing_headers(self):
        """Other headers are left alone."""
        response = Response(headers={"X-Request-Id": "abc"})

        annotate_tenant_headers(
            response, tenant_id_lookup=lambda: "7", tenant_slug_lookup=lambda: None
        )

        assert response.headers["X-Request-Id"] == "abc"
        assert response.headers[TENANT_ID_HEADER] == "7"


class TestTenantHeadersMiddleware:
    """Tests for TenantHeadersMiddleware."""

    def test_without_tenant_no_headers(self):
        """Requests outside a tenant get no tenant headers."""
        app = FastAPI()
        app.add_middleware(TenantHeadersMiddleware)

        @app.get("/ping")
        def ping():
            return {"ok": True}

        response = TestClient(app).get("/ping")

        assert response.status_code == 200
        assert TENANT_ID_HEADER not in response.headers

    def test_uses_injected_lookups(self):
        """Injected lookups feed the headers."""
        app = FastAPI()
        app.add_middleware(
            TenantHeadersMiddleware,
            tenant_id_lookup=lambda: "42",
            tenant_slug_lookup=lambda: "acme",
        )

        @app.get("/ping")
        def ping():
            return {"ok": True}

        response = TestClient(app).get("/ping")

        assert response.headers[TENANT_ID_HEADER] == "42"
        assert response.headers[TENANT_SLUG_HEADER] == "acme"
        assert response.json() == {"ok": True}

    def test_failing_lookup_does_not_fail_request(self):
        """The request succeeds even if tenancy lookups raise."""
        app = FastAPI()
        app.add_middleware(
            TenantHeadersMiddleware,
            tenant_id_lookup=_failing_lookup,
            tenant_slug_lookup=_failing_lookup,
            probe=MagicMock(spec=TenantContextProbe),
        )

        @app.get("/ping")
        def ping():
            return {"ok": True}

        response = TestClient(app).get("/ping")

        assert response.status_code == 200
        assert TENANT_ID_HEADER not in response.headers
