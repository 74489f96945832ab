import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.urls import reverse

pytestmark = pytest.mark.django_db


def test_health(api_client):
    resp = api_client.get(reverse("health"))
    assert resp.status_code == 200
    assert resp.json() == {"status": "OK"}


def test_health_ignores_bad_token(api_client):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
    assert api_client.get(reverse("health")).status_code == 200


def test_response_carries_request_id(api_client):
    resp = api_client.get(reverse("health"), HTTP_X_REQUEST_ID="abc-123")
    assert resp["X-Request-ID"] == "abc-123"


def test_core_check_json():
    buf = StringIO()
    call_command("core_check", "--db", "--migrations", "--json", stdout=buf)
    out = json.loads(buf.getvalue())
    assert out["ok"] is True
    assert out["checks"]["db"]["ok"] is True
    assert out["checks"]["jwt"]["ok"] is True
    assert out["checks"]["migrations"]["pending"] == []


def test_models_match_migrations():
    buf = StringIO()
    call_command("makemigrations", "--check", "--dry-run", stdout=buf)
    assert "No changes detected" in buf.getvalue()
