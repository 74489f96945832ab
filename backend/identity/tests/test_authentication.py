from datetime import timedelta

import pytest
from django.urls import reverse
from rest_framework_simplejwt.tokens import AccessToken

pytestmark = pytest.mark.django_db


def test_missing_token_is_rejected(api_client):
    resp = api_client.get(reverse("employee-list"))
    assert resp.status_code == 401
    assert resp.json() == {"message": "Not authorized, no token"}


def test_garbage_token_is_rejected(api_client):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-jwt")
    resp = api_client.get(reverse("employee-list"))
    assert resp.status_code == 401
    assert resp.json() == {"message": "Token invalid or expired"}


def test_expired_token_is_rejected(api_client, acme):
    token = AccessToken(acme["token"])
    token.set_exp(lifetime=-timedelta(minutes=1))
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    resp = api_client.get(reverse("employee-list"))
    assert resp.status_code == 401
    assert resp.json()["message"] == "Token invalid or expired"


def test_token_without_org_claim_is_rejected(api_client, acme):
    token = AccessToken(acme["token"])
    del token["org_id"]
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    resp = api_client.get(reverse("employee-list"))
    assert resp.status_code == 401


def test_valid_token_resolves_tenant(acme_client):
    resp = acme_client.get(reverse("employee-list"))
    assert resp.status_code == 200
    assert resp.json() == []


def test_header_cannot_select_another_tenant(acme_client, globex, globex_client):
    globex_client.post(reverse("employee-list"), {"first_name": "Gina", "last_name": "G"}, format="json")
    resp = acme_client.get(reverse("employee-list"), HTTP_X_ORG_ID=str(globex["organisation"]["id"]))
    assert resp.json() == []
