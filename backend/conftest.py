import pytest
from rest_framework.test import APIClient

from identity.services import register_organisation


def _register(org_name, email):
    return register_organisation(org_name=org_name, admin_name="Admin", email=email, password="s3cret-pass")


def _client_for(session):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {session['token']}")
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def acme(db):
    """Session (token, organisation, user) for a first tenant."""
    return _register("Acme", "admin@acme.test")


@pytest.fixture
def globex(db):
    return _register("Globex", "admin@globex.test")


@pytest.fixture
def acme_client(acme):
    return _client_for(acme)


@pytest.fixture
def globex_client(globex):
    return _client_for(globex)
