from datetime import datetime, timezone as dt_timezone

import pytest
from django.urls import reverse

from platformapp.models import LogEntry
from platformapp.services.audit import log_action
from platformapp.views import LOG_PAGE_SIZE

pytestmark = pytest.mark.django_db


def _at(entry, *args):
    LogEntry.objects.filter(pk=entry.pk).update(timestamp=datetime(*args, tzinfo=dt_timezone.utc))


@pytest.fixture
def org_id(acme):
    # Drop the registration entry so each test controls the full log
    LogEntry.objects.all().delete()
    return acme["organisation"]["id"]


def test_newest_first(acme_client, org_id):
    old = log_action(org_id, None, "employee_created", {"id": 1})
    new = log_action(org_id, None, "employee_deleted", {"employeeId": 1})
    _at(old, 2024, 1, 1)
    _at(new, 2024, 2, 1)

    body = acme_client.get(reverse("log-list")).json()
    assert [e["id"] for e in body] == [new.id, old.id]
    assert body[0]["action"] == "employee_deleted"
    assert body[0]["organisation_id"] == org_id
    assert body[0]["meta"] == {"employeeId": 1}


def test_filter_by_action(acme_client, org_id):
    log_action(org_id, None, "employee_created", {})
    log_action(org_id, None, "team_created", {})

    body = acme_client.get(reverse("log-list"), {"action": "team_created"}).json()
    assert [e["action"] for e in body] == ["team_created"]


def test_filter_by_date_range(acme_client, org_id):
    entries = [log_action(org_id, None, "employee_created", {"n": n}) for n in range(3)]
    _at(entries[0], 2024, 1, 1)
    _at(entries[1], 2024, 1, 15)
    _at(entries[2], 2024, 2, 1)

    body = acme_client.get(reverse("log-list"), {"startDate": "2024-01-10", "endDate": "2024-01-20"}).json()
    assert [e["meta"]["n"] for e in body] == [1]

    body = acme_client.get(reverse("log-list"), {"startDate": "2024-01-15T00:00:00Z"}).json()
    assert [e["meta"]["n"] for e in body] == [2, 1]


def test_invalid_date_is_rejected(acme_client, org_id):
    resp = acme_client.get(reverse("log-list"), {"startDate": "not-a-date"})
    assert resp.status_code == 400


def test_capped_at_page_size(acme_client, org_id):
    LogEntry.objects.bulk_create(
        [LogEntry(organisation_id=org_id, action="employee_created", meta={"n": n}) for n in range(LOG_PAGE_SIZE + 5)]
    )
    body = acme_client.get(reverse("log-list")).json()
    assert len(body) == LOG_PAGE_SIZE


def test_only_own_organisation(acme_client, org_id, globex):
    log_action(globex["organisation"]["id"], None, "employee_created", {})
    assert acme_client.get(reverse("log-list")).json() == []


def test_requires_token(api_client):
    assert api_client.get(reverse("log-list")).status_code == 401
