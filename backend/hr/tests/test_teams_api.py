import pytest
from django.urls import reverse

from hr.models import EmployeeTeam, Team
from platformapp.models import LogEntry

pytestmark = pytest.mark.django_db


@pytest.fixture
def staff(acme_client):
    def make(first):
        resp = acme_client.post(reverse("employee-list"), {"first_name": first, "last_name": "Doe"}, format="json")
        return resp.json()["id"]
    return [make(n) for n in ("Ann", "Ben", "Cat")]


@pytest.fixture
def team(acme_client):
    resp = acme_client.post(reverse("team-list"), {"name": "Platform", "description": "Infra"}, format="json")
    assert resp.status_code == 201
    return resp.json()


def _assign(client, team_id, payload):
    return client.post(reverse("team-assign", args=[team_id]), payload, format="json")


def test_create_requires_name(acme_client):
    resp = acme_client.post(reverse("team-list"), {"description": "x"}, format="json")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Team name required"


def test_list_reports_employee_count(acme_client, team, staff):
    _assign(acme_client, team["id"], {"employeeIds": staff[:2]})
    acme_client.post(reverse("team-list"), {"name": "Empty"}, format="json")

    teams = {t["name"]: t for t in acme_client.get(reverse("team-list")).json()}
    assert teams["Platform"]["employee_count"] == 2
    assert teams["Empty"]["employee_count"] == 0


def test_detail_lists_members(acme_client, team, staff):
    _assign(acme_client, team["id"], {"employeeId": staff[0]})
    body = acme_client.get(reverse("team-detail", args=[team["id"]])).json()
    assert body["name"] == "Platform"
    assert [e["id"] for e in body["employees"]] == [staff[0]]


def test_update_and_delete(acme_client, team, staff):
    url = reverse("team-detail", args=[team["id"]])
    resp = acme_client.put(url, {"name": "Core"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Core"
    assert resp.json()["description"] is None

    updated = LogEntry.objects.get(action="team_updated")
    assert updated.meta == {"teamId": team["id"], "changes": {"name": "Core", "description": None}}

    _assign(acme_client, team["id"], {"employeeIds": staff})
    resp = acme_client.delete(url)
    assert resp.json() == {"message": "Team deleted"}
    assert not Team.objects.filter(pk=team["id"]).exists()
    assert EmployeeTeam.objects.count() == 0
    assert LogEntry.objects.get(action="team_deleted").meta == {"teamId": team["id"]}


def test_assign_single_and_batch(acme_client, team, staff):
    resp = _assign(acme_client, team["id"], {"employeeId": staff[0]})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Assignment(s) created"}

    _assign(acme_client, team["id"], {"employeeIds": staff})
    assert EmployeeTeam.objects.filter(team_id=team["id"]).count() == 3

    entry = LogEntry.objects.filter(action="employee_assigned_to_team").order_by("-id").first()
    assert entry.meta == {"teamId": team["id"], "employeeIds": staff}


def test_assign_twice_is_idempotent(acme_client, team, staff):
    _assign(acme_client, team["id"], {"employeeId": staff[0]})
    resp = _assign(acme_client, team["id"], {"employeeId": staff[0]})
    assert resp.status_code == 200
    assert EmployeeTeam.objects.filter(team_id=team["id"], employee_id=staff[0]).count() == 1


def test_assign_requires_ids(acme_client, team):
    resp = _assign(acme_client, team["id"], {"employeeIds": []})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Employee ID(s) required"


def test_assign_to_missing_team(acme_client, staff):
    resp = _assign(acme_client, 999999, {"employeeId": staff[0]})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Team not found"}


def test_batch_with_foreign_employee_writes_nothing(acme_client, globex_client, team, staff):
    foreign = globex_client.post(reverse("employee-list"), {"first_name": "G", "last_name": "X"}, format="json").json()
    resp = _assign(acme_client, team["id"], {"employeeIds": [staff[0], foreign["id"]]})
    assert resp.status_code == 400
    assert resp.json()["message"] == "One or more employees not found"
    assert EmployeeTeam.objects.count() == 0


def test_other_organisation_cannot_use_team(globex_client, team):
    emp = globex_client.post(reverse("employee-list"), {"first_name": "G", "last_name": "X"}, format="json").json()
    assert globex_client.get(reverse("team-detail", args=[team["id"]])).status_code == 404
    assert _assign(globex_client, team["id"], {"employeeId": emp["id"]}).status_code == 404
    assert EmployeeTeam.objects.count() == 0


def test_unassign(acme_client, team, staff):
    _assign(acme_client, team["id"], {"employeeIds": staff[:2]})
    resp = acme_client.delete(reverse("team-unassign", args=[team["id"], staff[0]]))
    assert resp.status_code == 200
    assert resp.json() == {"message": "Assignment removed"}
    assert list(EmployeeTeam.objects.values_list("employee_id", flat=True)) == [staff[1]]
    assert LogEntry.objects.filter(action="employee_unassigned_from_team", meta__employeeId=staff[0]).exists()


def test_unassign_missing_pair_is_ok(acme_client, team, staff):
    resp = acme_client.delete(reverse("team-unassign", args=[team["id"], staff[2]]))
    assert resp.status_code == 200


def test_unassign_cannot_reach_other_organisation(acme_client, globex_client, team, staff):
    _assign(acme_client, team["id"], {"employeeId": staff[0]})
    globex_client.delete(reverse("team-unassign", args=[team["id"], staff[0]]))
    assert EmployeeTeam.objects.count() == 1


def test_deleting_employee_removes_memberships(acme_client, team, staff):
    _assign(acme_client, team["id"], {"employeeIds": staff})
    acme_client.delete(reverse("employee-detail", args=[staff[0]]))
    assert EmployeeTeam.objects.filter(team_id=team["id"]).count() == 2


def test_create_writes_audit_entry(acme, team):
    entry = LogEntry.objects.get(action="team_created")
    assert entry.user_id == acme["user"]["id"]
    assert entry.meta == {"id": team["id"], "name": "Platform", "description": "Infra"}


def test_assign_rejects_out_of_range_ids(acme_client, team):
    resp = _assign(acme_client, team["id"], {"employeeIds": [10 ** 30]})
    assert resp.status_code == 400

    resp = _assign(acme_client, team["id"], {"employeeId": 2 ** 63})
    assert resp.status_code == 400
    assert EmployeeTeam.objects.count() == 0


def test_assign_to_out_of_range_team(acme_client, staff):
    resp = _assign(acme_client, 10 ** 30, {"employeeId": staff[0]})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Team not found"}


def test_unassign_out_of_range_id_is_a_no_op(acme_client, team, staff):
    _assign(acme_client, team["id"], {"employeeId": staff[0]})
    resp = acme_client.delete(reverse("team-unassign", args=[team["id"], 10 ** 23]))
    assert resp.status_code == 200
    assert resp.json() == {"message": "Assignment removed"}
    assert EmployeeTeam.objects.count() == 1
