from __future__ import annotations

import logging
from typing import List, Optional

from common.exceptions import InvalidInput
from common.models import MAX_ID
from platformapp.services.audit import log_action
from . import selectors
from .models import EmployeeTeam

logger = logging.getLogger(__name__)


def assign_employees(organisation_id: int, user_id: Optional[int], team_id: int, employee_ids: List[int]) -> None:
    """
    Put employees on a team. The whole batch is checked against the
    organisation before anything is written: one foreign or unknown id
    rejects every id. Pairs that already exist are left alone.
    """
    if not employee_ids:
        raise InvalidInput("Employee ID(s) required")

    team = selectors.team_get(organisation_id, team_id)

    found = selectors.employee_ids_in_organisation(organisation_id, employee_ids)
    if len(found) < len(set(employee_ids)):
        raise InvalidInput("One or more employees not found")

    EmployeeTeam.objects.add_ignoring_duplicates(team.id, employee_ids)

    log_action(organisation_id, user_id, "employee_assigned_to_team", {
        "teamId": team.id,
        "employeeIds": list(employee_ids),
    })


def unassign_employee(organisation_id: int, user_id: Optional[int], team_id: int, employee_id: int) -> int:
    """Remove one membership. Removing a pair that does not exist is a no-op."""
    deleted = 0
    # Ids past the key range cannot name a stored row
    if team_id <= MAX_ID and employee_id <= MAX_ID:
        deleted, _ = (
            EmployeeTeam.objects.for_organisation(organisation_id)
            .filter(team_id=team_id, employee_id=employee_id)
            .delete()
        )
    if not deleted:
        logger.debug("No membership team=%s employee=%s in org %s", team_id, employee_id, organisation_id)

    log_action(organisation_id, user_id, "employee_unassigned_from_team", {
        "teamId": team_id,
        "employeeId": employee_id,
    })
    return deleted
