"""
Organisation-scoped reads. `organisation_id` is always the first, required
argument: there is no way to look an employee or team up by id alone.
"""
from typing import Iterable, Set

from django.db.models import Count, QuerySet

from common.exceptions import NotFound
from common.models import MAX_ID
from .models import Employee, Team


def employee_list(organisation_id: int) -> QuerySet:
    return Employee.objects.for_organisation(organisation_id).order_by("-created_at", "-id")


def employee_get(organisation_id: int, employee_id: int) -> Employee:
    if employee_id > MAX_ID:
        raise NotFound("Employee not found")
    try:
        return Employee.objects.for_organisation(organisation_id).get(pk=employee_id)
    except Employee.DoesNotExist:
        raise NotFound("Employee not found")


def employee_ids_in_organisation(organisation_id: int, employee_ids: Iterable[int]) -> Set[int]:
    return set(
        Employee.objects.for_organisation(organisation_id)
        .filter(pk__in=list(employee_ids))
        .values_list("id", flat=True)
    )


def team_list(organisation_id: int) -> QuerySet:
    return (
        Team.objects.for_organisation(organisation_id)
        .annotate(employee_count=Count("memberships"))
        .order_by("-created_at", "-id")
    )


def team_get(organisation_id: int, team_id: int) -> Team:
    if team_id > MAX_ID:
        raise NotFound("Team not found")
    try:
        return Team.objects.for_organisation(organisation_id).get(pk=team_id)
    except Team.DoesNotExist:
        raise NotFound("Team not found")


def team_members(organisation_id: int, team_id: int) -> QuerySet:
    return (
        Employee.objects.for_organisation(organisation_id)
        .filter(memberships__team_id=team_id)
        .order_by("last_name", "first_name", "id")
    )
