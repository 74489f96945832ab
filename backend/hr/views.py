from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from common.mixins import TenantScopedModelViewSet, AuditedActionsMixin
from . import selectors, services
from .models import Employee, Team
from .serializers import (
    EmployeeSerializer, TeamSerializer, TeamListSerializer, TeamDetailSerializer,
    AssignEmployeesSerializer,
)


# --------- Employee ---------
class EmployeeViewSet(AuditedActionsMixin, TenantScopedModelViewSet):
    queryset = Employee.objects.all()
    serializer_class = EmployeeSerializer
    not_found_message = "Employee not found"
    conflict_message = "Email already exists"
    deleted_message = "Employee deleted"

    audit_entity = "employee"
    audit_fields = ("first_name", "last_name", "email", "phone")

    def get_scoped_queryset(self, organisation_id):
        return selectors.employee_list(organisation_id)


# --------- Team ---------
class TeamViewSet(AuditedActionsMixin, TenantScopedModelViewSet):
    queryset = Team.objects.all()
    serializer_class = TeamSerializer
    not_found_message = "Team not found"
    conflict_message = "Team already exists"
    deleted_message = "Team deleted"

    audit_entity = "team"
    audit_fields = ("name", "description")

    def get_scoped_queryset(self, organisation_id):
        if self.action == "list":
            return selectors.team_list(organisation_id)
        return super().get_scoped_queryset(organisation_id)

    def get_serializer_class(self):
        if self.action == "list":
            return TeamListSerializer
        if self.action == "retrieve":
            return TeamDetailSerializer
        if self.action == "assign":
            return AssignEmployeesSerializer
        return TeamSerializer

    @action(detail=True, methods=["post"], url_path="assign")
    def assign(self, request, pk=None):
        payload = self.get_serializer(data=request.data)
        payload.is_valid(raise_exception=True)
        services.assign_employees(
            self.get_organisation_id(), self.get_user_id(),
            team_id=int(pk), employee_ids=payload.validated_data["employee_ids"],
        )
        return Response({"message": "Assignment(s) created"}, status=status.HTTP_200_OK)

    @action(detail=True, methods=["delete"], url_path=r"unassign/(?P<employee_id>[0-9]+)")
    def unassign(self, request, pk=None, employee_id=None):
        services.unassign_employee(
            self.get_organisation_id(), self.get_user_id(),
            team_id=int(pk), employee_id=int(employee_id),
        )
        return Response({"message": "Assignment removed"}, status=status.HTTP_200_OK)
