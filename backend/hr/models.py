from django.db import models

from common.models import OrganisationScopedModel


class Employee(OrganisationScopedModel):
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["organisation", "email"], name="hr_employee_unique_org_email"),
        ]
        indexes = [models.Index(fields=["organisation", "created_at"], name="hr_employee_org_created_idx")]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Team(OrganisationScopedModel):
    name = models.CharField(max_length=120)
    description = models.TextField(blank=True, null=True)
    employees = models.ManyToManyField("hr.Employee", through="hr.EmployeeTeam", related_name="teams")

    class Meta:
        indexes = [models.Index(fields=["organisation", "created_at"], name="hr_team_org_created_idx")]

    def __str__(self) -> str:
        return self.name


class EmployeeTeamQuerySet(models.QuerySet):
    def for_organisation(self, organisation_id):
        # Both endpoints share the organisation, so scoping via the team suffices
        if organisation_id is None:
            raise ValueError("organisation_id is required")
        return self.filter(team__organisation_id=organisation_id)

    def add_ignoring_duplicates(self, team_id, employee_ids):
        """
        Idempotent insert: pairs that already exist are skipped, not errors.
        Callers must have checked both ids against the organisation.
        """
        rows = [self.model(team_id=team_id, employee_id=eid) for eid in employee_ids]
        return self.bulk_create(rows, ignore_conflicts=True)


class EmployeeTeam(models.Model):
    """Team membership. Rows go away with either endpoint (CASCADE)."""
    employee = models.ForeignKey("hr.Employee", on_delete=models.CASCADE, related_name="memberships")
    team = models.ForeignKey("hr.Team", on_delete=models.CASCADE, related_name="memberships")
    created_at = models.DateTimeField(auto_now_add=True)

    objects = EmployeeTeamQuerySet.as_manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["employee", "team"], name="hr_employeeteam_unique_pair"),
        ]
