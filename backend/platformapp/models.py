from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from common.models import OrganisationScopedManager


class Organisation(models.Model):
    """Tenant root. Created once at registration and never renamed."""
    name = models.CharField(max_length=200, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class LogEntry(models.Model):
    """Append-only audit record of one consequential action."""
    id = models.BigAutoField(primary_key=True)
    organisation = models.ForeignKey("platformapp.Organisation", on_delete=models.CASCADE, related_name="log_entries")
    user_id = models.BigIntegerField(blank=True, null=True)  # null for system-originated entries
    action = models.CharField(max_length=80)                 # e.g. "employee_created"
    meta = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = OrganisationScopedManager()

    class Meta:
        indexes = [models.Index(fields=["organisation", "action", "timestamp"], name="log_org_action_ts_idx")]

    def __str__(self):
        return f"{self.action} (org {self.organisation_id})"
