# backend/common/mixins.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from django.db import IntegrityError, transaction
from django.http import Http404
from rest_framework import mixins, status, viewsets
from rest_framework.response import Response

from common.exceptions import Conflict, NotFound
from common.permissions import IsTenantUser
from platformapp.services.audit import log_action


# -----------------------------
# Tenant scoping
# -----------------------------
class TenantScopedMixin:
    """
    Multi-tenant base for ViewSets:

    - The organisation comes only from the verified access token
      (`request.user.org_id`); headers and query params cannot select a tenant.
    - Every queryset is built by `get_scoped_queryset(organisation_id)`, so
      lookups by primary key are always `pk AND organisation_id`.
    - Objects outside the caller's organisation are reported as not found.

    Override:
      - `get_scoped_queryset(organisation_id)` for joins / annotations
      - `default_ordering` (sequence)
      - `not_found_message`
    """
    permission_classes = [IsTenantUser]
    lookup_value_regex = "[0-9]+"

    default_ordering: Iterable[str] = ("-created_at", "-id")
    not_found_message = "Not found"

    def get_organisation_id(self) -> int:
        return self.request.user.org_id

    def get_user_id(self) -> Optional[int]:
        return getattr(self.request.user, "user_id", None)

    def get_scoped_queryset(self, organisation_id: int):
        qs = self.queryset.all().for_organisation(organisation_id)
        return qs.order_by(*self.default_ordering) if self.default_ordering else qs

    def get_queryset(self):
        return self.get_scoped_queryset(self.get_organisation_id())

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)


class TenantScopedModelViewSet(TenantScopedMixin, viewsets.ModelViewSet):
    """
    CRUD inside one organisation. PUT is a full replace; PATCH is not exposed.
    Unique-constraint violations surface as `Conflict`.
    """
    http_method_names = ["get", "post", "put", "delete", "head", "options"]
    conflict_message = "Resource already exists"
    deleted_message = "Deleted"

    def _save(self, serializer, **extra):
        try:
            with transaction.atomic():
                return serializer.save(**extra)
        except IntegrityError:
            raise Conflict(self.conflict_message)

    def perform_create(self, serializer):
        return self._save(serializer, organisation_id=self.get_organisation_id())

    def perform_update(self, serializer):
        return self._save(serializer)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response({"message": self.deleted_message}, status=status.HTTP_200_OK)


class TenantScopedReadOnlyViewSet(TenantScopedMixin, mixins.ListModelMixin, viewsets.GenericViewSet):
    pass


# -----------------------------
# Audit trail
# -----------------------------
class AuditedActionsMixin:
    """
    Attach to tenant ViewSets you want to auto-audit. Writes
    `<audit_entity>_created|_updated|_deleted` after the mutation succeeded.

      - `audit_entity`: tag prefix and id key, e.g. "employee" -> employeeId
      - `audit_fields`: fields recorded as the record / the changes
    """
    audit_entity: str = ""
    audit_fields: Iterable[str] = tuple()

    def audit(self, action: str, meta: Dict[str, Any]) -> None:
        log_action(self.get_organisation_id(), self.get_user_id(), action, meta)

    def _audit_id_key(self) -> str:
        return f"{self.audit_entity}Id"

    def _audit_values(self, obj) -> Dict[str, Any]:
        return {f: getattr(obj, f) for f in self.audit_fields}

    def perform_create(self, serializer):
        obj = super().perform_create(serializer)
        self.audit(f"{self.audit_entity}_created", {"id": obj.id, **self._audit_values(obj)})
        return obj

    def perform_update(self, serializer):
        obj = super().perform_update(serializer)
        self.audit(f"{self.audit_entity}_updated", {self._audit_id_key(): obj.id, "changes": self._audit_values(obj)})
        return obj

    def perform_destroy(self, instance):
        pk = instance.id
        super().perform_destroy(instance)
        self.audit(f"{self.audit_entity}_deleted", {self._audit_id_key(): pk})
