from rest_framework.permissions import BasePermission


class IsTenantUser(BasePermission):
    """
    Any authenticated user of an organisation may do anything inside it.
    The identity comes from the access token, so an org id must be present.
    """
    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "org_id", None) is not None)
