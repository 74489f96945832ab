from django.conf import settings
from django.utils.functional import cached_property
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.settings import api_settings


class TenantIdentity(TokenUser):
    """
    Caller identity rebuilt from a verified access token, without a DB hit.
    Views read `request.user.user_id` / `request.user.org_id`.
    """

    @cached_property
    def user_id(self) -> int:
        return int(self.token[api_settings.USER_ID_CLAIM])

    @cached_property
    def org_id(self) -> int:
        return int(self.token[settings.JWT_ORG_ID_CLAIM])


class TenantJWTAuthentication(JWTStatelessUserAuthentication):
    """
    Tenant guard: `Authorization: Bearer <token>`.
    No header -> anonymous (the permission layer answers 401).
    Bad signature, expiry or missing claims -> InvalidToken (401).
    """

    def get_user(self, validated_token):
        try:
            int(validated_token[api_settings.USER_ID_CLAIM])
            int(validated_token[settings.JWT_ORG_ID_CLAIM])
        except (KeyError, TypeError, ValueError):
            raise InvalidToken("Token contained no recognizable tenant identification")
        return super().get_user(validated_token)
