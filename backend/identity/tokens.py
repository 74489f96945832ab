from django.conf import settings
from rest_framework_simplejwt.tokens import AccessToken


def issue_token(user) -> str:
    """Signed, time-limited access token asserting {user_id, org_id}."""
    token = AccessToken.for_user(user)
    token[settings.JWT_ORG_ID_CLAIM] = user.organisation_id
    return str(token)
