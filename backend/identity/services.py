from __future__ import annotations

import logging
from typing import Any, Dict

from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction

from common.exceptions import Conflict, InvalidCredentials
from platformapp.models import Organisation
from platformapp.serializers import OrganisationSummarySerializer
from platformapp.services.audit import log_action
from .serializers import UserSummarySerializer
from .tokens import issue_token

logger = logging.getLogger(__name__)

User = get_user_model()


def _session(user, organisation) -> Dict[str, Any]:
    return {
        "token": issue_token(user),
        "organisation": OrganisationSummarySerializer(organisation).data,
        "user": UserSummarySerializer(user).data,
    }


def register_organisation(*, org_name: str, admin_name: str, email: str, password: str) -> Dict[str, Any]:
    """
    Create a tenant and its first admin user, then open a session for them.
    Organisation and user are written in one transaction; the unique
    constraints on organisation name and user email back up the pre-check.
    """
    email = User.objects.normalize_email(email)
    if Organisation.objects.filter(name=org_name).exists() or User.objects.filter(email=email).exists():
        raise Conflict("Organisation or email already exists")

    try:
        with transaction.atomic():
            organisation = Organisation.objects.create(name=org_name)
            user = User.objects.create_user(email, password, organisation=organisation, name=admin_name)
    except IntegrityError:
        raise Conflict("Organisation or email already exists")

    session = _session(user, organisation)
    log_action(organisation.id, user.id, "organisation_created", {
        "orgId": organisation.id,
        "adminEmail": email,
        "adminName": admin_name,
    })
    logger.info("Registered organisation %s (id=%s)", organisation.name, organisation.id)
    return session


def login(request, *, email: str, password: str) -> Dict[str, Any]:
    """
    Verify credentials and open a session. Unknown email and wrong password
    fail identically.
    """
    user = authenticate(request, email=User.objects.normalize_email(email), password=password)
    if user is None:
        raise InvalidCredentials("Invalid credentials")

    organisation = user.organisation
    session = _session(user, organisation)
    log_action(organisation.id, user.id, "user_login", {"email": user.email})
    return session
