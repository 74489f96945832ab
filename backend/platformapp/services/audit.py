from __future__ import annotations

import logging
from typing import Optional, Dict, Any

from django.db import transaction

from platformapp.models import LogEntry

logger = logging.getLogger(__name__)

REDACT_KEYS = {"password", "token", "access", "refresh"}


def _sanitize(meta: Dict[str, Any]) -> Dict[str, Any]:
    out = {}
    for k, v in (meta or {}).items():
        if k.lower() in REDACT_KEYS:
            out[k] = "***"
        else:
            out[k] = v
    return out


def log_action(organisation_id: int, user_id: Optional[int], action: str,
               meta: Optional[Dict[str, Any]] = None) -> Optional[LogEntry]:
    """
    Append one audit entry. Best effort: a storage failure is reported to the
    operator log and swallowed, so the caller's already-committed mutation
    is never reported as failed. Returns None when the write failed.
    """
    try:
        # Savepoint keeps a failed insert from poisoning an enclosing transaction
        with transaction.atomic():
            return LogEntry.objects.create(
                organisation_id=organisation_id,
                user_id=user_id or None,
                action=action[:80],
                meta=_sanitize(meta or {}),
            )
    except Exception:
        logger.exception("Audit log write failed: org=%s user=%s action=%s", organisation_id, user_id, action)
        return None
