"""OCSF (Open Cybersecurity Schema Framework) event logging.

Session lifecycle and CSRF decisions are emitted as structured security
events. Events are logged to the ``ocsf`` logger as JSON; consumers attach
their own handlers (CloudWatch JSON formatter, Firehose, structlog, etc.).

Usage::

    from . import ocsf
    ocsf.session_event(
        activity_id=ocsf.AuthActivity.LOGOFF,
        status_id=ocsf.Status.SUCCESS,
        severity_id=ocsf.Severity.INFORMATIONAL,
        session=session,
        message="Session deleted",
    )
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

logger = logging.getLogger("ocsf")

# ── OCSF Constants ─────────────────────────────────────────────────────────


class EventClass:
    AUTHENTICATION = 3001


class AuthActivity:
    LOGON = 1
    LOGOFF = 2
    OTHER = 99  # Authorization decisions (CSRF)


class Status:
    SUCCESS = 1
    FAILURE = 2


class Severity:
    INFORMATIONAL = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    CRITICAL = 5


_ACTIVITY_NAMES = {
    AuthActivity.LOGON: "Logon",
    AuthActivity.LOGOFF: "Logoff",
    AuthActivity.OTHER: "Other",
}

_SEVERITY_NAMES = {
    Severity.INFORMATIONAL: "Informational",
    Severity.LOW: "Low",
    Severity.MEDIUM: "Medium",
    Severity.HIGH: "High",
    Severity.CRITICAL: "Critical",
}

_PRODUCT = {
    "name": "cookie-session",
    "version": "0.1.0",
    "vendor_name": "cookie_session",
}


# ── Core emit ──────────────────────────────────────────────────────────────


def emit(event: dict[str, Any]) -> None:
    """Log an OCSF event as JSON. Logging failures never reach the request."""
    try:
        logger.info(json.dumps(event, default=str))
    except (TypeError, ValueError) as e:
        logger.warning("Could not serialize OCSF event: %s", e)
    except Exception:
        # A broken log handler must not fail the request
        pass


# ── Event builders ─────────────────────────────────────────────────────────


def _base_event(activity_id: int, status_id: int, severity_id: int) -> dict[str, Any]:
    return {
        "class_uid": EventClass.AUTHENTICATION,
        "class_name": "Authentication",
        "activity_id": activity_id,
        "activity_name": _ACTIVITY_NAMES.get(activity_id, "Unknown"),
        "severity_id": severity_id,
        "severity": _SEVERITY_NAMES.get(severity_id, "Unknown"),
        "status_id": status_id,
        "status": "Success" if status_id == Status.SUCCESS else "Failure",
        "time": int(time.time() * 1000),
        "metadata": {"product": _PRODUCT},
    }


def _with_actor(event: dict[str, Any], session: Any) -> dict[str, Any]:
    user_id = user_from_session(session)
    if user_id:
        event["actor"] = {"user": {"uid": user_id, "type_id": 1, "type": "User"}}
    return event


def session_event(
    *,
    activity_id: int,
    status_id: int,
    severity_id: int,
    session: Any = None,
    message: str = "",
) -> None:
    """Emit an OCSF Authentication (3001) event for a session transition."""
    event = _base_event(activity_id, status_id, severity_id)
    event["message"] = message
    emit(_with_actor(event, session))


def authorization_event(
    *,
    action: str,
    decision: str,
    reason: str = "",
    severity_id: int,
    session: Any = None,
) -> None:
    """Emit an OCSF Authorization event (class 3001, activity 99/Other)."""
    status_id = Status.SUCCESS if decision == "permit" else Status.FAILURE
    event = _base_event(AuthActivity.OTHER, status_id, severity_id)
    event["metadata"]["authorization"] = {
        "action": action,
        "decision": decision,
        "reason": reason,
    }
    event["message"] = f"Session authorization: {decision} for {action}"
    emit(_with_actor(event, session))


def user_from_session(session: Any) -> str | None:
    """Best-effort user id for the actor block; sessions without one are anonymous."""
    user_id = getattr(session, "user_id", None)
    return str(user_id) if user_id is not None else None
