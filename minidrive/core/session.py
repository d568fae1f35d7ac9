# minidrive/core/session.py
from collections.abc import Mapping
from typing import Any

from fastapi import Request

from minidrive.core.exceptions import Unauthenticated
from minidrive.models.user import CurrentUser

SESSION_USER_ID = "userId"
SESSION_LOGIN_ID = "loginId"


def require_authenticated(session: Mapping[str, Any]) -> CurrentUser:
    user_id = session.get(SESSION_USER_ID)
    if not user_id:
        raise Unauthenticated()
    return CurrentUser(user_id=user_id, login_id=session.get(SESSION_LOGIN_ID) or "")


def start_session(request: Request, user: CurrentUser) -> None:
    request.session[SESSION_USER_ID] = user.user_id
    request.session[SESSION_LOGIN_ID] = user.login_id


def end_session(request: Request) -> None:
    request.session.clear()


# --- dependencies used by the routers ---
def get_current_user(request: Request) -> CurrentUser:
    """For actions: a missing login ends the request with 401."""
    return require_authenticated(request.session)


def current_user_or_none(request: Request) -> CurrentUser | None:
    """For page navigations, which redirect to /login instead."""
    try:
        return require_authenticated(request.session)
    except Unauthenticated:
        return None
