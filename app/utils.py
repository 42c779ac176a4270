import uuid
from typing import Tuple

from flask import request

SESSION_COOKIE = "sid"
SESSION_COOKIE_MAX_AGE = 30 * 24 * 3600


def get_workspace_id() -> Tuple[str, bool]:
    """Get the browser workspace id from cookies.

    Returns:
        Tuple of (workspace id, whether it was newly created)
    """
    sid = request.cookies.get(SESSION_COOKIE)
    if sid:
        return sid, False
    return uuid.uuid4().hex, True


def attach_workspace_cookie(response, sid: str, is_new: bool):
    """Set the workspace cookie on a response when it was just created."""
    if is_new:
        response.set_cookie(
            SESSION_COOKIE, sid, max_age=SESSION_COOKIE_MAX_AGE, httponly=True, samesite="Lax"
        )
    return response
