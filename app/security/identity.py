"""Anonymous user identity cookie"""

import uuid
from typing import Optional, Tuple

from fastapi import Request, Response

from app.config import settings


def new_user_id() -> str:
    return str(uuid.uuid4())


def get_user_id_from_request(request: Request) -> Optional[str]:
    """Existing user id from the identity cookie, if any"""
    return request.cookies.get(settings.USER_ID_COOKIE) or None


def set_user_id_cookie(response: Response, uid: str) -> None:
    """Issue the long-lived identity cookie"""
    response.set_cookie(
        key=settings.USER_ID_COOKIE,
        value=uid,
        max_age=settings.USER_ID_COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production
    )


def resolve_user_id(request: Request, response: Response) -> str:
    """
    Identify the caller, issuing a new id on first contact

    Usable directly as a FastAPI dependency: the cookie is set on the
    response only when the request did not carry one.
    """
    uid, is_new = _lookup_or_create(request)
    if is_new:
        set_user_id_cookie(response, uid)
    return uid


def _lookup_or_create(request: Request) -> Tuple[str, bool]:
    existing = get_user_id_from_request(request)
    if existing:
        return existing, False
    return new_user_id(), True
