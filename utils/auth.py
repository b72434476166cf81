import logging
from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings
from utils.errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

# Bearer 토큰 인증 스키마 (토큰이 없어도 에러를 내지 않음)
security = HTTPBearer(auto_error=False)


def decode_access_token(token: str) -> dict:
    """token decoding"""
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])


def get_current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> dict | None:
    """
    토큰이 있으면 검증 후 payload(username, isAdmin) 반환
    - 토큰이 없거나 유효하지 않으면 None (에러 아님)
    """
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError as e:
        logger.debug("Ignoring invalid token: %s", e)
        return None
    if not payload.get("username"):
        return None
    return payload


CurrentUser = Annotated[dict | None, Depends(get_current_user)]


def ensure_logged_in(user: CurrentUser) -> dict:
    """로그인 필수"""
    if user is None:
        raise UnauthorizedError()
    return user


def ensure_admin(user: CurrentUser) -> dict:
    """관리자만 허용"""
    if user is None or not user.get("isAdmin"):
        raise UnauthorizedError("Must be admin to access this")
    return user


def ensure_own_user_or_admin(username: str, user: CurrentUser) -> dict:
    """본인 또는 관리자만 허용 (경로의 username 기준)"""
    if user is None:
        raise UnauthorizedError()
    if user["username"] != username and not user.get("isAdmin"):
        raise ForbiddenError("Only the profile owner or an admin can access this")
    return user


AdminUser = Annotated[dict, Depends(ensure_admin)]
OwnUserOrAdmin = Annotated[dict, Depends(ensure_own_user_or_admin)]
