"""인증 dependency 테스트"""
from datetime import datetime, timedelta, UTC

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from conftest import make_token
from utils.auth import ensure_admin, ensure_logged_in, ensure_own_user_or_admin, get_current_user
from utils.errors import ForbiddenError, UnauthorizedError


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetCurrentUser:

    def test_valid_token(self):
        user = get_current_user(bearer(make_token("u1", is_admin=True)))

        assert user["username"] == "u1"
        assert user["isAdmin"] is True

    def test_no_token(self):
        assert get_current_user(None) is None

    def test_invalid_token(self):
        """잘못된 토큰은 에러가 아니라 비로그인 취급"""
        assert get_current_user(bearer("invalid_token")) is None

    def test_expired_token(self):
        token = make_token("u1", exp=datetime.now(UTC) - timedelta(minutes=1))

        assert get_current_user(bearer(token)) is None

    def test_token_without_username(self):
        assert get_current_user(bearer(make_token(""))) is None


class TestEnsureDependencies:

    def test_ensure_logged_in(self):
        user = {"username": "u1", "isAdmin": False}

        assert ensure_logged_in(user) == user

    def test_ensure_logged_in_anon(self):
        with pytest.raises(UnauthorizedError):
            ensure_logged_in(None)

    def test_ensure_admin(self):
        admin = {"username": "admin", "isAdmin": True}

        assert ensure_admin(admin) == admin

    @pytest.mark.parametrize("user", [None, {"username": "u1", "isAdmin": False}, {"username": "u1"}])
    def test_ensure_admin_rejects(self, user):
        with pytest.raises(UnauthorizedError) as exc_info:
            ensure_admin(user)

        assert exc_info.value.status_code == 401

    def test_own_user(self):
        user = {"username": "u1", "isAdmin": False}

        assert ensure_own_user_or_admin("u1", user) == user

    def test_admin_for_other_user(self):
        admin = {"username": "admin", "isAdmin": True}

        assert ensure_own_user_or_admin("u1", admin) == admin

    def test_other_user(self):
        with pytest.raises(ForbiddenError):
            ensure_own_user_or_admin("u1", {"username": "u2", "isAdmin": False})

    def test_own_user_anon(self):
        with pytest.raises(UnauthorizedError):
            ensure_own_user_or_admin("u1", None)
