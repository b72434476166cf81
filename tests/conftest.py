import os

# config.Settings는 import 시점에 SECRET_KEY가 필요
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from unittest.mock import AsyncMock

import jwt
import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app
from utils.database import get_connection


def make_token(username: str, is_admin: bool = False, **extra) -> str:
    """외부 인증 서비스가 발급하는 것과 같은 형태의 토큰"""
    payload = {"username": username, "isAdmin": is_admin, **extra}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


@pytest.fixture
def conn():
    """DB 커넥션 대역 (fetchrow/fetch 호출 기록)"""
    conn = AsyncMock()
    conn.fetchrow.return_value = None
    conn.fetch.return_value = []
    return conn


@pytest.fixture
def client(conn):
    """테스트용 FastAPI 클라이언트 (DB 풀 없이 conn 대역 주입)"""
    async def override_get_connection():
        yield conn

    app.dependency_overrides[get_connection] = override_get_connection
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    """일반 유저(u1) 인증 헤더"""
    return {"Authorization": f"Bearer {make_token('u1')}"}


@pytest.fixture
def other_user_headers():
    return {"Authorization": f"Bearer {make_token('u2')}"}


@pytest.fixture
def admin_headers():
    """관리자 인증 헤더"""
    return {"Authorization": f"Bearer {make_token('admin', is_admin=True)}"}
