"""
유저 API 테스트

실행 방법:
    pip install -e ".[dev]"
    pytest tests/test_users.py -v
"""
from unittest.mock import ANY, AsyncMock, patch

import pytest

from crud.user import User


@pytest.fixture
def u1():
    return {"username": "u1", "firstName": "U1F", "lastName": "U1L", "email": "user1@user.com", "isAdmin": False}


class TestGetUsers:
    """GET /users, GET /users/{username} 테스트"""

    def test_get_users_admin(self, client, admin_headers, u1):
        with patch.object(User, "find_all", new_callable=AsyncMock, return_value=[u1]):
            response = client.get("/users", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"users": [u1]}

    def test_get_users_not_admin(self, client, user_headers):
        response = client.get("/users", headers=user_headers)

        assert response.status_code == 401

    def test_get_own_user(self, client, user_headers, u1):
        with patch.object(User, "get", new_callable=AsyncMock, return_value=u1):
            response = client.get("/users/u1", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == {"user": u1}

    def test_get_other_user_forbidden(self, client, other_user_headers):
        response = client.get("/users/u1", headers=other_user_headers)

        assert response.status_code == 403

    def test_get_user_anon(self, client):
        response = client.get("/users/u1")

        assert response.status_code == 401

    def test_get_user_admin_not_found(self, client, admin_headers):
        response = client.get("/users/nope", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No user: nope"


class TestUpdateUser:
    """PATCH /users/{username} 테스트"""

    def test_update_own_user(self, client, user_headers, u1):
        updated = {**u1, "firstName": "Aliya"}
        with patch.object(User, "update", new_callable=AsyncMock, return_value=updated) as mock_update:
            response = client.patch("/users/u1", json={"firstName": "Aliya"}, headers=user_headers)

        assert response.status_code == 200
        assert response.json()["user"]["firstName"] == "Aliya"
        mock_update.assert_awaited_once_with(ANY, "u1", {"firstName": "Aliya"})

    def test_update_is_admin_by_user(self, client, user_headers):
        """isAdmin은 관리자만 변경 가능"""
        response = client.patch("/users/u1", json={"isAdmin": True}, headers=user_headers)

        assert response.status_code == 403

    def test_update_is_admin_by_admin(self, client, admin_headers, u1):
        with patch.object(User, "update", new_callable=AsyncMock, return_value={**u1, "isAdmin": True}):
            response = client.patch("/users/u1", json={"isAdmin": True}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["user"]["isAdmin"] is True

    def test_update_other_user_forbidden(self, client, other_user_headers):
        response = client.patch("/users/u1", json={"firstName": "Aliya"}, headers=other_user_headers)

        assert response.status_code == 403

    def test_update_invalid_email(self, client, user_headers):
        response = client.patch("/users/u1", json={"email": "not-an-email"}, headers=user_headers)

        assert response.status_code == 400

    def test_update_null_first_name(self, client, user_headers):
        response = client.patch("/users/u1", json={"firstName": None}, headers=user_headers)

        assert response.status_code == 400


class TestDeleteUser:
    """DELETE /users/{username} 테스트"""

    def test_delete_own_user(self, client, conn, user_headers):
        conn.fetchrow.return_value = {"username": "u1"}

        response = client.delete("/users/u1", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "u1"}

    def test_delete_other_user_forbidden(self, client, other_user_headers):
        response = client.delete("/users/u1", headers=other_user_headers)

        assert response.status_code == 403
