import logging
from typing import Any, Mapping

import asyncpg

from utils.errors import NotFoundError
from utils.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

USER_COLUMNS = """username,
                  first_name AS "firstName",
                  last_name AS "lastName",
                  email,
                  is_admin AS "isAdmin"
"""

USER_FIELD_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}
USER_UPDATABLE_FIELDS = frozenset(["firstName", "lastName", "email", "isAdmin"])


class User:

    @staticmethod
    async def find_all(conn: asyncpg.Connection) -> list[dict]:
        """전체 유저 목록 (username순)"""
        rows = await conn.fetch(f"SELECT {USER_COLUMNS} FROM users ORDER BY username")
        return [dict(row) for row in rows]

    @staticmethod
    async def get(conn: asyncpg.Connection, username: str) -> dict:
        row = await conn.fetchrow(
            f"SELECT {USER_COLUMNS} FROM users WHERE username = $1",
            username,
        )
        if row is None:
            raise NotFoundError(f"No user: {username}")
        return dict(row)

    @staticmethod
    async def update(conn: asyncpg.Connection, username: str, data: Mapping[str, Any]) -> dict:
        """유저 정보 부분 수정 (firstName, lastName, email, isAdmin)"""
        fragment = sql_for_partial_update(data, USER_FIELD_MAP, USER_UPDATABLE_FIELDS)

        row = await conn.fetchrow(
            f"""
            UPDATE users
            SET {fragment.set_cols}
            WHERE username = {fragment.next_placeholder()}
            RETURNING {USER_COLUMNS}
            """,
            *fragment.params(username),
        )
        if row is None:
            raise NotFoundError(f"No user: {username}")

        logger.info("User updated: %s (%s)", username, ", ".join(data))
        return dict(row)

    @staticmethod
    async def remove(conn: asyncpg.Connection, username: str) -> None:
        row = await conn.fetchrow(
            "DELETE FROM users WHERE username = $1 RETURNING username",
            username,
        )
        if row is None:
            raise NotFoundError(f"No user: {username}")
        logger.info("User deleted: %s", username)
