"""
Company 관련 DB 작업.

모든 메서드는 asyncpg 커넥션을 첫 인자로 받고,
컬럼명은 API 필드명(camelCase)으로 바꿔서 dict로 반환한다.
"""
import logging
from typing import Any, Mapping

import asyncpg

from utils.errors import BadRequestError, NotFoundError
from utils.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = """handle,
                     name,
                     description,
                     num_employees AS "numEmployees",
                     logo_url AS "logoUrl"
"""

# API 필드명 -> DB 컬럼 매핑
COMPANY_FIELD_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}
COMPANY_UPDATABLE_FIELDS = frozenset(["name", "description", "numEmployees", "logoUrl"])


class Company:

    @staticmethod
    async def create(conn: asyncpg.Connection, data: Mapping[str, Any]) -> dict:
        """
        회사 생성

        data: {handle, name, description, numEmployees, logoUrl}
        Raises BadRequestError: 같은 handle/name의 회사가 이미 있는 경우
        """
        handle = data["handle"]
        duplicate = await conn.fetchrow(
            "SELECT handle FROM companies WHERE handle = $1",
            handle,
        )
        if duplicate:
            raise BadRequestError(f"Duplicate company: {handle}")

        try:
            row = await conn.fetchrow(
                f"""
                INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}
                """,
                handle,
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            )
        except asyncpg.UniqueViolationError as e:
            # 동시 생성으로 pkey(handle) 또는 name unique 제약 위반
            duplicate = data["name"] if e.constraint_name == "companies_name_key" else handle
            raise BadRequestError(f"Duplicate company: {duplicate}") from None

        logger.info("Company created: %s", handle)
        return dict(row)

    @staticmethod
    async def find_all(
            conn: asyncpg.Connection,
            name_like: str | None = None,
            min_employees: int | None = None,
            max_employees: int | None = None,
    ) -> list[dict]:
        """
        회사 목록 조회 (이름순)
        - name_like: 이름 부분 일치 (대소문자 무시)
        - min_employees / max_employees: 직원 수 범위 (경계 포함)
        """
        if min_employees is not None and max_employees is not None and min_employees > max_employees:
            raise BadRequestError("minEmployees cannot be greater than maxEmployees")

        where_parts = []
        params: list[Any] = []

        if name_like:
            params.append(f"%{name_like}%")
            where_parts.append(f"name ILIKE ${len(params)}")
        if min_employees is not None:
            params.append(min_employees)
            where_parts.append(f"num_employees >= ${len(params)}")
        if max_employees is not None:
            params.append(max_employees)
            where_parts.append(f"num_employees <= ${len(params)}")

        where_clause = f"WHERE {' AND '.join(where_parts)}" if where_parts else ""
        rows = await conn.fetch(
            f"SELECT {COMPANY_COLUMNS} FROM companies {where_clause} ORDER BY name",
            *params,
        )
        return [dict(row) for row in rows]

    @staticmethod
    async def get(conn: asyncpg.Connection, handle: str) -> dict:
        """회사 상세 조회 (채용공고 목록 포함)"""
        row = await conn.fetchrow(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            handle,
        )
        if row is None:
            raise NotFoundError(f"No company: {handle}")

        jobs = await conn.fetch(
            """
            SELECT id, title, salary, equity
            FROM jobs
            WHERE company_handle = $1
            ORDER BY id
            """,
            handle,
        )
        company = dict(row)
        company["jobs"] = [dict(job) for job in jobs]
        return company

    @staticmethod
    async def update(conn: asyncpg.Connection, handle: str, data: Mapping[str, Any]) -> dict:
        """
        회사 정보 부분 수정 (보낸 필드만 변경)

        data: {name, description, numEmployees, logoUrl} 중 일부
        Raises:
            BadRequestError: 수정할 필드가 없는 경우 ("No data")
            NotFoundError: 해당 handle의 회사가 없는 경우
        """
        fragment = sql_for_partial_update(data, COMPANY_FIELD_MAP, COMPANY_UPDATABLE_FIELDS)

        row = await conn.fetchrow(
            f"""
            UPDATE companies
            SET {fragment.set_cols}
            WHERE handle = {fragment.next_placeholder()}
            RETURNING {COMPANY_COLUMNS}
            """,
            *fragment.params(handle),
        )
        if row is None:
            raise NotFoundError(f"No company: {handle}")

        logger.info("Company updated: %s (%s)", handle, ", ".join(data))
        return dict(row)

    @staticmethod
    async def remove(conn: asyncpg.Connection, handle: str) -> None:
        """회사 삭제 (채용공고도 함께 삭제됨)"""
        row = await conn.fetchrow(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            handle,
        )
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        logger.info("Company deleted: %s", handle)
