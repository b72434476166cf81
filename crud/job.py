import logging
from typing import Any, Mapping

import asyncpg

from crud.company import COMPANY_COLUMNS
from utils.errors import BadRequestError, NotFoundError
from utils.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = """id,
                 title,
                 salary,
                 equity,
                 company_handle AS "companyHandle"
"""

JOB_FIELD_MAP = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}
# company_handle, id는 수정 불가
JOB_UPDATABLE_FIELDS = frozenset(JOB_FIELD_MAP)


class Job:

    @staticmethod
    async def create(conn: asyncpg.Connection, data: Mapping[str, Any]) -> dict:
        """
        채용공고 생성

        data: {title, salary, equity, companyHandle}
        Raises BadRequestError: companyHandle에 해당하는 회사가 없는 경우
        """
        try:
            row = await conn.fetchrow(
                f"""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}
                """,
                data["title"],
                data.get("salary"),
                data.get("equity"),
                data["companyHandle"],
            )
        except asyncpg.ForeignKeyViolationError:
            raise BadRequestError(f"No company: {data['companyHandle']}") from None

        logger.info("Job created: %s", row["id"])
        return dict(row)

    @staticmethod
    async def find_all(
            conn: asyncpg.Connection,
            title: str | None = None,
            min_salary: int | None = None,
            has_equity: bool | None = None,
    ) -> list[dict]:
        """
        채용공고 목록 조회 (제목순)
        - title: 제목 부분 일치 (대소문자 무시)
        - min_salary: 최소 연봉 (이상)
        - has_equity: True면 equity > 0 인 공고만
        """
        where_parts = []
        params: list[Any] = []

        if title:
            params.append(f"%{title}%")
            where_parts.append(f"title ILIKE ${len(params)}")
        if min_salary is not None:
            params.append(min_salary)
            where_parts.append(f"salary >= ${len(params)}")
        if has_equity:
            where_parts.append("equity > 0")

        where_clause = f"WHERE {' AND '.join(where_parts)}" if where_parts else ""
        rows = await conn.fetch(
            f"SELECT {JOB_COLUMNS} FROM jobs {where_clause} ORDER BY title",
            *params,
        )
        return [dict(row) for row in rows]

    @staticmethod
    async def get(conn: asyncpg.Connection, job_id: int) -> dict:
        """채용공고 상세 조회 (회사 정보 포함)"""
        row = await conn.fetchrow(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
            job_id,
        )
        if row is None:
            raise NotFoundError(f"No job: {job_id}")

        job = dict(row)
        company = await conn.fetchrow(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            job.pop("companyHandle"),
        )
        job["company"] = dict(company) if company else None
        return job

    @staticmethod
    async def update(conn: asyncpg.Connection, job_id: int, data: Mapping[str, Any]) -> dict:
        """
        채용공고 부분 수정

        data: {title, salary, equity} 중 일부
        Raises:
            BadRequestError: 수정할 필드가 없거나 수정 불가 필드가 포함된 경우
            NotFoundError: 해당 id의 공고가 없는 경우
        """
        fragment = sql_for_partial_update(data, JOB_FIELD_MAP, JOB_UPDATABLE_FIELDS)

        row = await conn.fetchrow(
            f"""
            UPDATE jobs
            SET {fragment.set_cols}
            WHERE id = {fragment.next_placeholder()}
            RETURNING {JOB_COLUMNS}
            """,
            *fragment.params(job_id),
        )
        if row is None:
            raise NotFoundError(f"No job: {job_id}")

        logger.info("Job updated: %s (%s)", job_id, ", ".join(data))
        return dict(row)

    @staticmethod
    async def remove(conn: asyncpg.Connection, job_id: int) -> None:
        """채용공고 삭제"""
        row = await conn.fetchrow(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            job_id,
        )
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        logger.info("Job deleted: %s", job_id)
