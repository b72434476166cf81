from typing import Annotated

from fastapi import APIRouter, Query, status

from crud.job import Job
from schemas.commons import DBConn, DeletedResponse, INT32_MAX, JobId
from schemas.job import (
    JobCreateRequest,
    JobResponse,
    JobDetailResponse,
    JobListResponse,
    JobUpdateRequest,
)
from utils.auth import AdminUser

router = APIRouter(
    prefix="/jobs",
    tags=["JOBS"],
)


@router.post("", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED)
async def create_job(_: AdminUser, job: JobCreateRequest, conn: DBConn) -> JobResponse:
    """채용공고 생성 (관리자)"""
    new_job = await Job.create(conn, job.model_dump(by_alias=True))
    return JobResponse(job=new_job)


@router.get("", response_model=JobListResponse)
async def get_jobs(
        conn: DBConn,
        title: Annotated[str | None, Query(min_length=1, max_length=255)] = None,
        min_salary: Annotated[int | None, Query(alias="minSalary", ge=0, le=INT32_MAX)] = None,
        has_equity: Annotated[bool | None, Query(alias="hasEquity")] = None,
) -> JobListResponse:
    """
    채용공고 목록 조회
    - title: 제목 검색 (대소문자 무시)
    - minSalary: 최소 연봉
    - hasEquity: true면 지분이 있는 공고만
    """
    jobs = await Job.find_all(conn, title=title, min_salary=min_salary, has_equity=has_equity)
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job_id: JobId, conn: DBConn) -> JobDetailResponse:
    """채용공고 상세 조회"""
    job = await Job.get(conn, job_id)
    return JobDetailResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(_: AdminUser, job_id: JobId, update_data: JobUpdateRequest, conn: DBConn) -> JobResponse:
    """채용공고 수정 (관리자)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    job = await Job.update(conn, job_id, update_fields)
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(_: AdminUser, job_id: JobId, conn: DBConn) -> DeletedResponse:
    """채용공고 삭제 (관리자)"""
    await Job.remove(conn, job_id)
    return DeletedResponse(deleted=str(job_id))
