from typing import Annotated

from fastapi import APIRouter, Query, status

from crud.company import Company
from schemas.commons import DBConn, DeletedResponse, INT32_MAX
from schemas.company import (
    CompanyCreateRequest,
    CompanyResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyUpdateRequest,
)
from utils.auth import AdminUser

router = APIRouter(
    prefix="/companies",
    tags=["COMPANIES"],
)


@router.post("", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED)
async def create_company(_: AdminUser, company: CompanyCreateRequest, conn: DBConn) -> CompanyResponse:
    """회사 생성 (관리자)"""
    new_company = await Company.create(conn, company.model_dump(by_alias=True))
    return CompanyResponse(company=new_company)


@router.get("", response_model=CompanyListResponse)
async def get_companies(
        conn: DBConn,
        name_like: Annotated[str | None, Query(alias="nameLike", min_length=1, max_length=255)] = None,
        min_employees: Annotated[int | None, Query(alias="minEmployees", ge=0, le=INT32_MAX)] = None,
        max_employees: Annotated[int | None, Query(alias="maxEmployees", ge=0, le=INT32_MAX)] = None,
) -> CompanyListResponse:
    """
    회사 목록 조회
    - nameLike: 이름 검색 (대소문자 무시)
    - minEmployees, maxEmployees: 직원 수 범위
    """
    companies = await Company.find_all(
        conn,
        name_like=name_like,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return CompanyListResponse(companies=companies)


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: str, conn: DBConn) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 포함)"""
    company = await Company.get(conn, handle)
    return CompanyDetailResponse(company=company)


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(
        _: AdminUser, handle: str, update_data: CompanyUpdateRequest, conn: DBConn) -> CompanyResponse:
    """회사 정보 수정 (관리자)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    company = await Company.update(conn, handle, update_fields)
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=DeletedResponse)
async def delete_company(_: AdminUser, handle: str, conn: DBConn) -> DeletedResponse:
    """회사 삭제 (관리자)"""
    await Company.remove(conn, handle)
    return DeletedResponse(deleted=handle)
