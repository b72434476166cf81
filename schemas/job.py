from pydantic import model_validator

from schemas.commons import CamelModel, RequestModel, Handle, Name, Salary, Equity
from schemas.company import CompanyBase


class JobBase(CamelModel):
    id: int
    title: str
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: Handle


class JobDetail(CamelModel):
    id: int
    title: str
    salary: Salary | None = None
    equity: Equity | None = None
    company: CompanyBase | None = None


class JobResponse(CamelModel):
    job: JobBase


class JobDetailResponse(CamelModel):
    job: JobDetail


class JobListResponse(CamelModel):
    jobs: list[JobBase]


class JobCreateRequest(RequestModel):
    title: Name
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: Handle


class JobUpdateRequest(RequestModel):
    """id, companyHandle은 수정 불가 (보내면 400)"""
    title: Name | None = None
    salary: Salary | None = None
    equity: Equity | None = None

    @model_validator(mode='after')
    def check_title_not_null(self):
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title은 null로 설정할 수 없습니다.")
        return self
