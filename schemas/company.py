from pydantic import model_validator

from schemas.commons import CamelModel, RequestModel, Handle, Name, Count, Salary, Equity


class CompanyBase(CamelModel):
    handle: Handle
    name: str
    description: str
    num_employees: Count | None = None
    logo_url: str | None = None


class CompanyJob(CamelModel):
    """회사 상세에 포함되는 채용공고"""
    id: int
    title: str
    salary: Salary | None = None
    equity: Equity | None = None


class CompanyDetail(CompanyBase):
    jobs: list[CompanyJob] = []


class CompanyResponse(CamelModel):
    company: CompanyBase


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[CompanyBase]


class CompanyCreateRequest(RequestModel):
    handle: Handle
    name: Name
    description: str = ""
    num_employees: Count | None = None
    logo_url: str | None = None


class CompanyUpdateRequest(RequestModel):
    """handle은 수정 불가"""
    name: Name | None = None
    description: str | None = None
    num_employees: Count | None = None
    logo_url: str | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        """
        보낸 필드만 수정하므로 model_fields_set 기준으로 검사
        name, description은 null로 설정할 수 없음
        """
        for field in ("name", "description"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field}은(는) null로 설정할 수 없습니다.")
        return self
