from decimal import Decimal
from typing import Annotated

import asyncpg
from fastapi import Depends, Path
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from utils.database import get_connection

DBConn = Annotated[asyncpg.Connection, Depends(get_connection)]

Handle = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$"),
    Field(description="회사 handle", examples=["anderson-arias-morrow"]),
]

Username = Annotated[
    str,
    StringConstraints(min_length=1, max_length=25),
    Field(description="사용자 ID", examples=["testuser"]),
]

Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=255),
]

# PostgreSQL INTEGER (int32) 범위
INT32_MAX = 2_147_483_647

Salary = Annotated[int, Field(ge=0, le=INT32_MAX)]
Equity = Annotated[Decimal, Field(ge=0, le=1, description="지분 (0 ~ 1)")]
Count = Annotated[int, Field(ge=0, le=INT32_MAX)]
JobId = Annotated[int, Path(ge=1, le=INT32_MAX, description="채용공고 ID")]


class CamelModel(BaseModel):
    """API 필드는 camelCase (numEmployees, logoUrl ...)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(BaseModel):
    """요청 바디: camelCase만 허용, 정의되지 않은 필드는 거부"""
    model_config = ConfigDict(alias_generator=to_camel, extra='forbid')


class DeletedResponse(BaseModel):
    deleted: str
