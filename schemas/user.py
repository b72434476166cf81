from pydantic import EmailStr, model_validator

from schemas.commons import CamelModel, RequestModel, Username, Name


class UserBase(CamelModel):
    username: Username
    first_name: str
    last_name: str
    email: EmailStr
    is_admin: bool = False


class UserResponse(CamelModel):
    user: UserBase


class UserListResponse(CamelModel):
    users: list[UserBase]


class UserUpdateRequest(RequestModel):
    first_name: Name | None = None
    last_name: Name | None = None
    email: EmailStr | None = None
    is_admin: bool | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        """PATCH에서 명시적으로 보낸 필드(model_fields_set)는 null 불가"""
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field}은(는) null로 설정할 수 없습니다.")
        return self
