from fastapi import APIRouter

from crud.user import User
from schemas.commons import DBConn, DeletedResponse
from schemas.user import UserResponse, UserListResponse, UserUpdateRequest
from utils.auth import AdminUser, OwnUserOrAdmin
from utils.errors import ForbiddenError

router = APIRouter(
    prefix="/users",
    tags=["USERS"],
)


@router.get("", response_model=UserListResponse)
async def get_users(_: AdminUser, conn: DBConn) -> UserListResponse:
    """전체 유저 목록 (관리자)"""
    users = await User.find_all(conn)
    return UserListResponse(users=users)


@router.get("/{username}", response_model=UserResponse)
async def get_user(_: OwnUserOrAdmin, username: str, conn: DBConn) -> UserResponse:
    """유저 조회 (본인 또는 관리자)"""
    user = await User.get(conn, username)
    return UserResponse(user=user)


@router.patch("/{username}", response_model=UserResponse)
async def update_user(
        current_user: OwnUserOrAdmin, username: str, update_data: UserUpdateRequest, conn: DBConn) -> UserResponse:
    """유저 정보 수정 (본인 또는 관리자, isAdmin은 관리자만)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    if "isAdmin" in update_fields and not current_user.get("isAdmin"):
        raise ForbiddenError("Only admins can change isAdmin")

    user = await User.update(conn, username, update_fields)
    return UserResponse(user=user)


@router.delete("/{username}", response_model=DeletedResponse)
async def delete_user(_: OwnUserOrAdmin, username: str, conn: DBConn) -> DeletedResponse:
    """회원 탈퇴 (본인 또는 관리자)"""
    await User.remove(conn, username)
    return DeletedResponse(deleted=username)
