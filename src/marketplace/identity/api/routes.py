"""FastAPI endpoints for the Identity context."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from marketplace.identity.api.schemas import (
    ChangeUserStatusRequest,
    RegisterUserRequest,
    StatusResponse,
    UserIdResponse,
    UserResponse,
)
from marketplace.identity.user.registration import ChangeUserStatus, RegisterUser
from marketplace.identity.user.user import User
from marketplace.shared.identifiers import ensure_identifier

router = APIRouter(prefix="/users", tags=["users"])


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        name=user.name,
        email=user.email,
        role=user.role,
        status=user.status,
        created_at=user.created_at,
    )


@router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(name=body.name, email=body.email, role=body.role)
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@router.put("/{user_id}/status", response_model=StatusResponse)
async def change_user_status(user_id: str, body: ChangeUserStatusRequest) -> StatusResponse:
    command = ChangeUserStatus(user_id=user_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    user = current_domain.repository_for(User).get(ensure_identifier(user_id, "user_id"))
    return _user_response(user)


@router.get("/roles/{role}", response_model=list[UserResponse])
async def list_users_by_role(role: str) -> list[UserResponse]:
    """Active users holding a role."""
    return [_user_response(user) for user in current_domain.repository_for(User).list_by_role(role)]
