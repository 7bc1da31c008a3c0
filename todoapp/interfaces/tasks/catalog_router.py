"""
FastAPI router for the entities tasks refer to: users, categories, tags.

All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Depends, status

from todoapp.application.tasks.create_category import CreateCategoryUseCase
from todoapp.application.tasks.create_tag import CreateTagUseCase
from todoapp.application.tasks.create_user import CreateUserUseCase
from todoapp.application.tasks.dtos import (
    CreateCategoryCommand,
    CreateTagCommand,
    CreateUserCommand,
)
from todoapp.application.tasks.get_user import GetUserUseCase
from todoapp.domain.tasks.errors import ReferenceNotFoundError
from todoapp.interfaces.tasks.dependencies import (
    get_create_category_use_case,
    get_create_tag_use_case,
    get_create_user_use_case,
    get_user_use_case,
)
from todoapp.interfaces.tasks.schemas import (
    CreateOwnedEntityRequest,
    CreateUserRequest,
    ErrorResponse,
    OwnedEntityResponse,
    UserResponse,
)

router = APIRouter(tags=["catalog"])


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a user",
)
def create_user(
    payload: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    result = use_case.execute(CreateUserCommand(name=payload.name, email=payload.email))
    return UserResponse.from_result(result)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a user",
)
def get_user(
    user_id: int,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> UserResponse:
    result = use_case.execute(user_id)
    if result is None:
        raise ReferenceNotFoundError("User", user_id)
    return UserResponse.from_result(result)


@router.post(
    "/categories",
    response_model=OwnedEntityResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Create a category",
)
def create_category(
    payload: CreateOwnedEntityRequest,
    use_case: CreateCategoryUseCase = Depends(get_create_category_use_case),
) -> OwnedEntityResponse:
    result = use_case.execute(
        CreateCategoryCommand(name=payload.name, user_id=payload.user_id)
    )
    return OwnedEntityResponse.from_result(result)


@router.post(
    "/tags",
    response_model=OwnedEntityResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Create a tag",
)
def create_tag(
    payload: CreateOwnedEntityRequest,
    use_case: CreateTagUseCase = Depends(get_create_tag_use_case),
) -> OwnedEntityResponse:
    result = use_case.execute(CreateTagCommand(name=payload.name, user_id=payload.user_id))
    return OwnedEntityResponse.from_result(result)
