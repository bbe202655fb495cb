"""
Users API endpoints
"""
from fastapi import APIRouter, Depends, Request, Response
from typing import List
import logging

from constants import HTTPStatus
from dependencies import get_user_service
from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse, ErrorResponse
from exceptions import UserNotFoundError
from services.interfaces import IUserService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users", response_model=List[UserResponse])
@handle_api_errors("List users")
def list_users(service: IUserService = Depends(get_user_service)):
    """Get all users in storage order."""
    return service.get_all()


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={HTTPStatus.NOT_FOUND: {"model": ErrorResponse}}
)
@handle_api_errors("Get user")
def get_user(user_id: str, service: IUserService = Depends(get_user_service)):
    """
    Get a specific user.

    Raises:
        HTTPException: 404 if no user has this id
    """
    user = service.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=HTTPStatus.CREATED,
    responses={
        HTTPStatus.BAD_REQUEST: {"model": ErrorResponse},
        HTTPStatus.CONFLICT: {"model": ErrorResponse},
    }
)
@handle_api_errors("Create user")
def create_user(
    dto: CreateUserRequest,
    request: Request,
    response: Response,
    service: IUserService = Depends(get_user_service)
):
    """
    Create a user.

    Returns the created user with a Location header pointing at it.

    Raises:
        HTTPException: 400 on invalid fields, 409 if the email is taken
    """
    user = service.create(dto)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@handle_api_errors("Update user")
def update_user(
    user_id: str,
    dto: UpdateUserRequest,
    service: IUserService = Depends(get_user_service)
):
    """
    Partially update a user; omitted fields keep their value.

    Raises:
        HTTPException: 400 on invalid fields, 404 if no user has this id,
            409 if the new email belongs to another user
    """
    return service.update(user_id, dto)


_update_responses = {
    HTTPStatus.BAD_REQUEST: {"model": ErrorResponse},
    HTTPStatus.NOT_FOUND: {"model": ErrorResponse},
    HTTPStatus.CONFLICT: {"model": ErrorResponse},
}

router.add_api_route(
    "/users/{user_id}", update_user, methods=["PUT"],
    response_model=UserResponse, responses=_update_responses, name="replace_user"
)
router.add_api_route(
    "/users/{user_id}", update_user, methods=["PATCH"],
    response_model=UserResponse, responses=_update_responses, name="patch_user"
)


@router.delete(
    "/users/{user_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses={HTTPStatus.NOT_FOUND: {"model": ErrorResponse}}
)
@handle_api_errors("Delete user")
def delete_user(user_id: str, service: IUserService = Depends(get_user_service)):
    """
    Delete a user.

    Raises:
        HTTPException: 404 if no user has this id
    """
    if not service.delete(user_id):
        raise UserNotFoundError(user_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
