"""Account user API, nested under /account/{account_id}/user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import (
    CurrentPrincipal,
    get_customer_service,
    get_customer_service_for_write,
    get_page_request,
)
from app.application.dtos.user import UserCreate, UserUpdate
from app.application.services import CustomerService
from app.domain.value_objects.pagination import PageRequest
from app.schemas.common import ERROR_RESPONSES, PageResponse, to_page_response
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    account_id: int,
    body: UserCreateRequest,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
):
    """Add a user to the caller's account."""
    user = await service.create_user(
        principal.account_id, account_id, UserCreate(**body.model_dump())
    )
    return UserResponse.model_validate(user)


@router.get("/list", response_model=PageResponse[UserResponse])
async def list_users(
    account_id: int,
    principal: CurrentPrincipal,
    page: PageRequest = Depends(get_page_request),
    service: CustomerService = Depends(get_customer_service),
):
    result = await service.list_users(principal.account_id, account_id, page)
    return to_page_response(result, UserResponse.model_validate)


@router.get("/lookup", response_model=UserResponse)
async def lookup_user(
    account_id: int,
    email: Annotated[str, Query(min_length=1)],
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service),
):
    """Find a user of this account by email."""
    user = await service.find_user_by_email(principal.account_id, account_id, email)
    return UserResponse.model_validate(user)


@router.get("/{user_id}/fetch", response_model=UserResponse)
async def fetch_user(
    account_id: int,
    user_id: int,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service),
):
    user = await service.fetch_user(principal.account_id, account_id, user_id)
    return UserResponse.model_validate(user)


@router.put("/{user_id}/update", response_model=UserResponse)
async def update_user(
    account_id: int,
    user_id: int,
    body: UserUpdateRequest,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
):
    user = await service.update_user(
        principal.account_id, account_id, user_id, UserUpdate(**body.model_dump())
    )
    return UserResponse.model_validate(user)


@router.delete("/{user_id}/delete", status_code=204)
async def delete_user(
    account_id: int,
    user_id: int,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
) -> None:
    await service.delete_user(principal.account_id, account_id, user_id)
