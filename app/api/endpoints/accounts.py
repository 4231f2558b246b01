"""Account API: public sign-up plus fetch, update, delete and list of the caller's account."""

from fastapi import APIRouter, Depends

from app.api.dependencies import (
    CurrentPrincipal,
    get_customer_service,
    get_customer_service_for_write,
    get_page_request,
)
from app.application.dtos.account import AccountCreate, AccountUpdate
from app.application.services import CustomerService
from app.domain.value_objects.pagination import PageRequest
from app.schemas.account import (
    AccountCreateRequest,
    AccountResponse,
    AccountUpdateRequest,
)
from app.schemas.common import ERROR_RESPONSES, PageResponse, to_page_response

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("", response_model=AccountResponse, status_code=201)
async def create_account(
    body: AccountCreateRequest,
    service: CustomerService = Depends(get_customer_service_for_write),
):
    """Sign up (public). A duplicate email is rejected by the store."""
    account = await service.create_account(
        AccountCreate(
            email=body.email,
            password=body.password,
            name=body.name,
            receives_updates=body.receives_updates,
        )
    )
    return AccountResponse.model_validate(account)


@router.get("/list", response_model=PageResponse[AccountResponse])
async def list_accounts(
    principal: CurrentPrincipal,
    page: PageRequest = Depends(get_page_request),
    service: CustomerService = Depends(get_customer_service),
):
    """Accounts visible to the caller (its own)."""
    result = await service.list_accounts(principal.account_id, page)
    return to_page_response(result, AccountResponse.model_validate)


@router.get("/{account_id}/fetch", response_model=AccountResponse)
async def fetch_account(
    account_id: int,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service),
):
    account = await service.fetch_account(principal.account_id, account_id)
    return AccountResponse.model_validate(account)


@router.put("/{account_id}/update", response_model=AccountResponse)
async def update_account(
    account_id: int,
    body: AccountUpdateRequest,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
):
    """Update name, receivesUpdates and/or password."""
    account = await service.update_account(
        principal.account_id,
        account_id,
        AccountUpdate(
            name=body.name,
            receives_updates=body.receives_updates,
            password=body.password,
        ),
    )
    return AccountResponse.model_validate(account)


@router.delete("/{account_id}/delete", status_code=204)
async def delete_account(
    account_id: int,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
) -> None:
    """Soft-delete the caller's account."""
    await service.delete_account(principal.account_id, account_id)
