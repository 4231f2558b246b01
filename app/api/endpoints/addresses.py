"""Address API, nested under /account/{account_id}/address."""

from fastapi import APIRouter, Depends

from app.api.dependencies import (
    CurrentPrincipal,
    get_customer_service,
    get_customer_service_for_write,
    get_page_request,
)
from app.application.dtos.address import AddressCreate, AddressUpdate
from app.application.services import CustomerService
from app.domain.value_objects.pagination import PageRequest
from app.schemas.address import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
)
from app.schemas.common import ERROR_RESPONSES, PageResponse, to_page_response

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("", response_model=AddressResponse, status_code=201)
async def create_address(
    account_id: int,
    body: AddressCreateRequest,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
):
    address = await service.create_address(
        principal.account_id,
        account_id,
        AddressCreate(**body.model_dump()),
    )
    return AddressResponse.model_validate(address)


@router.get("/list", response_model=PageResponse[AddressResponse])
async def list_addresses(
    account_id: int,
    principal: CurrentPrincipal,
    page: PageRequest = Depends(get_page_request),
    service: CustomerService = Depends(get_customer_service),
):
    result = await service.list_addresses(principal.account_id, account_id, page)
    return to_page_response(result, AddressResponse.model_validate)


@router.get("/{address_id}/fetch", response_model=AddressResponse)
async def fetch_address(
    account_id: int,
    address_id: int,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service),
):
    address = await service.fetch_address(principal.account_id, account_id, address_id)
    return AddressResponse.model_validate(address)


@router.put("/{address_id}/update", response_model=AddressResponse)
async def update_address(
    account_id: int,
    address_id: int,
    body: AddressUpdateRequest,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
):
    address = await service.update_address(
        principal.account_id,
        account_id,
        address_id,
        AddressUpdate(**body.model_dump()),
    )
    return AddressResponse.model_validate(address)


@router.delete("/{address_id}/delete", status_code=204)
async def delete_address(
    account_id: int,
    address_id: int,
    principal: CurrentPrincipal,
    service: CustomerService = Depends(get_customer_service_for_write),
) -> None:
    await service.delete_address(principal.account_id, account_id, address_id)
