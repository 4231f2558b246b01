"""Device API, nested under /account/{account_id}/device."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import (
    CurrentPrincipal,
    get_device_service,
    get_device_service_for_write,
    get_page_request,
)
from app.application.dtos.device import DeviceCreate, DevicePatch
from app.application.services import DeviceService
from app.domain.value_objects.pagination import PageRequest
from app.schemas.common import ERROR_RESPONSES, PageResponse, to_page_response
from app.schemas.device import DeviceCreateRequest, DeviceResponse, DeviceUpdateRequest

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("", response_model=DeviceResponse, status_code=201)
async def create_device(
    account_id: int,
    body: DeviceCreateRequest,
    principal: CurrentPrincipal,
    service: DeviceService = Depends(get_device_service_for_write),
):
    """Register a device; the serial number must not already be registered."""
    device = await service.create_device(
        principal.account_id,
        account_id,
        DeviceCreate(
            name=body.name,
            serial_number=body.serial_number,
            model_id=body.model_id,
            model_config=body.config,
        ),
    )
    return DeviceResponse.from_result(device)


@router.get("/list", response_model=PageResponse[DeviceResponse])
async def list_devices(
    account_id: int,
    principal: CurrentPrincipal,
    page: PageRequest = Depends(get_page_request),
    service: DeviceService = Depends(get_device_service),
):
    result = await service.list_devices(principal.account_id, account_id, page)
    return to_page_response(result, DeviceResponse.from_result)


@router.get("/lookup", response_model=DeviceResponse)
async def lookup_device(
    account_id: int,
    serial_number: Annotated[str, Query(alias="serialNumber", min_length=1)],
    principal: CurrentPrincipal,
    service: DeviceService = Depends(get_device_service),
):
    """Find a device of this account by serial number."""
    device = await service.find_device_by_serial_number(
        principal.account_id, account_id, serial_number
    )
    return DeviceResponse.from_result(device)


@router.get("/{device_id}/fetch", response_model=DeviceResponse)
async def fetch_device(
    account_id: int,
    device_id: int,
    principal: CurrentPrincipal,
    service: DeviceService = Depends(get_device_service),
):
    device = await service.fetch_device(principal.account_id, account_id, device_id)
    return DeviceResponse.from_result(device)


@router.put("/{device_id}/update", response_model=DeviceResponse)
async def update_device(
    account_id: int,
    device_id: int,
    body: DeviceUpdateRequest,
    principal: CurrentPrincipal,
    service: DeviceService = Depends(get_device_service_for_write),
):
    """Change name and model configuration. Serial number and model must match if sent."""
    device = await service.update_device(
        principal.account_id,
        account_id,
        device_id,
        DevicePatch(
            name=body.name,
            model_config=body.config,
            serial_number=body.serial_number,
            model_id=body.model_id,
        ),
    )
    return DeviceResponse.from_result(device)


@router.delete("/{device_id}/delete", status_code=204)
async def delete_device(
    account_id: int,
    device_id: int,
    principal: CurrentPrincipal,
    service: DeviceService = Depends(get_device_service_for_write),
) -> None:
    await service.delete_device(principal.account_id, account_id, device_id)
