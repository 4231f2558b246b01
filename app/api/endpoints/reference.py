"""Reference data API: sensors, units and device models.

Authenticated but global: there is no ownership check on reference data.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_device_service, get_page_request
from app.application.services import DeviceService
from app.domain.value_objects.pagination import PageRequest
from app.schemas.common import ERROR_RESPONSES, PageResponse, to_page_response
from app.schemas.reference import DeviceModelResponse, SensorResponse, UnitResponse

sensor_router = APIRouter(responses=ERROR_RESPONSES)
unit_router = APIRouter(responses=ERROR_RESPONSES)
model_router = APIRouter(responses=ERROR_RESPONSES)


# ---- Sensors ----


@sensor_router.get("/list", response_model=PageResponse[SensorResponse])
async def list_sensors(
    page: PageRequest = Depends(get_page_request),
    service: DeviceService = Depends(get_device_service),
):
    result = await service.list_sensors(page)
    return to_page_response(result, SensorResponse.model_validate)


@sensor_router.get("/lookup", response_model=SensorResponse)
async def lookup_sensor(
    code: Annotated[str, Query(min_length=1)],
    service: DeviceService = Depends(get_device_service),
):
    return SensorResponse.model_validate(await service.find_sensor_by_code(code))


@sensor_router.get("/{sensor_id}/fetch", response_model=SensorResponse)
async def fetch_sensor(
    sensor_id: int,
    service: DeviceService = Depends(get_device_service),
):
    return SensorResponse.model_validate(await service.fetch_sensor(sensor_id))


# ---- Units ----


@unit_router.get("/list", response_model=PageResponse[UnitResponse])
async def list_units(
    page: PageRequest = Depends(get_page_request),
    service: DeviceService = Depends(get_device_service),
):
    result = await service.list_units(page)
    return to_page_response(result, UnitResponse.model_validate)


@unit_router.get("/lookup", response_model=UnitResponse)
async def lookup_unit(
    name: Annotated[str, Query(min_length=1)],
    service: DeviceService = Depends(get_device_service),
):
    return UnitResponse.model_validate(await service.find_unit_by_name(name))


@unit_router.get("/{unit_id}/fetch", response_model=UnitResponse)
async def fetch_unit(
    unit_id: int,
    service: DeviceService = Depends(get_device_service),
):
    return UnitResponse.model_validate(await service.fetch_unit(unit_id))


# ---- Device models ----


@model_router.get("/list", response_model=PageResponse[DeviceModelResponse])
async def list_models(
    page: PageRequest = Depends(get_page_request),
    service: DeviceService = Depends(get_device_service),
):
    result = await service.list_models(page)
    return to_page_response(result, DeviceModelResponse.model_validate)


@model_router.get("/{model_id}/fetch", response_model=DeviceModelResponse)
async def fetch_model(
    model_id: int,
    service: DeviceService = Depends(get_device_service),
):
    return DeviceModelResponse.model_validate(await service.fetch_model(model_id))
