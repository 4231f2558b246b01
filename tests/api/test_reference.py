"""Reference data endpoints: sensors, units and device models."""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def headers(register) -> dict[str, str]:
    _, auth = await register("reference@x.com")
    return auth


async def test_reference_data_requires_token(client: AsyncClient) -> None:
    response = await client.get("/api/sensor/list")
    assert response.status_code == 401
    assert response.json()["code"] == "ERR_MISSING_TOKEN"


async def test_sensor_fetch_and_lookup(client: AsyncClient, headers) -> None:
    found = await client.get("/api/sensor/lookup", params={"code": "CO2"}, headers=headers)
    assert found.status_code == 200
    sensor = found.json()
    assert sensor["name"] == "Carbon dioxide"
    assert sensor["defaultConfig"] == {"interval": 120, "calibration": 400}

    fetched = await client.get(f"/api/sensor/{sensor['id']}/fetch", headers=headers)
    assert fetched.json() == sensor

    unit = await client.get(f"/api/unit/{sensor['unitId']}/fetch", headers=headers)
    assert unit.json()["symbol"] == "ppm"


async def test_unit_lookup_by_name(client: AsyncClient, headers) -> None:
    response = await client.get("/api/unit/lookup", params={"name": "Celsius"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["symbol"] == "°C"


async def test_model_list_and_fetch(client: AsyncClient, headers) -> None:
    listed = await client.get("/api/model/list", headers=headers)
    assert listed.json()["total"] == 2
    first = listed.json()["data"][0]
    fetched = await client.get(f"/api/model/{first['id']}/fetch", headers=headers)
    assert fetched.json() == first


@pytest.mark.parametrize(
    ("path", "params", "code"),
    [
        ("/api/sensor/424242/fetch", None, "ERR_NOT_FOUND_SENSOR_BY_ID"),
        ("/api/sensor/lookup", {"code": "NOPE"}, "ERR_NOT_FOUND_SENSOR_BY_CODE"),
        ("/api/unit/424242/fetch", None, "ERR_NOT_FOUND_UNIT_BY_ID"),
        ("/api/unit/lookup", {"name": "Furlong"}, "ERR_NOT_FOUND_UNIT_BY_NAME"),
        ("/api/model/424242/fetch", None, "ERR_NOT_FOUND_MODEL_BY_ID"),
    ],
)
async def test_reference_not_found(client: AsyncClient, headers, path, params, code) -> None:
    response = await client.get(path, params=params, headers=headers)
    assert response.status_code == 404
    assert response.json()["code"] == code
