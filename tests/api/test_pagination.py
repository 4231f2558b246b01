"""Pagination over HTTP: defaults, windows, totals and bad parameters."""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def seven_devices(client: AsyncClient, register, model_id: int):
    """An account with seven devices; returns (account_id, headers)."""
    account_id, headers = await register("pager@x.com")
    for i in range(7):
        response = await client.post(
            f"/api/account/{account_id}/device",
            json={"name": f"d{i}", "serialNumber": f"PAGE-{i}", "modelId": model_id},
            headers=headers,
        )
        assert response.status_code == 201
    return account_id, headers


async def test_defaults_are_page_zero_size_ten(client: AsyncClient, seven_devices) -> None:
    account_id, headers = seven_devices
    response = await client.get(f"/api/account/{account_id}/device/list", headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert body["page"] == 0
    assert body["pageSize"] == 10
    assert body["total"] == 7
    assert len(body["data"]) == 7


@pytest.mark.parametrize(("page", "expected"), [(0, 3), (1, 3), (2, 1), (3, 0)])
async def test_windows_keep_total(
    client: AsyncClient, seven_devices, page: int, expected: int
) -> None:
    """len(data) <= pageSize and total is the full in-scope count on every page."""
    account_id, headers = seven_devices
    response = await client.get(
        f"/api/account/{account_id}/device/list",
        params={"page": page, "pageSize": 3},
        headers=headers,
    )
    body = response.json()
    assert body["total"] == 7
    assert len(body["data"]) == expected
    assert body["page"] == page
    assert body["pageSize"] == 3


async def test_windows_are_ordered_and_disjoint(client: AsyncClient, seven_devices) -> None:
    account_id, headers = seven_devices
    seen: list[str] = []
    for page in range(3):
        response = await client.get(
            f"/api/account/{account_id}/device/list",
            params={"page": page, "pageSize": 3},
            headers=headers,
        )
        seen.extend(d["serialNumber"] for d in response.json()["data"])
    assert seen == [f"PAGE-{i}" for i in range(7)]


async def test_page_size_zero_returns_empty_data(client: AsyncClient, seven_devices) -> None:
    account_id, headers = seven_devices
    response = await client.get(
        f"/api/account/{account_id}/device/list",
        params={"pageSize": 0},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["total"] == 7


@pytest.mark.parametrize(
    ("params", "code"),
    [
        ({"pageSize": -1}, "ERR_BAD_PAGE_SIZE"),
        ({"pageSize": "ten"}, "ERR_BAD_PAGE_SIZE"),
        ({"page": -1}, "ERR_BAD_PAGE_INDEX"),
        ({"page": "x"}, "ERR_BAD_PAGE_INDEX"),
        ({"pageSize": "99999999999999999999"}, "ERR_BAD_PAGE_SIZE"),
        ({"page": "99999999999999999999"}, "ERR_BAD_PAGE_INDEX"),
        ({"page": str(2**62), "pageSize": "10"}, "ERR_BAD_PAGE_INDEX"),
    ],
)
async def test_bad_page_params(client: AsyncClient, register, params, code: str) -> None:
    account_id, headers = await register("badpage@x.com")
    response = await client.get(
        f"/api/account/{account_id}/device/list", params=params, headers=headers
    )
    assert response.status_code == 400
    assert response.json()["code"] == code


async def test_reference_lists_are_paginated(client: AsyncClient, register) -> None:
    _, headers = await register("reflist@x.com")
    response = await client.get(
        "/api/sensor/list", params={"pageSize": 2, "page": 1}, headers=headers
    )
    body = response.json()
    assert response.status_code == 200
    assert body["total"] == 5
    assert len(body["data"]) == 2


async def test_largest_page_size_is_accepted(client: AsyncClient, seven_devices) -> None:
    """pageSize at the int64 bound is a valid (if generous) window."""
    account_id, headers = seven_devices
    response = await client.get(
        f"/api/account/{account_id}/device/list",
        params={"pageSize": str(2**63 - 1)},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["total"] == 7
    assert len(response.json()["data"]) == 7
