"""Soft delete: deleted rows vanish from every read but stay in storage."""

from fastapi import FastAPI
from httpx import AsyncClient
from sqlalchemy import select

from app.infrastructure.persistence.models import Address, Device, User


async def test_deleted_device_is_gone_but_stored(
    app: FastAPI, client: AsyncClient, register, model_id: int
) -> None:
    account_id, headers = await register("soft@x.com")
    base = f"/api/account/{account_id}/device"
    created = await client.post(
        base,
        json={"name": "Tmp", "serialNumber": "SOFT-1", "modelId": model_id},
        headers=headers,
    )
    device_id = created.json()["id"]
    await client.post(
        base,
        json={"name": "Keep", "serialNumber": "SOFT-2", "modelId": model_id},
        headers=headers,
    )

    deleted = await client.delete(f"{base}/{device_id}/delete", headers=headers)
    assert deleted.status_code == 204

    fetched = await client.get(f"{base}/{device_id}/fetch", headers=headers)
    assert fetched.status_code == 404
    assert fetched.json()["code"] == "ERR_NOT_FOUND_DEVICE_BY_ID"

    listed = await client.get(f"{base}/list", headers=headers)
    assert listed.json()["total"] == 1
    assert [d["serialNumber"] for d in listed.json()["data"]] == ["SOFT-2"]

    lookup = await client.get(
        f"{base}/lookup", params={"serialNumber": "SOFT-1"}, headers=headers
    )
    assert lookup.status_code == 404

    again = await client.delete(f"{base}/{device_id}/delete", headers=headers)
    assert again.status_code == 404

    async with app.state.context.database.reader_session() as session:
        row = (
            await session.execute(select(Device).where(Device.id == device_id))
        ).scalar_one()
    assert row.active is False


async def test_deleted_user_and_address_are_gone(
    app: FastAPI, client: AsyncClient, register
) -> None:
    account_id, headers = await register("soft2@x.com")
    user = await client.post(
        f"/api/account/{account_id}/user",
        json={"email": "u@y.com", "firstName": "U", "lastName": "Ser"},
        headers=headers,
    )
    address = await client.post(
        f"/api/account/{account_id}/address",
        json={
            "name": "Home",
            "addressLine1": "2 Side St",
            "city": "Shelbyville",
            "postalCode": "54321",
            "country": "US",
        },
        headers=headers,
    )
    user_id = user.json()["id"]
    address_id = address.json()["id"]

    assert (
        await client.delete(f"/api/account/{account_id}/user/{user_id}/delete", headers=headers)
    ).status_code == 204
    assert (
        await client.delete(
            f"/api/account/{account_id}/address/{address_id}/delete", headers=headers
        )
    ).status_code == 204

    user_fetch = await client.get(
        f"/api/account/{account_id}/user/{user_id}/fetch", headers=headers
    )
    address_fetch = await client.get(
        f"/api/account/{account_id}/address/{address_id}/fetch", headers=headers
    )
    assert user_fetch.json()["code"] == "ERR_NOT_FOUND_USER_BY_ID"
    assert address_fetch.json()["code"] == "ERR_NOT_FOUND_ADDRESS_BY_ID"

    users = await client.get(f"/api/account/{account_id}/user/list", headers=headers)
    addresses = await client.get(f"/api/account/{account_id}/address/list", headers=headers)
    assert users.json()["total"] == 0
    assert addresses.json()["total"] == 0

    async with app.state.context.database.reader_session() as session:
        stored_user = await session.get(User, user_id)
        stored_address = await session.get(Address, address_id)
    assert stored_user is not None and stored_user.active is False
    assert stored_address is not None and stored_address.active is False
