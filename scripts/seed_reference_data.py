"""Seed reference data (units, device models, sensors) from docs/reference-data.json.

Idempotent: rows are matched on their unique key (unit name, model code,
sensor code) and skipped when present. Sensors name their unit by unit name.

Usage:
    python -m scripts.seed_reference_data [path/to/reference-data.json]

Default path: docs/reference-data.json (relative to project root).
Requires: DATABASE_URL and SECRET_KEY (env or .env); tables must exist
(DATABASE_CREATE_TABLES=true on first start, or Database.create_all()).
"""

from __future__ import annotations

import asyncio
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.models import DeviceModel, Sensor, Unit


@dataclass
class SeedCounts:
    units: int = 0
    models: int = 0
    sensors: int = 0


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _unit_ids_by_name(session: AsyncSession) -> dict[str, int]:
    result = await session.execute(select(Unit.name, Unit.id))
    return {name: unit_id for name, unit_id in result.all()}


async def seed_reference_data(session: AsyncSession, data: dict[str, Any]) -> SeedCounts:
    """Insert missing units, models and sensors. Returns how many rows were added.

    Raises:
        ValueError: A sensor names a unit that is neither seeded nor stored.
    """
    counts = SeedCounts()

    existing_units = await _unit_ids_by_name(session)
    for u in data.get("units", []):
        if u["name"] in existing_units:
            continue
        session.add(Unit(name=u["name"], symbol=u["symbol"]))
        counts.units += 1
    await session.flush()
    unit_ids = await _unit_ids_by_name(session)

    existing_models = set((await session.execute(select(DeviceModel.code))).scalars())
    for m in data.get("models", []):
        if m["code"] in existing_models:
            continue
        session.add(DeviceModel(name=m["name"], code=m["code"]))
        counts.models += 1

    existing_sensors = set((await session.execute(select(Sensor.code))).scalars())
    for s in data.get("sensors", []):
        if s["code"] in existing_sensors:
            continue
        unit_id = unit_ids.get(s["unit"])
        if unit_id is None:
            raise ValueError(f"Sensor {s['code']} references unknown unit {s['unit']!r}")
        session.add(
            Sensor(
                unit_id=unit_id,
                code=s["code"],
                name=s["name"],
                config_required=s.get("configRequired", {}),
                default_config=s.get("defaultConfig", {}),
            )
        )
        counts.sensors += 1
    await session.flush()
    return counts


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)

    database = Database(get_settings())
    try:
        async with database.writer_session() as session:
            counts = await seed_reference_data(session, data)
    finally:
        await database.dispose()
    print(
        f"Seed completed: {counts.units} units, {counts.models} models, "
        f"{counts.sensors} sensors added."
    )


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "docs" / "reference-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
