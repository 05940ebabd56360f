"""Seed database from the JSON data files.

Usage:
    python -m app.tools.seed_db
    python -m app.tools.seed_db --data-dir data
    python -m app.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import uuid
from pathlib import Path

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.adapters.json_loader.loader import load_offices, load_regions
from app.adapters.persistence.database import async_session_factory, engine, init_models
from app.adapters.persistence.models import OfficeModel, RegionModel

logger = logging.getLogger(__name__)

OFFICES_FILE = "offices.json"
REGIONS_FILE = "regions.json"


async def _drop_data(session: AsyncSession) -> None:
    for model in [OfficeModel, RegionModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


async def seed(
    data_dir: Path,
    drop: bool = False,
    session_factory: async_sessionmaker[AsyncSession] = async_session_factory,
    bind: AsyncEngine = engine,
) -> dict[str, int]:
    """Main seed function. Existing ids are left untouched; returns counts of new records."""
    counts = {"regions": 0, "offices": 0}

    offices_path = data_dir / OFFICES_FILE
    regions_path = data_dir / REGIONS_FILE
    if not offices_path.exists():
        raise FileNotFoundError(f"No {OFFICES_FILE} found in {data_dir}")

    await init_models(bind)

    async with session_factory() as session:
        if drop:
            await _drop_data(session)

        # 1. Regions (optional file), keeping file order
        if regions_path.exists():
            last_region = (
                await session.execute(select(func.max(RegionModel.sort_order)))
            ).scalar() or 0
            for rd in load_regions(regions_path):
                if await session.get(RegionModel, rd["id"]):
                    logger.debug("Region '%s' already exists, skipping", rd["id"])
                    continue
                last_region += 1
                session.add(RegionModel(id=rd["id"], name=rd["name"], sort_order=last_region))
                counts["regions"] += 1
            await session.commit()
        else:
            logger.info("No %s found, skipping region import", REGIONS_FILE)

        # 2. Offices, keeping file order
        last = (await session.execute(select(func.max(OfficeModel.sort_order)))).scalar() or 0
        for od in load_offices(offices_path):
            office_id = od.pop("id") or str(uuid.uuid4())
            if await session.get(OfficeModel, office_id):
                logger.debug("Office '%s' already exists, skipping", office_id)
                continue
            last += 1
            session.add(OfficeModel(id=office_id, sort_order=last, **od))
            counts["offices"] += 1
        await session.commit()

    logger.info("Seed complete: %d regions, %d offices", counts["regions"], counts["offices"])
    return counts


async def _verify_data() -> None:
    """Print sanity checks after seeding."""
    async with async_session_factory() as session:
        offices = (await session.execute(select(OfficeModel))).scalars().all()
        regions = (await session.execute(select(RegionModel))).scalars().all()

        print(f"\n{'='*50}")
        print("SEED VERIFICATION")
        print(f"{'='*50}")
        print(f"Regions: {len(regions)}")
        print(f"Offices: {len(offices)}")

        by_type: dict[str, int] = {}
        for o in offices:
            by_type[o.type] = by_type.get(o.type, 0) + 1
        print(f"Type distribution: {by_type}")

        known = {r.id for r in regions}
        orphans = [o.name for o in offices if o.region_id not in known]
        print(f"Offices with unknown region: {orphans or 'none'}")
        print(f"{'='*50}\n")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    parser = argparse.ArgumentParser(description="Seed the office database from JSON files")
    parser.add_argument(
        "--data-dir", type=str, default="data",
        help="Directory containing the JSON data files (default: data)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing data before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    async def run_all():
        await init_models()
        if not args.verify_only:
            await seed(data_dir, drop=args.drop)
        await _verify_data()
        await engine.dispose()

    try:
        asyncio.run(run_all())
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
