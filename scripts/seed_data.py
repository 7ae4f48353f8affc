#!/usr/bin/env python
"""
Load the demo catalog (pantry basics, Pancakes, Tomato Basil Pasta).

Safe to re-run: nothing is written once the catalog has any data.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from pantry_recipes.app.db.session import SessionLocal
from pantry_recipes.app.services import seed_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed")


def run_seed() -> int:
    with SessionLocal() as db:
        try:
            stats = seed_service.seed_demo_data(db)
        except SQLAlchemyError:
            logger.exception("Seeding failed")
            return 1
    if stats["skipped"]:
        logger.info("Catalog not empty; nothing seeded")
    return 0


if __name__ == "__main__":
    raise SystemExit(run_seed())
