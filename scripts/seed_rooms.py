#!/usr/bin/env python3
"""
Seed the rooms table with generated data.

Usage:
    python scripts/seed_rooms.py [COUNT]
"""

import logging
import random
import sys
import time
from typing import Any, Dict

from dotenv import load_dotenv
from faker import Faker

load_dotenv()

from rentomatic.domain.entities.room_entity import Room
from rentomatic.infrastructure.database.operations import DatabaseManager
from rentomatic.infrastructure.repositories.sqlalchemy_room_repository import (
    SQLAlchemyRoomRepository,
)

fake = Faker()

ROOM_COUNT = 100
BATCH_SIZE = 1000  # Process in batches for memory efficiency

logger = logging.getLogger(__name__)


def generate_room_data() -> Dict[str, Any]:
    """Generate realistic room data"""
    latitude, longitude = fake.local_latlng(country_code="GB", coords_only=True)
    return {
        "code": fake.uuid4(),
        "size": random.randint(50, 400),
        "price": random.randint(20, 120),
        "longitude": float(longitude),
        "latitude": float(latitude),
    }


def seed_rooms(repository: SQLAlchemyRoomRepository, count: int) -> int:
    """Store ``count`` generated rooms in batches"""
    stored = 0
    while stored < count:
        batch = [
            Room.from_dict(generate_room_data())
            for _ in range(min(BATCH_SIZE, count - stored))
        ]
        stored += repository.add_all(batch)
    return stored


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    count = int(sys.argv[1]) if len(sys.argv) > 1 else ROOM_COUNT

    database = DatabaseManager()
    database.init_db()
    repository = SQLAlchemyRoomRepository(database.get_session)

    start_time = time.time()
    stored = seed_rooms(repository, count)
    logger.info("Seeded %d room(s) in %.2fs", stored, time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
