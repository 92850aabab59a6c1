# shopreviews/db/sequences.py
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

COUNTERS_COLLECTION = "counters"


async def next_id(db: AsyncIOMotorDatabase, name: str) -> int:
    """
    Atomically allocate the next integer id for `name` (1, 2, 3, ...).
    Ids are never reused, even after deletes.
    """
    doc = await db[COUNTERS_COLLECTION].find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(doc["seq"])
