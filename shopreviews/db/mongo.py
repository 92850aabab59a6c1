# shopreviews/db/mongo.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from shopreviews.core.config import get_settings
import certifi

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None


def get_db() -> AsyncIOMotorDatabase:
    assert _db is not None, "Mongo DB not initialized"
    return _db


def _new_client(uri: str, tls: bool) -> AsyncIOMotorClient:
    options = dict(
        tz_aware=True,                      # datetimes come back as UTC-aware
        uuidRepresentation="standard",
        serverSelectionTimeoutMS=6000,
        connectTimeoutMS=6000,
    )
    if tls:
        options.update(tls=True, tlsCAFile=certifi.where())  # explicit CA bundle for containers
    return AsyncIOMotorClient(uri, **options)


async def connect():
    """
    Create the Motor client and ping once.
    A failed ping is only logged: the client stays lazy and the first real
    query reconnects once the server is reachable.
    """
    global _client, _db
    settings = get_settings()

    _client = _new_client(settings.MONGO_URI, settings.MONGO_TLS)
    _db = _client[settings.MONGO_DB]
    try:
        await _client.admin.command("ping")
        logger.info("Mongo connected (ping ok) db=%s", settings.MONGO_DB)
    except Exception as e:
        logger.warning("Mongo ping at startup failed, connecting lazily: %s", e)


async def disconnect():
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
