# server/database.py

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection

from server.config import Settings
from server.logger import get_logger


logger = get_logger("database")


def connect(settings: Settings) -> MongoClient:
    """
    Opens the MongoDB client and pings the server.
    Raises pymongo's ServerSelectionTimeoutError / ConnectionFailure when unreachable.
    """
    client = MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        tz_aware=True,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    logger.info("MongoDB connected (database=%s)", settings.mongodb_database)
    return client


def get_users_collection(client: MongoClient, settings: Settings) -> Collection:
    return client[settings.mongodb_database][settings.users_collection]


def init_db(collection: Collection):
    # Email uniqueness is enforced by the store, not only by lookup-then-insert.
    collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
